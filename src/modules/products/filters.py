import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    minPrice = django_filters.NumberFilter(field_name="price", lookup_expr="gte")  # noqa: N815
    maxPrice = django_filters.NumberFilter(field_name="price", lookup_expr="lte")  # noqa: N815

    class Meta:
        model = Product
        fields = ["name", "minPrice", "maxPrice"]
