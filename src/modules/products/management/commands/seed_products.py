from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository

_ADJECTIVES = ["Compact", "Deluxe", "Heavy-Duty", "Portable", "Classic", "Smart"]
_NOUNS = ["Widget", "Gadget", "Sprocket", "Lamp", "Kettle", "Toolkit", "Speaker"]


class Command(BaseCommand):
    help = "Seed the database with sample products for development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=25,
            help="Number of products to create (default: 25).",
        )

    def handle(self, *args, **options):
        random.seed(42)
        repo = ProductDjangoRepository()
        existing = set(repo.query().values_list("name", flat=True))

        created = 0
        for idx in range(1, options["count"] + 1):
            name = f"{random.choice(_ADJECTIVES)} {random.choice(_NOUNS)} {idx:03d}"
            if name in existing:
                continue
            repo.add(
                Product(
                    name=name,
                    price=Decimal(random.randint(199, 49999)) / 100,
                    quantity=random.randint(0, 500),
                )
            )
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
