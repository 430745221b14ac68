"""Request validation for product create/update payloads.

Pydantic checks every field of ``CreateProductDTO`` and reports all
failures at once; this module turns its error list into the
``{"Field": "message"}`` map returned to clients.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductValidationError
from modules.products.models import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS

BODY_FIELD = "Body"

_FIELD_LABELS = {
    "name": "Name",
    "Name": "Name",
    "price": "Price",
    "Price": "Price",
    "quantity": "Quantity",
    "Quantity": "Quantity",
}

_TYPE_MESSAGES = {
    "string_type": "{field} must be a string.",
    "decimal_type": "{field} must be a number.",
    "decimal_parsing": "{field} must be a number.",
    "finite_number": "{field} must be a number.",
    "decimal_max_places": "{field} must have at most {places} decimal places.",
    "decimal_max_digits": "{field} must have at most {digits} digits.",
    "decimal_whole_digits": (
        "{field} must have at most {whole} digits before the decimal point."
    ),
    "int_type": "{field} must be an integer.",
    "int_parsing": "{field} must be an integer.",
    "int_from_float": "{field} must be an integer.",
}


def _message_for(field: str, error: ErrorDetails) -> str:
    if error["type"] == "missing" or error.get("input", ...) is None:
        return f"{field} is required."
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    template = _TYPE_MESSAGES.get(error["type"])
    if template is not None:
        return template.format(
            field=field,
            places=PRICE_DECIMAL_PLACES,
            digits=PRICE_MAX_DIGITS,
            whole=PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES,
        )
    return error["msg"]


def _parse(payload: Any) -> Tuple[Optional[CreateProductDTO], Dict[str, str]]:
    if not isinstance(payload, Mapping):
        return None, {BODY_FIELD: "Request body must be a JSON object."}

    try:
        return CreateProductDTO.model_validate(dict(payload)), {}
    except PydanticValidationError as exc:
        violations: Dict[str, str] = {}
        for error in exc.errors():
            loc = error["loc"][0] if error["loc"] else BODY_FIELD
            field = _FIELD_LABELS.get(str(loc), str(loc))
            violations.setdefault(field, _message_for(field, error))
        return None, violations


def collect_violations(payload: Any) -> Dict[str, str]:
    """Return every broken field rule in ``payload`` (empty when valid)."""
    return _parse(payload)[1]


def validate_create_product(payload: Any) -> CreateProductDTO:
    """Parse ``payload`` into a ``CreateProductDTO``.

    Raises:
        ProductValidationError: with one message per violated field.
    """
    dto, violations = _parse(payload)
    if dto is None:
        raise ProductValidationError(violations)
    return dto
