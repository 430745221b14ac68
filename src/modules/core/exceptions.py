"""Cross-cutting exceptions and the uniform error envelope.

Every non-2xx response produced outside of field validation uses the
same JSON body::

    {"StatusCode": 404, "Message": "Product with ID 7 not found."}

``ApplicationError`` marks faults caused by the client; the exception
middleware answers them with 400 instead of a generic 500.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from rest_framework.response import Response
from rest_framework.views import exception_handler

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class ApplicationError(Exception):
    """A fault raised on purpose because the request cannot be honoured.

    The message is safe to show to the client.
    """


def error_body(status_code: int, message: str) -> Dict[str, Any]:
    return {"StatusCode": status_code, "Message": message}


def error_response(status_code: int, message: str) -> Response:
    """DRF ``Response`` carrying the standard error envelope."""
    return Response(error_body(status_code, message), status=status_code)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Reshape DRF's handled exceptions into the error envelope.

    Exceptions DRF does not know about make the default handler return
    ``None``; they escape the view and are translated by
    ``ExceptionHandlingMiddleware``.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    message = str(detail) if detail is not None else str(exc)
    response.data = error_body(response.status_code, message)
    return response
