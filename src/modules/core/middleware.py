import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

import structlog
from django.http import HttpRequest, HttpResponse, JsonResponse

from modules.core.exceptions import GENERIC_ERROR_MESSAGE, ApplicationError, error_body

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware:
    """Binds a correlation ID to every request and logs its outcome.

    Reads the X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is stored in a ContextVar so structlog
    processors can inject it into every log line, and is returned to the
    client via the X-Request-ID response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        started = time.monotonic()
        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response["X-Request-ID"] = cid
        return response


class ExceptionHandlingMiddleware:
    """Last line of defence: turns any escaped exception into JSON.

    ``ApplicationError`` becomes a 400 carrying the exception's message;
    everything else becomes a 500 with a fixed message so internal
    details never leak. The original exception is always logged with
    its traceback first.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        return self.get_response(request)

    def process_exception(
        self, request: HttpRequest, exception: Exception
    ) -> Optional[HttpResponse]:
        logger.error(
            "unhandled_exception",
            method=request.method,
            path=request.get_full_path(),
            error_type=type(exception).__name__,
            exc_info=exception,
        )

        if isinstance(exception, ApplicationError):
            status_code, message = 400, str(exception)
        else:
            status_code, message = 500, GENERIC_ERROR_MESSAGE

        return JsonResponse(error_body(status_code, message), status=status_code)
