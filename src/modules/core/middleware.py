import uuid
from contextvars import ContextVar
from typing import Callable, Optional

import structlog
from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
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
        )

        response["X-Request-ID"] = cid
        return response


class JsonErrorMiddleware:
    """Last-resort handler turning uncaught exceptions into JSON envelopes.

    The status comes from the exception's ``status`` attribute (500 when
    absent).  The exception detail is attached only when
    ``EXPOSE_ERROR_DETAILS`` is enabled, i.e. outside production.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        return self.get_response(request)

    def process_exception(
        self, request: HttpRequest, exception: Exception
    ) -> Optional[HttpResponse]:
        status_code = getattr(exception, "status", None)
        if not isinstance(status_code, int):
            status_code = 500

        logger.exception(
            "request.unhandled_error",
            method=request.method,
            path=request.get_full_path(),
            status_code=status_code,
            error_type=type(exception).__name__,
        )

        error = {}
        if settings.EXPOSE_ERROR_DETAILS:
            error = {"type": type(exception).__name__, "detail": str(exception)}

        return JsonResponse(
            {
                "success": False,
                "message": str(exception) or "Internal Server Error",
                "error": error,
            },
            status=status_code,
        )
