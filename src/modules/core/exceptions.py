"""Infrastructure exceptions and the DRF exception handler.

``PersistenceError`` is raised by repository implementations when the
database driver fails (connection loss, driver exception).  Handlers map it
to a 500 envelope while the process keeps serving other requests.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.responses import error_response

logger = structlog.get_logger(__name__)


class PersistenceError(Exception):
    """The persistence collaborator failed to complete an operation."""


def _flatten_detail(detail: Any) -> list[str]:
    if isinstance(detail, dict):
        messages = []
        for key, value in detail.items():
            for item in _flatten_detail(value):
                if key in ("detail", "non_field_errors"):
                    messages.append(item)
                else:
                    messages.append(f"{key}: {item}")
        return messages
    if isinstance(detail, list):
        return [message for item in detail for message in _flatten_detail(item)]
    return [str(detail)]


def envelope_exception_handler(exc: Exception, context: dict) -> Optional[Response]:
    """Render DRF-level errors (bad JSON, method not allowed...) as envelopes.

    Returns ``None`` for anything DRF does not know about so the exception
    reaches ``JsonErrorMiddleware``.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    messages = _flatten_detail(response.data)
    logger.warning(
        "request.rejected",
        status_code=response.status_code,
        error_type=type(exc).__name__,
    )
    envelope = error_response(
        messages[0] if len(messages) == 1 else "Request Error",
        status=response.status_code,
        errors=messages if len(messages) > 1 else None,
    )
    for header in ("Allow", "Retry-After"):
        if header in response:
            envelope[header] = response[header]
    return envelope
