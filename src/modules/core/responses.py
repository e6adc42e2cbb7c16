"""Uniform JSON envelope: ``{success, message?, data?, error?, errors?}``."""

from __future__ import annotations

from typing import Any, Optional

from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(
    data: Any = None,
    *,
    message: Optional[str] = None,
    status: int = http_status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = data
    return Response(body, status=status)


def error_response(
    message: str,
    *,
    status: int,
    errors: Optional[list[str]] = None,
    error: Any = None,
) -> Response:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    if error is not None:
        body["error"] = error
    return Response(body, status=status)
