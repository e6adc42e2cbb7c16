import time
from functools import wraps
from typing import Optional

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()

_PROCESS_STARTED = time.monotonic()

API_VERSION = "1.0.0"

ENDPOINTS = {
    "getAllProducts": "GET /api/products",
    "getProductById": "GET /api/products/:id",
    "getProductsByCategory": "GET /api/products/category/:category",
    "createProduct": "POST /api/products",
    "updateProduct": "PUT /api/products/:id",
    "deleteProduct": "DELETE /api/products/:id",
    "deleteAllProducts": "DELETE /api/products",
}


def route_not_found(
    request: HttpRequest, exception: Optional[Exception] = None
) -> JsonResponse:
    path = request.get_full_path()
    logger.info("route_not_found", method=request.method, path=path)
    return JsonResponse(
        {"success": False, "message": f"Route {path} not found"},
        status=404,
    )


def get_only(view):
    """Serve GET/HEAD; any other method is an unknown route."""

    @wraps(view)
    def inner(request: HttpRequest, *args, **kwargs):
        if request.method not in ("GET", "HEAD"):
            return route_not_found(request)
        return view(request, *args, **kwargs)

    return inner


@get_only
def api_root(request: HttpRequest) -> JsonResponse:
    """Directory of the available endpoints."""
    return JsonResponse(
        {
            "message": "Welcome to Product CRUD API",
            "version": API_VERSION,
            "endpoints": ENDPOINTS,
        }
    )


@get_only
def health_check(request: HttpRequest) -> JsonResponse:
    uptime = round(time.monotonic() - _PROCESS_STARTED, 3)
    logger.debug("health_check_completed", uptime=uptime)
    return JsonResponse(
        {
            "status": "UP",
            "timestamp": timezone.now().isoformat(),
            "uptime": uptime,
        }
    )
