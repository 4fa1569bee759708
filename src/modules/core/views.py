import time
from typing import Any, Dict

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.errors import map_exception

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except DatabaseError:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


def page_not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """``handler404`` for paths outside DRF views."""
    error = map_exception(exception, request.path)
    return JsonResponse(error.model_dump(mode="json"), status=error.status)


def server_error(request: HttpRequest) -> JsonResponse:
    """``handler500``; the original exception was already logged by Django."""
    error = map_exception(RuntimeError("unhandled server error"), request.path)
    return JsonResponse(error.model_dump(mode="json"), status=error.status)
