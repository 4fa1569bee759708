"""DRF exception handler producing the standard error payload.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.  Every exception
escaping a DRF view, including ones DRF does not know about, is turned
into an ``ApiError`` response; nothing is re-raised to Django.
"""

from __future__ import annotations

from typing import Any, Dict

from rest_framework.response import Response
from rest_framework.views import set_rollback

from modules.core.errors import map_exception


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    request = context.get("request")
    path = request.path if request is not None else ""

    error = map_exception(exc, path)
    set_rollback()

    response = Response(error.model_dump(mode="json"), status=error.status)
    auth_header = getattr(exc, "auth_header", None)
    if auth_header:
        response["WWW-Authenticate"] = auth_header
    return response
