"""Translation of failures into structured API error payloads.

``map_exception`` is the single place where domain errors and
transport-level failures become ``{code, message, status, path,
timestamp}``.  It returns a value and logs as a side effect:
client-correctable failures at warning level, access denials and
internal failures at error level.  Messages for 401, 403 and
unclassified failures are fixed strings; the details only go to the
log.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping

import structlog
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from django.utils import timezone
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions as drf_exceptions
from rest_framework import status

from shared.domain.exceptions import (
    RESOURCE_NOT_FOUND,
    VALIDATION_ERROR,
    BusinessError,
    NotFoundError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

ACCESS_DENIED = "ACCESS_DENIED"
UNAUTHORIZED = "UNAUTHORIZED"
INTERNAL_ERROR = "INTERNAL_ERROR"

ACCESS_DENIED_MESSAGE = "Access denied"
UNAUTHORIZED_MESSAGE = "Authentication credentials were not provided or are invalid"
NOT_FOUND_MESSAGE = "The requested resource was not found"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


class ApiError(BaseModel):
    """Immutable error payload returned to HTTP clients."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    status: int
    path: str
    timestamp: datetime = Field(default_factory=timezone.now)


def map_exception(exc: BaseException, path: str) -> ApiError:
    """Map ``exc`` raised while serving ``path`` to an ``ApiError``."""
    log = logger.bind(path=path, exception=type(exc).__name__)

    if isinstance(exc, NotFoundError):
        log.warning("api.resource_not_found", code=exc.code, detail=exc.message)
        return ApiError(
            code=exc.code,
            message=exc.message,
            status=status.HTTP_404_NOT_FOUND,
            path=path,
        )

    if isinstance(exc, ValidationError):
        log.warning("api.validation_failed", code=exc.code, detail=exc.message)
        return ApiError(
            code=exc.code,
            message=exc.message,
            status=status.HTTP_400_BAD_REQUEST,
            path=path,
        )

    if isinstance(exc, BusinessError):
        log.error("api.business_error", code=exc.code, detail=exc.message)
        return ApiError(
            code=exc.code,
            message=exc.message,
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            path=path,
        )

    if isinstance(
        exc,
        (
            PydanticValidationError,
            drf_exceptions.ValidationError,
            drf_exceptions.ParseError,
        ),
    ):
        errors = _field_errors(exc)
        message = f"Validation failed: {errors}"
        log.warning("api.request_invalid", errors=errors)
        return ApiError(
            code=VALIDATION_ERROR,
            message=message,
            status=status.HTTP_400_BAD_REQUEST,
            path=path,
        )

    if isinstance(
        exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)
    ):
        log.warning("api.unauthenticated", detail=str(exc))
        return ApiError(
            code=UNAUTHORIZED,
            message=UNAUTHORIZED_MESSAGE,
            status=status.HTTP_401_UNAUTHORIZED,
            path=path,
        )

    if isinstance(exc, (drf_exceptions.PermissionDenied, DjangoPermissionDenied)):
        log.error("api.access_denied", detail=str(exc))
        return ApiError(
            code=ACCESS_DENIED,
            message=ACCESS_DENIED_MESSAGE,
            status=status.HTTP_403_FORBIDDEN,
            path=path,
        )

    if isinstance(exc, (Http404, drf_exceptions.NotFound)):
        log.warning("api.route_not_found")
        return ApiError(
            code=RESOURCE_NOT_FOUND,
            message=NOT_FOUND_MESSAGE,
            status=status.HTTP_404_NOT_FOUND,
            path=path,
        )

    if isinstance(exc, drf_exceptions.APIException):
        log.warning("api.request_rejected", status_code=exc.status_code)
        return ApiError(
            code=str(exc.default_code).upper(),
            message=str(exc.detail),
            status=exc.status_code,
            path=path,
        )

    log.error("api.unexpected_error", exc_info=exc)
    return ApiError(
        code=INTERNAL_ERROR,
        message=INTERNAL_ERROR_MESSAGE,
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        path=path,
    )


def _field_errors(exc: Exception) -> Dict[str, str]:
    """Flatten request-shape failures into ``{field: reason}`` pairs."""
    if isinstance(exc, PydanticValidationError):
        errors: Dict[str, str] = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
            errors.setdefault(field, error["msg"])
        return errors

    detail: Any = exc.detail  # type: ignore[attr-defined]
    if isinstance(detail, Mapping):
        return {str(field): _join(reasons) for field, reasons in detail.items()}
    return {"non_field_errors": _join(detail)}


def _join(reasons: Any) -> str:
    if isinstance(reasons, (list, tuple)):
        return "; ".join(_join(reason) for reason in reasons)
    if isinstance(reasons, Mapping):
        return "; ".join(f"{key}: {_join(value)}" for key, value in reasons.items())
    return str(reasons)
