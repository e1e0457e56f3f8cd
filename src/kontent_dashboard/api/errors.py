"""Translate API client errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from kontent_dashboard.errors import (
    InvalidDataError,
    KontentError,
    LocaleResolutionError,
    NotFoundError,
    PermissionDeniedError,
    PublishedConflictError,
    SubscriptionNotConfiguredError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[KontentError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    InvalidDataError: status.HTTP_400_BAD_REQUEST,
    PublishedConflictError: status.HTTP_409_CONFLICT,
    LocaleResolutionError: status.HTTP_503_SERVICE_UNAVAILABLE,
    SubscriptionNotConfiguredError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: KontentError) -> int:
    for error_cls, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_cls):
            return code
    return status.HTTP_502_BAD_GATEWAY


async def handle_kontent_error(_request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, KontentError)
    code = status_for(exc)
    logger.warning("%s (%d): %s", type(exc).__name__, code, exc)
    return JSONResponse(status_code=code, content={"detail": str(exc), "error": type(exc).__name__})


async def handle_value_error(_request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})
