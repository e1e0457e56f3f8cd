"""Error taxonomy for calls against the Kontent.ai APIs."""

from __future__ import annotations

import httpx

_PUBLISHED_MARKERS = ("published", "cannot be updated")


class KontentError(Exception):
    """Base class; carries the HTTP status and response text when there was one."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class NotFoundError(KontentError):
    pass


class PermissionDeniedError(KontentError):
    pass


class InvalidDataError(KontentError):
    pass


class PublishedConflictError(KontentError):
    """The variant is published and must be unpublished before it can change."""


class TransportError(KontentError):
    pass


class LocaleResolutionError(KontentError):
    pass


class SubscriptionNotConfiguredError(KontentError):
    pass


_STATUS_ERRORS: dict[int, type[KontentError]] = {
    400: InvalidDataError,
    401: PermissionDeniedError,
    403: PermissionDeniedError,
    404: NotFoundError,
}


def is_published_conflict(body: str) -> bool:
    lowered = body.lower()
    return all(marker in lowered for marker in _PUBLISHED_MARKERS)


def error_for_status(status_code: int, body: str, context: str) -> KontentError:
    if is_published_conflict(body):
        return PublishedConflictError(f"{context}: variant is published and cannot be updated", status_code, body)
    error_cls = _STATUS_ERRORS.get(status_code, TransportError)
    if error_cls is NotFoundError:
        return NotFoundError(f"{context} not found", status_code, body)
    if error_cls is PermissionDeniedError:
        return PermissionDeniedError(f"{context}: permission denied ({status_code})", status_code, body)
    return error_cls(f"{context} failed with HTTP {status_code}: {body}", status_code, body)


def raise_for_response(response: httpx.Response, context: str) -> None:
    """Raise the classified error for a non-2xx response."""
    if response.is_success:
        return
    raise error_for_status(response.status_code, response.text, context)
