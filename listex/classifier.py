"""Status code to outcome mapping for API responses."""

from __future__ import annotations

from listex.exceptions import (
    InternalServerError,
    ListexError,
    Locked,
    MethodNotAllowed,
    MethodNotFound,
    NoAccess,
    NotAuthorized,
    NotModified,
    RequestError,
    RequestLimitReached,
    ServiceNotAvailable,
    UnknownError,
)
from listex.models import RawResponse, StatusCode

# Maps HTTP status codes to exception classes and their messages.
_STATUS_MAP: dict[StatusCode, tuple[type[ListexError], str]] = {
    StatusCode.NOT_MODIFIED: (NotModified, "Not modified"),
    StatusCode.REQUEST_ERROR: (RequestError, "Request error"),
    StatusCode.NOT_AUTHORIZED: (NotAuthorized, "Not authorized"),
    StatusCode.NO_ACCESS: (NoAccess, "No access"),
    StatusCode.METHOD_NOT_ALLOWED: (MethodNotAllowed, "Method not allowed"),
    StatusCode.LOCKED: (Locked, "Locked"),
    StatusCode.REQUEST_LIMIT_REACHED: (RequestLimitReached, "Request limit reached"),
    StatusCode.INTERNAL_SERVER_ERROR: (InternalServerError, "Internal server error"),
    StatusCode.METHOD_NOT_FOUND: (MethodNotFound, "Method not found"),
    StatusCode.SERVICE_NOT_AVAILABLE: (ServiceNotAvailable, "Service not available"),
}


def build_exception(
    status_code: int, body: str, response: RawResponse | None = None,
) -> ListexError:
    """Construct the exception for a non-success *status_code*."""
    try:
        exc_cls, detail = _STATUS_MAP[StatusCode(status_code)]
    except (KeyError, ValueError):
        return UnknownError(status_code, "Unknown error", response)
    if exc_cls is RequestError:
        return RequestError(status_code, detail, response, body=body)
    return exc_cls(status_code, detail, response)


def classify(status: int, body: str, response: RawResponse | None = None) -> str:
    """Return the body for a successful *status*, raise otherwise.

    200 passes *body* through and 404 yields an empty string. Every other
    status raises the matching :class:`ListexError` subclass.
    """
    if status == StatusCode.OK:
        return body
    if status == StatusCode.NO_DATA_FOUND:
        return ""
    raise build_exception(status, body, response)
