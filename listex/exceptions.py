"""Exception hierarchy for the Listex client."""

from __future__ import annotations

from listex.models import RawResponse


class ListexError(Exception):
    """Base exception for all Listex API errors."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        response: RawResponse | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.response = response
        super().__init__(f"{status_code}: {detail}")


class TransportError(ListexError):
    """The HTTP transport failed before a status code was received."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(0, f"Transport error ({code}): {message}")


class InvalidArgument(ListexError, ValueError):
    """Raised before any I/O when a call cannot be built."""

    def __init__(self, detail: str) -> None:
        super().__init__(0, detail)


class UnknownError(ListexError):
    """Status code outside the documented set."""


class NotModified(ListexError):
    """Raised on 304; the caller's cached copy is still current."""


class RequestError(ListexError):
    """Raised on 400. ``body`` holds the server's explanation verbatim."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        response: RawResponse | None = None,
        body: str = "",
    ) -> None:
        super().__init__(status_code, detail, response)
        self.body = body


class NotAuthorized(ListexError):
    """Raised on 401."""


class NoAccess(ListexError):
    """Raised on 403."""


class MethodNotAllowed(ListexError):
    """Raised on 405."""


class Locked(ListexError):
    """Raised on 423."""


class RequestLimitReached(ListexError):
    """Raised on 429."""

    @property
    def retry_after(self) -> int | None:
        """Seconds until the quota resets, if the server said."""
        if self.response is None:
            return None
        return self.response.retry_after


class InternalServerError(ListexError):
    """Raised on 500."""


class MethodNotFound(ListexError):
    """Raised on 501."""


class ServiceNotAvailable(ListexError):
    """Raised on 503."""
