"""
Error types raised by the Steam Web API client.

Every failure is a ``SteamError`` carrying a ``kind`` plus optional
diagnostic context, so callers can branch on the kind and still log
the underlying cause.
"""

from enum import Enum


class SteamErrorKind(str, Enum):
    """Classification of a failed Steam API call."""

    REQUEST_FAILED = "request_failed"
    UNAUTHORIZED = "unauthorized"
    NO_DATA = "no_data"


class SteamError(Exception):
    """Base exception for Steam API errors."""

    kind: SteamErrorKind = SteamErrorKind.REQUEST_FAILED

    def __init__(
        self,
        message: str,
        *,
        detail: str | None = None,
        endpoint: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.endpoint = endpoint
        self.status_code = status_code
        self.original_error = original_error

    def __str__(self) -> str:
        return f"Error response from steam: {self.message}"

    def to_dict(self) -> dict[str, str | int | None]:
        """Structured form of the error, for logs and CLI output."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "detail": self.detail,
            "endpoint": self.endpoint,
            "status_code": self.status_code,
        }


class RequestFailedError(SteamError):
    """Raised on transport errors and unexpected HTTP statuses."""

    kind = SteamErrorKind.REQUEST_FAILED


class UnauthorizedError(SteamError):
    """Raised on HTTP 401: either an invalid API key or private data."""

    kind = SteamErrorKind.UNAUTHORIZED


class NoDataError(SteamError):
    """Raised when a successful response does not contain the expected payload."""

    kind = SteamErrorKind.NO_DATA
