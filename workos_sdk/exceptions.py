"""
WorkOS SDK - Exception classes for error handling.

Every operation raises one of the classes below; nothing else escapes a call
except ``AlreadyConsumedError``, which signals a programming error.
"""
from typing import Generic, Optional, TypeVar

E = TypeVar("E")


class WorkOsError(Exception):
    """Base exception for all WorkOS SDK errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OperationError(WorkOsError, Generic[E]):
    """Raised when the API returned an endpoint-specific error payload."""

    def __init__(self, error: E):
        super().__init__(f"operational error: {error}")
        self.error = error


class UnauthorizedError(WorkOsError):
    """Raised when the API rejected the credential (HTTP 401)."""

    def __init__(self, message: str = "unauthorized"):
        super().__init__(message)


class UrlParseError(WorkOsError):
    """Raised when a request URL could not be built."""

    def __init__(self, url: str, reason: Optional[str] = None):
        message = f"URL parse error: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.url = url


class AddressParseError(WorkOsError):
    """Raised when an IP address parameter is not a valid address."""

    def __init__(self, value: str):
        super().__init__(f"IP address parse error: {value!r}")
        self.value = value


class RequestError(WorkOsError):
    """
    Raised when the request failed below the HTTP semantics layer.

    Covers DNS, connection, TLS and timeout failures as well as bodies that
    could not be serialized or decoded. ``status`` is set when the failure was
    produced by ``error_for_status``.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status: Optional[int] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.status = status


class ApiError(WorkOsError):
    """Raised for an unsuccessful HTTP status other than 401."""

    def __init__(self, status: int, body: str):
        super().__init__(f"API error {status}: {body}")
        self.status = status
        self.body = body
