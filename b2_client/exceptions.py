"""
B2 client exception hierarchy.

All exceptions inherit from B2Error for easy catching.
"""

from typing import Any


class B2Error(Exception):
    """Base exception for all b2_client errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class AuthenticationError(B2Error):
    """No authorized session is available for the operation."""


class APIError(B2Error):
    """The service answered with an error document (status >= 400)."""

    def __init__(
        self, message: str, *, status: int, code: str, endpoint: str | None = None
    ) -> None:
        super().__init__(message, status=status, code=code, endpoint=endpoint)
        self.status = status
        self.code = code
        self.endpoint = endpoint


class UnauthorizedError(APIError):
    """Credentials rejected or auth token expired."""


class NotFoundError(APIError):
    """Bucket or file does not exist."""


class RateLimitError(APIError):
    """Too many requests."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status: int = 429,
        code: str = "too_many_requests",
        endpoint: str | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, status=status, code=code, endpoint=endpoint)
        self.retry_after = retry_after


class ServerError(APIError):
    """Server-side error (5xx)."""


class TransportError(B2Error):
    """The exchange could not complete (connection, timeout, unreadable body)."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message, endpoint=endpoint)
        self.endpoint = endpoint


class ValidationError(B2Error):
    """A value was rejected locally before being sent."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message, field=field)
        self.field = field


class UnknownBucketTypeError(ValidationError):
    """A bucket type identifier has no matching BucketType."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown bucket type: {value!r}", field="bucketType")
        self.value = value


class PaginationError(B2Error):
    """A paginated listing did not converge."""
