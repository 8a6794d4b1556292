"""Client-specific exceptions."""

from __future__ import annotations


class RestError(Exception):
    """Base exception for all REST client failures."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class RestArgumentError(RestError, ValueError):
    """Raised when a required argument is missing or invalid."""


class RestURIError(RestError, ValueError):
    """Raised when a request path cannot be turned into a valid URI."""


class RestClientError(RestError):
    """Raised when the transport could not complete a request."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        uri: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.method = method
        self.uri = uri


class RestResponseValidationError(RestError):
    """Raised when a response body cannot be parsed into the requested type."""
