"""
Custom Exceptions

This module defines the exceptions raised by the spoo.me clients.

Every failure of a client call is one of four kinds:
- InvalidRequestError: the request failed a local check, nothing was sent
- ApiError: the service answered with a non-2xx status
- TransportError: the call never completed (DNS, TLS, timeout, reset)
- DecodeError: a 2xx body did not match the expected schema

All of them derive from SpoomeError, so callers can catch one type.
"""

from enum import Enum
from typing import Any, Optional


class SpoomeError(Exception):
    """Base exception for the spoo.me client."""
    pass


class InvalidRequestError(SpoomeError):
    """Raised when a request object fails validation before any network call."""

    def __init__(self, field: str, value: Any, reason: str = "Invalid value"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {field}={value!r}")


class ApiErrorCode(str, Enum):
    """Error codes the service reports in its error bodies."""
    URL_ERROR = "UrlError"
    ALIAS_ERROR = "AliasError"
    PASSWORD_ERROR = "PasswordError"
    MAX_CLICKS_ERROR = "MaxClicksError"
    EMOJI_ERROR = "EmojiError"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["ApiErrorCode"]:
        """Map a raw error code onto a known member, None if unknown."""
        try:
            return cls(raw)
        except ValueError:
            return None


class ApiError(SpoomeError):
    """
    Raised when the service returns a non-2xx status.

    Attributes:
        status_code: HTTP status of the response
        code: Known error code, None when the body carried none or an unknown one
        error: Raw error code string as sent by the service, if any
        message: Human readable message (raw body text when unstructured)
        body: Raw response body
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[str] = None,
        body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error = error
        self.code = ApiErrorCode.parse(error)
        self.body = body
        label = f" {error}" if error else ""
        super().__init__(f"HTTP {status_code}{label}: {message}")


class TransportError(SpoomeError):
    """Raised when the HTTP call could not be completed."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Transport error: {message}")


class DecodeError(SpoomeError):
    """Raised when a successful response cannot be parsed into its model."""

    def __init__(self, message: str, body: Optional[str] = None, original_error: Exception = None):
        self.body = body
        self.original_error = original_error
        super().__init__(f"Decode error: {message}")
