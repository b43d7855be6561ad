"""
Error types raised by the core layer.

Every failure surfaces as a CLIError subclass so the CLI can render it
uniformly.
"""

from http import HTTPStatus
from typing import Any


class CLIError(Exception):
    """Base error class for CLI errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class TransportError(CLIError):
    """The HTTP exchange could not complete (DNS, connection, timeout)."""


class MalformedEnvelopeError(CLIError):
    """A successful response did not carry a parseable {"response": ...} wrapper."""


class PayloadDecodeError(CLIError):
    """The inner payload did not match the expected shape."""


class APIError(CLIError):
    """
    Error response from the Spreaker API (HTTP status >= 400).

    Attributes:
        status_code: HTTP status code
        error_code: Spreaker error code from the error envelope (0 if unparseable)
        messages: Error messages from the API, in order

    """

    def __init__(
        self,
        status_code: int,
        error_code: int = 0,
        messages: list[str] | None = None,
        details: dict | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.messages = list(messages or [])
        if self.messages:
            message = f"spreaker API error {status_code}: {self.messages[0]}"
        else:
            message = f"spreaker API error {status_code}"
        super().__init__(message, details)

    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND

    def is_unauthorized(self) -> bool:
        return self.status_code == HTTPStatus.UNAUTHORIZED

    def is_rate_limited(self) -> bool:
        return self.status_code == HTTPStatus.TOO_MANY_REQUESTS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        result["status"] = self.status_code
        if self.error_code:
            result["code"] = self.error_code
        if self.messages:
            result["messages"] = self.messages
        return result


class ValidationError(CLIError):
    """Validation error for local input/data issues (not API errors)."""


class AuthRequiredError(ValidationError):
    """An authenticated call was attempted without a token."""

    def __init__(self, message: str = "authentication required: set SPREAKER_TOKEN or pass --token"):
        super().__init__(message)


class LocalFileError(ValidationError):
    """A file to upload could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read file {path}: {reason}", details={"path": path})
        self.path = path
