"""Error types for bucket reconciliation and sanitization utilities."""

from __future__ import annotations

import re


class BucketControllerError(Exception):
    """Base class for all controller errors."""


class ProviderError(BucketControllerError):
    """A failure returned by the provider gateway."""

    def __init__(
        self,
        bucket: str,
        operation: str,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.bucket = bucket
        self.operation = operation
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(f"{operation} on bucket {bucket} failed: {message}")


class BucketNotFoundError(ProviderError):
    """The provider reports that the bucket does not exist."""


class ReconcileError(BucketControllerError):
    """Annotates a failed reconciliation step with the bucket and operation.

    The underlying exception is available as ``__cause__``.
    """

    def __init__(self, operation: str, bucket: str, cause: Exception) -> None:
        self.operation = operation
        self.bucket = bucket
        self.cause = cause
        # Some provider errors stringify to an empty message
        detail = str(cause) or type(cause).__name__
        super().__init__(f"error during {operation} of S3 bucket \"{bucket}\": {detail}")


class PreconditionError(BucketControllerError, ValueError):
    """A lifecycle operation was invoked in the wrong state."""


# Provider credentials that can show up verbatim in botocore messages
SENSITIVE_PATTERNS = [
    r"(access[_\s]?key[_\s]?id[:\s]+)[A-Z0-9]{20}",
    r"(secret[_\s]?access[_\s]?key[:\s]+)[A-Za-z0-9/+=]{40}",
    r"(session[_\s]?token[:\s]+)[A-Za-z0-9/+=]+",
]

# "field: value" pairs whose value is always redacted
SENSITIVE_FIELDS = (
    "access_key_id",
    "secret_access_key",
    "session_token",
    "password",
    "secret",
    "credentials",
    "token",
)


def sanitize_error_message(message: str) -> str:
    """Redact credentials from a message before it is logged or posted as an event."""
    for pattern in SENSITIVE_PATTERNS:
        message = re.sub(pattern, r"\1[REDACTED]", message, flags=re.IGNORECASE)
    for field in SENSITIVE_FIELDS:
        message = re.sub(rf"({field}[:\s]+)[^\s,;\)]+", r"\1[REDACTED]", message, flags=re.IGNORECASE)
    return message


def sanitize_exception(error: Exception) -> str:
    return sanitize_error_message(str(error))
