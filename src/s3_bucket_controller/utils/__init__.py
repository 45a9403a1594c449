"""Utility functions for the S3 Bucket Controller."""

from .conditions import (
    remove_condition,
    set_bucket_not_ready_condition,
    set_creation_failed_condition,
    set_ready_condition,
    update_condition,
)
from .errors import (
    BucketControllerError,
    BucketNotFoundError,
    PreconditionError,
    ProviderError,
    ReconcileError,
    sanitize_exception,
)
from .events import emit_event
from .secrets import get_secret_value

__all__ = [
    "update_condition",
    "remove_condition",
    "set_ready_condition",
    "set_creation_failed_condition",
    "set_bucket_not_ready_condition",
    "BucketControllerError",
    "BucketNotFoundError",
    "PreconditionError",
    "ProviderError",
    "ReconcileError",
    "sanitize_exception",
    "emit_event",
    "get_secret_value",
]
