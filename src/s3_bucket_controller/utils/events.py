"""Kubernetes events posted against Bucket resources."""

from __future__ import annotations

from typing import Any

import kopf

from ..constants import (
    EVENT_REASON_BUCKET_CREATED,
    EVENT_REASON_BUCKET_DELETED,
    EVENT_REASON_BUCKET_UPDATED,
    EVENT_REASON_DRIFT_DETECTED,
    EVENT_REASON_RECONCILE_FAILED,
    EVENT_REASON_RECONCILE_STARTED,
    EVENT_REASON_VALIDATE_FAILED,
    EVENT_REASON_VALIDATE_SUCCEEDED,
)


def emit_event(meta: dict[str, Any], reason: str, message: str, type_: str = "Normal") -> None:
    """Post an event; ``type_`` is "Normal" or "Warning"."""
    kopf.event(meta, reason=reason, message=message, type=type_)


def emit_reconcile_started(meta: dict[str, Any]) -> None:
    emit_event(meta, EVENT_REASON_RECONCILE_STARTED, "Reconciliation started")


def emit_reconcile_failed(meta: dict[str, Any], message: str) -> None:
    emit_event(meta, EVENT_REASON_RECONCILE_FAILED, message, type_="Warning")


def emit_validate_succeeded(meta: dict[str, Any]) -> None:
    emit_event(meta, EVENT_REASON_VALIDATE_SUCCEEDED, "Validation succeeded")


def emit_validate_failed(meta: dict[str, Any], message: str) -> None:
    emit_event(meta, EVENT_REASON_VALIDATE_FAILED, message, type_="Warning")


def _emit_bucket_event(meta: dict[str, Any], reason: str, bucket_name: str, action: str) -> None:
    emit_event(meta, reason, f"Bucket {bucket_name} {action}")


def emit_bucket_created(meta: dict[str, Any], bucket_name: str) -> None:
    _emit_bucket_event(meta, EVENT_REASON_BUCKET_CREATED, bucket_name, "created")


def emit_bucket_updated(meta: dict[str, Any], bucket_name: str) -> None:
    _emit_bucket_event(meta, EVENT_REASON_BUCKET_UPDATED, bucket_name, "updated")


def emit_bucket_deleted(meta: dict[str, Any], bucket_name: str) -> None:
    _emit_bucket_event(meta, EVENT_REASON_BUCKET_DELETED, bucket_name, "deleted")


def emit_drift_detected(meta: dict[str, Any], bucket_name: str) -> None:
    """Warn that a bucket with a recorded identity is missing from the provider."""
    emit_event(
        meta,
        EVENT_REASON_DRIFT_DETECTED,
        f"Bucket {bucket_name} no longer exists, it will be re-created",
        type_="Warning",
    )
