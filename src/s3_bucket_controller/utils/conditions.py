"""Helpers for the status.conditions list of Bucket resources."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ..constants import COND_BUCKET_NOT_READY, COND_CREATION_FAILED, COND_READY

Conditions = list[dict[str, Any]]


def update_condition(
    conditions: Conditions,
    condition_type: str,
    status: str,
    reason: str,
    message: str,
    observed_generation: int | None = None,
) -> Conditions:
    """Set a condition, replacing any previous one of the same type.

    ``lastTransitionTime`` only moves when ``status`` ("True", "False" or
    "Unknown") actually changes. The list is modified in place and returned.
    """
    previous = next((c for c in conditions if c.get("type") == condition_type), None)

    transition_time = datetime.now(timezone.utc).isoformat()
    if previous is not None and previous.get("status") == status:
        transition_time = previous.get("lastTransitionTime", transition_time)

    condition = {
        "type": condition_type,
        "status": status,
        "reason": reason,
        "message": message,
        "lastTransitionTime": transition_time,
    }
    if observed_generation is not None:
        condition["observedGeneration"] = observed_generation

    if previous is None:
        conditions.append(condition)
    else:
        conditions[conditions.index(previous)] = condition
    return conditions


def remove_condition(conditions: Conditions, condition_type: str) -> Conditions:
    return [c for c in conditions if c.get("type") != condition_type]


def set_ready_condition(
    conditions: Conditions, ready: bool, message: str, observed_generation: int | None = None
) -> Conditions:
    status, reason = ("True", "Ready") if ready else ("False", "NotReady")
    return update_condition(conditions, COND_READY, status, reason, message, observed_generation)


def set_creation_failed_condition(
    conditions: Conditions, message: str, observed_generation: int | None = None
) -> Conditions:
    return update_condition(conditions, COND_CREATION_FAILED, "True", "CreationFailed", message, observed_generation)


def set_bucket_not_ready_condition(
    conditions: Conditions, message: str, observed_generation: int | None = None
) -> Conditions:
    """Mark a bucket that is known to the resource but missing from the provider."""
    return update_condition(conditions, COND_BUCKET_NOT_READY, "True", "BucketNotReady", message, observed_generation)
