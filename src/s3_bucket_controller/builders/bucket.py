"""Builders translating Bucket resources to and from reconciler state."""

from __future__ import annotations

from typing import Any

from ..constants import CANNED_ACLS
from ..models import BucketDesiredState, BucketObservedState
from ..schema import BUCKET_SCHEMA, force_new_fields


def create_desired_state_from_spec(spec: dict[str, Any]) -> BucketDesiredState:
    """Create the desired bucket state from a resource spec.

    Args:
        spec: Bucket resource spec

    Returns:
        Typed desired state with schema defaults applied

    Raises:
        ValueError: If a field is missing or invalid
    """
    values: dict[str, Any] = {}
    for field in BUCKET_SCHEMA:
        value = spec.get(field.key)
        if value is None or (field.required and value == ""):
            if field.required:
                raise ValueError(f"{field.key} is required")
            if field.default is not None:
                values[field.name] = field.default
            continue
        if not isinstance(value, field.type):
            raise ValueError(f"{field.key} must be of type {field.type.__name__}")
        values[field.name] = value

    tags = values.get("tags") or {}
    for key, value in tags.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError("tags must map strings to strings")
    values["tags"] = dict(tags)

    acl = values.get("acl")
    if acl is not None and acl not in CANNED_ACLS:
        raise ValueError(f"unsupported acl {acl!r}, expected one of: {', '.join(sorted(CANNED_ACLS))}")

    return BucketDesiredState(**values)


def observed_state_from_status(status: dict[str, Any]) -> BucketObservedState:
    """Load the observed bucket state persisted in a resource status."""
    return BucketObservedState(
        identity=status.get("identity") or "",
        tags=dict(status.get("tags") or {}),
    )


def status_from_observed_state(observed: BucketObservedState) -> dict[str, Any]:
    """Status fields persisting the observed bucket state."""
    return {
        "identity": observed.identity,
        "exists": observed.exists,
        "tags": dict(observed.tags),
    }


def creation_status(desired: BucketDesiredState, region: str) -> dict[str, Any]:
    """Status fields recording the write-once values a bucket was created with."""
    recorded = {field.key: getattr(desired, field.name) for field in force_new_fields()}
    recorded["region"] = region
    return recorded


def find_force_new_changes(desired: BucketDesiredState, status: dict[str, Any]) -> list[str]:
    """List force-new fields whose desired value differs from creation time.

    Args:
        desired: Desired bucket state
        status: Resource status holding the recorded creation values

    Returns:
        Resource keys of the changed fields
    """
    changed = []
    for field in force_new_fields():
        recorded = status.get(field.key)
        if recorded is not None and recorded != getattr(desired, field.name):
            changed.append(field.key)
    return changed
