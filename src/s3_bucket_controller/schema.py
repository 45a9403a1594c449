"""Declarative schema of the Bucket resource fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_ACL


@dataclass(frozen=True)
class FieldSchema:
    """Schema metadata for one resource field.

    ``key`` is the field name in the resource spec, ``name`` the attribute on
    ``BucketDesiredState``. A force-new field can only be set at creation.
    """

    name: str
    key: str
    type: type
    default: Any = None
    required: bool = False
    force_new: bool = False


BUCKET_SCHEMA: tuple[FieldSchema, ...] = (
    FieldSchema("name", "bucket", str, required=True, force_new=True),
    FieldSchema("acl", "acl", str, default=DEFAULT_ACL, force_new=True),
    FieldSchema("website", "website", bool, default=False),
    FieldSchema("index_document", "indexDocument", str, default=""),
    FieldSchema("error_document", "errorDocument", str, default=""),
    FieldSchema("tags", "tags", dict, default=None),
)


def force_new_fields() -> tuple[FieldSchema, ...]:
    """Fields whose change requires the bucket to be re-created."""
    return tuple(f for f in BUCKET_SCHEMA if f.force_new)
