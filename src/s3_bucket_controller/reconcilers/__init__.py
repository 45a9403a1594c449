"""Bucket reconcilers."""

from .lifecycle import BucketReconciler
from .tags import fetch_tags, reconcile_tags, tags_from_wire, tags_to_wire
from .website import build_website_configuration, reconcile_website

__all__ = [
    "BucketReconciler",
    "build_website_configuration",
    "fetch_tags",
    "reconcile_tags",
    "reconcile_website",
    "tags_from_wire",
    "tags_to_wire",
]
