"""Tag reconciliation for buckets.

Tags are always pushed as a full replacement of the remote tag set. Nothing is
diffed against remote state, so an empty mapping clears every remote tag.
"""

from __future__ import annotations

import logging
from typing import Mapping

from ..models import Tag
from ..services.s3.base import BucketGateway
from ..utils.errors import ReconcileError

logger = logging.getLogger(__name__)


def tags_to_wire(tags: Mapping[str, str]) -> list[Tag]:
    """Convert a tag mapping to the provider tag list, ordered by key."""
    return [Tag(key=key, value=tags[key]) for key in sorted(tags)]


def tags_from_wire(tag_set: list[Tag]) -> dict[str, str]:
    """Convert a provider tag list to a mapping.

    The provider does not return duplicate keys; if it does, the last one wins.
    """
    return {tag.key: tag.value for tag in tag_set}


def reconcile_tags(gateway: BucketGateway, bucket: str, desired: Mapping[str, str]) -> None:
    """Replace the remote tag set of a bucket with the desired mapping."""
    tag_set = tags_to_wire(desired)
    logger.debug(f"S3 put bucket tags: {bucket} {tag_set}")
    try:
        gateway.put_bucket_tags(bucket, tag_set)
    except Exception as e:
        raise ReconcileError("put_tags", bucket, e) from e


def fetch_tags(gateway: BucketGateway, bucket: str) -> dict[str, str]:
    """Fetch the remote tag set of a bucket as a mapping."""
    try:
        tag_set = gateway.get_bucket_tags(bucket)
    except Exception as e:
        raise ReconcileError("get_tags", bucket, e) from e
    return tags_from_wire(tag_set)
