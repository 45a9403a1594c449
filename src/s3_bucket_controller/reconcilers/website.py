"""Static website reconciliation for buckets."""

from __future__ import annotations

import logging

from ..models import WebsiteConfiguration
from ..services.s3.base import BucketGateway
from ..utils.errors import ReconcileError

logger = logging.getLogger(__name__)


def build_website_configuration(index_document: str, error_document: str) -> WebsiteConfiguration:
    """Build a website configuration, leaving out empty documents."""
    return WebsiteConfiguration(
        index_suffix=index_document or None,
        error_key=error_document or None,
    )


def reconcile_website(
    gateway: BucketGateway,
    bucket: str,
    enabled: bool,
    index_document: str = "",
    error_document: str = "",
) -> None:
    """Put or delete the website configuration of a bucket.

    The decision depends only on the arguments, never on remote state, so a
    single call converges from any starting point. An enabled website with no
    documents is still submitted.

    Args:
        gateway: Provider gateway
        bucket: Bucket name
        enabled: Whether website hosting should be enabled
        index_document: Index document suffix, ignored when empty
        error_document: Error document key, ignored when empty

    Raises:
        ReconcileError: If the provider call fails
    """
    if enabled:
        config = build_website_configuration(index_document, error_document)
        logger.debug(f"Enabling website for bucket {bucket}: {config}")
        try:
            gateway.put_bucket_website(bucket, config)
        except Exception as e:
            raise ReconcileError("put_website", bucket, e) from e
    else:
        logger.debug(f"Disabling website for bucket {bucket}")
        try:
            gateway.delete_bucket_website(bucket)
        except Exception as e:
            raise ReconcileError("delete_website", bucket, e) from e
