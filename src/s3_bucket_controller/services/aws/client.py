"""AWS S3 gateway implementation."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ... import metrics
from ...models import Tag, WebsiteConfiguration
from ...utils.errors import BucketNotFoundError, ProviderError

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})


def translate_client_error(error: Exception, bucket: str, operation: str) -> ProviderError:
    """Convert a botocore exception into a gateway error.

    Args:
        error: Exception raised by botocore
        bucket: Bucket the call addressed
        operation: Gateway operation name

    Returns:
        BucketNotFoundError for a missing bucket, ProviderError otherwise
    """
    if isinstance(error, ClientError):
        err = error.response.get("Error", {})
        code = str(err.get("Code", ""))
        status_code = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        message = err.get("Message") or code or str(error)
        # Other 404s (NoSuchTagSet, NoSuchWebsiteConfiguration) carry their own code
        if code in NOT_FOUND_CODES or (status_code == 404 and not code):
            return BucketNotFoundError(bucket, operation, message, code=code, status_code=status_code)
        return ProviderError(bucket, operation, message, code=code, status_code=status_code)
    return ProviderError(bucket, operation, str(error))


class AWSProvider:
    """AWS S3 gateway implementation."""

    def __init__(
        self,
        region: str,
        endpoint: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        session_token: str | None = None,
        path_style: bool = True,
        max_attempts: int = 3,
    ) -> None:
        """Initialize AWS S3 gateway.

        Args:
            region: AWS region the client signs requests for
            endpoint: Optional S3 endpoint URL override
            access_key: Access key ID; the default credential chain is used when omitted
            secret_key: Secret access key
            session_token: Optional session token for temporary credentials
            path_style: Use path-style addressing
            max_attempts: Total attempts per call, including botocore retries
        """
        self.endpoint = endpoint
        self.region = region
        self.path_style = path_style

        # Transient transport failures are retried here, never in the reconciler
        config = Config(
            signature_version="s3v4",
            s3={"addressing_style": "path" if path_style else "auto"},
            retries={"max_attempts": max_attempts, "mode": "standard"},
        )

        self.client = boto3.client(
            "s3",
            endpoint_url=endpoint,
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            aws_session_token=session_token,
            config=config,
        )

    def _call(self, operation: str, bucket: str, fn: Callable[..., Any], **kwargs: Any) -> Any:
        """Invoke a boto3 operation, recording metrics and translating errors."""
        start_time = time.time()
        try:
            response = fn(**kwargs)
            metrics.api_call_total.labels(api_type="s3", operation=operation, result="success").inc()
            return response
        except (ClientError, BotoCoreError) as e:
            metrics.api_call_total.labels(api_type="s3", operation=operation, result="error").inc()
            raise translate_client_error(e, bucket, operation) from e
        finally:
            duration = time.time() - start_time
            metrics.api_call_duration_seconds.labels(api_type="s3", operation=operation).observe(duration)

    def create_bucket(self, name: str, acl: str, location_constraint: str | None = None) -> None:
        """Create a bucket with the given canned ACL."""
        create_params: dict[str, Any] = {"Bucket": name, "ACL": acl}
        if location_constraint:
            create_params["CreateBucketConfiguration"] = {"LocationConstraint": location_constraint}

        logger.debug(f"S3 create bucket: {create_params}")
        try:
            self._call("create_bucket", name, self.client.create_bucket, **create_params)
        except ProviderError as e:
            logger.error(f"Failed to create bucket {name}: {e}")
            raise

    def head_bucket(self, name: str) -> None:
        """Check that a bucket exists."""
        self._call("head_bucket", name, self.client.head_bucket, Bucket=name)

    def delete_bucket(self, name: str) -> None:
        """Delete a bucket."""
        logger.debug(f"S3 delete bucket: {name}")
        try:
            self._call("delete_bucket", name, self.client.delete_bucket, Bucket=name)
        except ProviderError as e:
            logger.error(f"Failed to delete bucket {name}: {e}")
            raise

    def put_bucket_website(self, name: str, config: WebsiteConfiguration) -> None:
        """Set bucket website configuration."""
        website_config: dict[str, Any] = {}
        if config.index_suffix:
            website_config["IndexDocument"] = {"Suffix": config.index_suffix}
        if config.error_key:
            website_config["ErrorDocument"] = {"Key": config.error_key}

        logger.debug(f"S3 put bucket website: {name} {website_config}")
        self._call(
            "put_bucket_website",
            name,
            self.client.put_bucket_website,
            Bucket=name,
            WebsiteConfiguration=website_config,
        )

    def delete_bucket_website(self, name: str) -> None:
        """Remove bucket website configuration."""
        logger.debug(f"S3 delete bucket website: {name}")
        try:
            self._call("delete_bucket_website", name, self.client.delete_bucket_website, Bucket=name)
        except ProviderError as e:
            # Website not configured
            if e.code == "NoSuchWebsiteConfiguration":
                return
            raise

    def get_bucket_tags(self, name: str) -> list[Tag]:
        """Get bucket tag set."""
        try:
            response = self._call("get_bucket_tagging", name, self.client.get_bucket_tagging, Bucket=name)
        except ProviderError as e:
            # Tags not configured
            if e.code == "NoSuchTagSet":
                return []
            raise
        return [Tag(key=tag["Key"], value=tag["Value"]) for tag in response.get("TagSet", [])]

    def put_bucket_tags(self, name: str, tags: list[Tag]) -> None:
        """Replace the bucket tag set."""
        if not tags:
            # S3 rejects an empty TagSet; clearing is a delete
            self._call("delete_bucket_tagging", name, self.client.delete_bucket_tagging, Bucket=name)
            return

        tag_set = [{"Key": tag.key, "Value": tag.value} for tag in tags]
        self._call(
            "put_bucket_tagging",
            name,
            self.client.put_bucket_tagging,
            Bucket=name,
            Tagging={"TagSet": tag_set},
        )
