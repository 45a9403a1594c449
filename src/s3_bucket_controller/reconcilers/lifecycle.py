"""Lifecycle reconciler for buckets."""

from __future__ import annotations

import logging

from .. import metrics
from ..constants import DEFAULT_REGION, KIND_BUCKET
from ..models import BucketDesiredState, BucketObservedState
from ..services.s3.base import BucketGateway
from ..tracing import trace_span
from ..utils.errors import BucketNotFoundError, PreconditionError, ReconcileError
from .tags import fetch_tags, reconcile_tags
from .website import reconcile_website

logger = logging.getLogger(__name__)


class BucketReconciler:
    """Converges one bucket at a time towards its desired state.

    Every gateway call is attempted at most once and the first failure aborts
    the operation. Holds no state between calls besides its collaborators.
    """

    def __init__(
        self,
        gateway: BucketGateway,
        region: str,
        default_region: str = DEFAULT_REGION,
    ) -> None:
        """Initialize the reconciler.

        Args:
            gateway: Provider gateway used for every remote call
            region: Configured provider region, used only when creating
            default_region: Region that must not be sent as a location constraint
        """
        self.gateway = gateway
        self.region = region
        self.default_region = default_region

    def location_constraint(self) -> str | None:
        """Location constraint for new buckets, None in the default region."""
        if self.region == self.default_region:
            return None
        return self.region

    def create(self, desired: BucketDesiredState, observed: BucketObservedState) -> str:
        """Create the bucket, then converge website and tags.

        Returns:
            The assigned identity (the bucket name)

        Raises:
            PreconditionError: If the bucket already has an identity
            ReconcileError: If any step fails
        """
        if observed.identity:
            raise PreconditionError(f"bucket {observed.identity} already exists, refusing to create it again")

        with trace_span("create_bucket", kind=KIND_BUCKET, attributes={"bucket.name": desired.name}):
            logger.debug(f"S3 bucket create: {desired.name}, ACL: {desired.acl}")
            try:
                self.gateway.create_bucket(desired.name, desired.acl, self.location_constraint())
            except Exception as e:
                metrics.bucket_operations_total.labels(operation="create", result="failed").inc()
                raise ReconcileError("create", desired.name, e) from e

            metrics.bucket_operations_total.labels(operation="create", result="success").inc()
            observed.identity = desired.name
            logger.info(f"Created bucket {desired.name}")

        self.update(desired, observed)
        return observed.identity

    def update(self, desired: BucketDesiredState, observed: BucketObservedState) -> None:
        """Push tags and website configuration, then refresh observed state.

        A failure leaves earlier steps applied; the next pass repeats all of them.

        Raises:
            PreconditionError: If the bucket has no identity
            ReconcileError: If any step fails
        """
        if not observed.identity:
            raise PreconditionError(f"bucket {desired.name} has no identity, create it first")

        bucket = observed.identity
        with trace_span("update_bucket", kind=KIND_BUCKET, attributes={"bucket.name": bucket}):
            try:
                reconcile_tags(self.gateway, bucket, desired.tags)
                reconcile_website(
                    self.gateway,
                    bucket,
                    desired.website,
                    desired.index_document,
                    desired.error_document,
                )
            except ReconcileError as e:
                metrics.bucket_operations_total.labels(operation="update", result="failed").inc()
                logger.error(f"Failed to update bucket {bucket}: {e}")
                raise
            metrics.bucket_operations_total.labels(operation="update", result="success").inc()

        self.read(observed)

    def read(self, observed: BucketObservedState) -> BucketObservedState:
        """Refresh observed state from the provider.

        A missing bucket is not an error by itself: the identity is cleared so
        the caller knows to create it again. The tag set is fetched either way
        and a failed fetch is raised even after the identity was cleared.

        Raises:
            PreconditionError: If the bucket has no identity
            ReconcileError: If the existence check or tag fetch fails
        """
        if not observed.identity:
            raise PreconditionError("cannot read a bucket without an identity")

        bucket = observed.identity
        with trace_span("read_bucket", kind=KIND_BUCKET, attributes={"bucket.name": bucket}):
            try:
                self.gateway.head_bucket(bucket)
            except BucketNotFoundError:
                logger.warning(f"S3 bucket {bucket} not found, clearing identity")
                metrics.drift_detected_total.labels(kind=KIND_BUCKET, resource_type="existence").inc()
                observed.identity = ""
            except Exception as e:
                metrics.bucket_operations_total.labels(operation="read", result="failed").inc()
                raise ReconcileError("read", bucket, e) from e

            try:
                observed.tags = fetch_tags(self.gateway, bucket)
            except ReconcileError:
                metrics.bucket_operations_total.labels(operation="read", result="failed").inc()
                raise

            metrics.bucket_operations_total.labels(operation="read", result="success").inc()
        return observed

    def delete(self, observed: BucketObservedState) -> None:
        """Delete the bucket.

        Errors, including a bucket that is already gone, propagate unchanged.
        The identity is left for the caller to clear.

        Raises:
            PreconditionError: If the bucket has no identity
        """
        if not observed.identity:
            raise PreconditionError("cannot delete a bucket without an identity")

        bucket = observed.identity
        with trace_span("delete_bucket", kind=KIND_BUCKET, attributes={"bucket.name": bucket}):
            logger.debug(f"S3 delete bucket: {bucket}")
            try:
                self.gateway.delete_bucket(bucket)
            except Exception:
                metrics.bucket_operations_total.labels(operation="delete", result="failed").inc()
                raise
            metrics.bucket_operations_total.labels(operation="delete", result="success").inc()
            logger.info(f"Deleted bucket {bucket}")
