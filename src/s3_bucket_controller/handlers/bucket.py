"""Handler for Bucket resources."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import kopf

from ..builders.bucket import (
    create_desired_state_from_spec,
    creation_status,
    find_force_new_changes,
    observed_state_from_status,
    status_from_observed_state,
)
from ..config import get_config
from ..constants import API_GROUP_VERSION, COND_BUCKET_NOT_READY, COND_CREATION_FAILED, KIND_BUCKET
from ..models import BucketDesiredState, BucketObservedState
from ..reconcilers.lifecycle import BucketReconciler
from ..tracing import trace_span
from ..utils.conditions import (
    remove_condition,
    set_bucket_not_ready_condition,
    set_creation_failed_condition,
    set_ready_condition,
)
from ..utils.errors import BucketNotFoundError, ReconcileError, sanitize_exception
from ..utils.events import (
    emit_bucket_created,
    emit_bucket_deleted,
    emit_bucket_updated,
    emit_drift_detected,
    emit_validate_succeeded,
)
from .base import BaseHandler
from .shared import get_reconciler


class BucketHandler(BaseHandler):
    """Handler for Bucket resources.

    Maps the resource spec to the desired bucket state and persists the
    observed state (identity and tags) in the resource status.
    """

    def __init__(self):
        super().__init__(KIND_BUCKET)

    def _desired_state(self, spec: dict[str, Any], meta: dict[str, Any]) -> BucketDesiredState:
        try:
            desired = create_desired_state_from_spec(spec)
        except ValueError as e:
            self.handle_validation_error(meta, str(e))
        emit_validate_succeeded(meta)
        return desired

    def _write_status(
        self,
        patch: kopf.Patch,
        meta: dict[str, Any],
        observed: BucketObservedState,
        conditions: list[dict[str, Any]],
        extra: dict[str, Any] | None = None,
    ) -> None:
        status_data = {
            **status_from_observed_state(observed),
            **(extra or {}),
            "conditions": conditions,
            "lastSyncTime": datetime.now(timezone.utc).isoformat(),
        }
        self.update_resource_status(patch, meta, observed.exists, status_data)

    def _create(
        self,
        reconciler: BucketReconciler,
        desired: BucketDesiredState,
        observed: BucketObservedState,
        meta: dict[str, Any],
        patch: kopf.Patch,
        conditions: list[dict[str, Any]],
    ) -> None:
        created = creation_status(desired, reconciler.region)
        try:
            reconciler.create(desired, observed)
        except ReconcileError as e:
            if observed.exists:
                # Created but not converged; keep the identity so the retry updates
                self.log_warning(meta, f"Bucket {desired.name} created but not converged: {sanitize_exception(e)}",
                                 reason="ConvergenceFailed", bucket_name=desired.name)
                emit_bucket_created(meta, desired.name)
                self._write_status(patch, meta, observed, conditions, created)
                raise
            error_msg = f"Failed to create bucket: {sanitize_exception(e)}"
            self.log_error(meta, error_msg, error=e, reason="CreationFailed", bucket_name=desired.name)
            conditions = set_creation_failed_condition(conditions, error_msg, meta.get("generation"))
            self._write_status(patch, meta, observed, conditions)
            raise

        emit_bucket_created(meta, desired.name)
        self.log_info(meta, f"Created bucket {desired.name}", reason="BucketCreated", bucket_name=desired.name)
        conditions = remove_condition(conditions, COND_CREATION_FAILED)
        conditions = remove_condition(conditions, COND_BUCKET_NOT_READY)
        conditions = set_ready_condition(conditions, True, f"Bucket {desired.name} is ready", meta.get("generation"))
        self._write_status(patch, meta, observed, conditions, created)

    def _handle_drift(
        self,
        meta: dict[str, Any],
        bucket_name: str,
        conditions: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        message = f"Bucket {bucket_name} no longer exists"
        self.log_warning(meta, message, reason="DriftDetected", bucket_name=bucket_name, resource_type="existence")
        emit_drift_detected(meta, bucket_name)
        conditions = set_bucket_not_ready_condition(conditions, message, meta.get("generation"))
        return set_ready_condition(conditions, False, message, meta.get("generation"))

    def _read_existing(self, meta: dict[str, Any], reconciler: BucketReconciler, observed: BucketObservedState) -> None:
        """Read the bucket, treating a tag fetch that fails on a bucket found missing as drift."""
        bucket_name = observed.identity
        try:
            reconciler.read(observed)
        except ReconcileError as e:
            if observed.exists or not isinstance(e.cause, BucketNotFoundError):
                raise
            self.log_warning(meta, f"Tags of missing bucket {bucket_name} could not be read: {sanitize_exception(e)}",
                             reason="TagFetchFailed", bucket_name=bucket_name)

    def _replace(
        self,
        reconciler: BucketReconciler,
        desired: BucketDesiredState,
        observed: BucketObservedState,
        meta: dict[str, Any],
        patch: kopf.Patch,
        conditions: list[dict[str, Any]],
    ) -> None:
        old_name = observed.identity
        self.log_info(meta, f"Bucket renamed from {old_name} to {desired.name}, re-creating",
                      reason="BucketReplaced", bucket_name=desired.name, previous_bucket=old_name)
        try:
            reconciler.delete(observed)
        except BucketNotFoundError:
            self.log_info(meta, f"Bucket {old_name} does not exist, skipping deletion",
                          reason="BucketNotExists", bucket_name=old_name)
        except Exception as e:
            self.log_error(meta, f"Failed to delete bucket {old_name}", error=e,
                           reason="DeletionFailed", bucket_name=old_name)
            raise
        else:
            emit_bucket_deleted(meta, old_name)

        self._create(reconciler, desired, BucketObservedState(), meta, patch, conditions)

    def reconcile(
        self,
        spec: dict[str, Any],
        meta: dict[str, Any],
        status: dict[str, Any],
        patch: kopf.Patch,
    ) -> None:
        """Create the bucket on first sight, update it afterwards.

        A changed bucket name deletes the old bucket and creates the new one.
        """
        with trace_span("reconcile_bucket", kind=KIND_BUCKET, attributes={"bucket.name": spec.get("bucket", "")}):
            desired = self._desired_state(spec, meta)
            observed = observed_state_from_status(status)
            conditions = list(status.get("conditions", []))
            reconciler = get_reconciler()

            if not observed.exists:
                self._create(reconciler, desired, observed, meta, patch, conditions)
                return

            changed = find_force_new_changes(desired, status)
            if "bucket" in changed:
                self._replace(reconciler, desired, observed, meta, patch, conditions)
                return
            if changed:
                self.handle_validation_error(
                    meta,
                    f"{', '.join(changed)} cannot be changed after bucket {observed.identity} was created",
                )

            try:
                reconciler.update(desired, observed)
            except ReconcileError as e:
                if not isinstance(e.cause, BucketNotFoundError):
                    raise
                # The bucket vanished underneath us; refresh so the retry re-creates it
                if observed.exists:
                    self._read_existing(meta, reconciler, observed)
                if observed.exists:
                    raise
                conditions = self._handle_drift(meta, desired.name, conditions)
                self._write_status(patch, meta, observed, conditions)
                raise kopf.TemporaryError(f"Bucket {desired.name} disappeared, re-creating", delay=5) from e

            if not observed.exists:
                conditions = self._handle_drift(meta, desired.name, conditions)
                self._write_status(patch, meta, observed, conditions)
                raise kopf.TemporaryError(f"Bucket {desired.name} disappeared, re-creating", delay=5)

            emit_bucket_updated(meta, desired.name)
            self.log_info(meta, f"Bucket {desired.name} configuration reconciled",
                          reason="ConfigurationReconciled", bucket_name=desired.name)
            conditions = set_ready_condition(conditions, True, f"Bucket {desired.name} is ready", meta.get("generation"))
            self._write_status(patch, meta, observed, conditions)

    def refresh(
        self,
        spec: dict[str, Any],
        meta: dict[str, Any],
        status: dict[str, Any],
        patch: kopf.Patch,
    ) -> None:
        """Refresh observed state and re-create a bucket that has disappeared."""
        observed = observed_state_from_status(status)
        if not observed.exists:
            return

        with trace_span("refresh_bucket", kind=KIND_BUCKET, attributes={"bucket.name": observed.identity}):
            reconciler = get_reconciler()
            conditions = list(status.get("conditions", []))
            bucket_name = observed.identity

            self._read_existing(meta, reconciler, observed)
            if observed.exists:
                self._write_status(patch, meta, observed, conditions)
                return

            conditions = self._handle_drift(meta, bucket_name, conditions)
            desired = self._desired_state(spec, meta)
            self._create(reconciler, desired, observed, meta, patch, conditions)

    def delete(
        self,
        spec: dict[str, Any],
        meta: dict[str, Any],
        status: dict[str, Any],
        patch: kopf.Patch,
    ) -> None:
        """Delete the bucket, then release the resource."""
        observed = observed_state_from_status(status)
        bucket_name = observed.identity or spec.get("bucket", "")

        self.log_info(meta, f"Bucket {bucket_name} is being deleted", event="deletion",
                      reason="Deletion", bucket_name=bucket_name)

        if observed.exists:
            with trace_span("delete_bucket", kind=KIND_BUCKET, attributes={"bucket.name": bucket_name}):
                try:
                    get_reconciler().delete(observed)
                    emit_bucket_deleted(meta, bucket_name)
                    self.log_info(meta, f"Deleted bucket {bucket_name}", reason="BucketDeleted",
                                  bucket_name=bucket_name)
                except BucketNotFoundError:
                    self.log_info(meta, f"Bucket {bucket_name} does not exist, skipping deletion",
                                  reason="BucketNotExists", bucket_name=bucket_name)
                except Exception as e:
                    self.log_error(meta, f"Failed to delete bucket {bucket_name}", error=e,
                                   reason="DeletionFailed", bucket_name=bucket_name)
                    raise
        else:
            self.log_info(meta, f"Bucket {bucket_name} was never created, skipping deletion",
                          reason="BucketNotExists", bucket_name=bucket_name)

        self.remove_finalizer(meta, patch)


# Global handler instance
_handler = BucketHandler()


@kopf.on.create(API_GROUP_VERSION, KIND_BUCKET)
@kopf.on.update(API_GROUP_VERSION, KIND_BUCKET, field="spec")
@kopf.on.resume(API_GROUP_VERSION, KIND_BUCKET)
def handle_bucket(
    spec: dict[str, Any],
    meta: dict[str, Any],
    status: dict[str, Any],
    patch: kopf.Patch,
    **kwargs: Any,
) -> None:
    """Handle Bucket resource reconciliation."""
    _handler.ensure_finalizer(meta, patch)
    _handler.reconcile_with_metrics(meta, lambda: _handler.reconcile(spec, meta, status, patch))


@kopf.timer(API_GROUP_VERSION, KIND_BUCKET, interval=get_config().drift_check_interval_seconds, idle=60)
def refresh_bucket(
    spec: dict[str, Any],
    meta: dict[str, Any],
    status: dict[str, Any],
    patch: kopf.Patch,
    **kwargs: Any,
) -> None:
    """Periodically refresh Bucket observed state."""
    _handler.reconcile_with_metrics(meta, lambda: _handler.refresh(spec, meta, status, patch))


@kopf.on.delete(API_GROUP_VERSION, KIND_BUCKET)
def handle_bucket_delete(
    spec: dict[str, Any],
    meta: dict[str, Any],
    status: dict[str, Any],
    patch: kopf.Patch,
    **kwargs: Any,
) -> None:
    """Handle Bucket resource deletion."""
    _handler.delete(spec, meta, status, patch)
