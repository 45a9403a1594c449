"""Base handler class with common functionality for resource handlers."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, NoReturn

import kopf

from .. import metrics
from ..constants import CONTROLLER_NAME, FINALIZER
from ..logging import log_resource_event
from ..utils.errors import sanitize_exception
from ..utils.events import emit_reconcile_failed, emit_reconcile_started, emit_validate_failed


class BaseHandler:
    """Finalizers, status writes, metrics and structured logs shared by handlers."""

    def __init__(self, kind: str):
        self.kind = kind
        self.logger = logging.getLogger(__name__)

    def _log(self, level: int, meta: dict[str, Any], message: str, event: str, reason: str, **fields: Any) -> None:
        log_resource_event(
            self.logger,
            controller=CONTROLLER_NAME,
            resource_kind=self.kind,
            resource_name=meta.get("name", "unknown"),
            namespace=meta.get("namespace", "default"),
            uid=meta.get("uid", "unknown"),
            event=event,
            reason=reason,
            message=message,
            level=level,
            **fields,
        )

    def log_info(self, meta: dict[str, Any], message: str, event: str = "info", reason: str = "Info",
                 **fields: Any) -> None:
        self._log(logging.INFO, meta, message, event, reason, **fields)

    def log_warning(self, meta: dict[str, Any], message: str, event: str = "warning", reason: str = "Warning",
                    **fields: Any) -> None:
        self._log(logging.WARNING, meta, message, event, reason, **fields)

    def log_error(
        self,
        meta: dict[str, Any],
        message: str,
        error: Exception | None = None,
        event: str = "error",
        reason: str = "Error",
        **fields: Any,
    ) -> None:
        """Log at error level, attaching the sanitized error and its type when given."""
        if error is not None:
            fields = {**fields, "error": sanitize_exception(error), "error_type": type(error).__name__}
        self._log(logging.ERROR, meta, message, event, reason, **fields)

    def handle_validation_error(self, meta: dict[str, Any], error_msg: str) -> NoReturn:
        """Report an invalid spec and stop retrying it.

        Raises:
            kopf.PermanentError: Always
        """
        self.log_error(meta, error_msg, reason="ValidationFailed")
        emit_validate_failed(meta, error_msg)
        metrics.reconcile_total.labels(kind=self.kind, result="failed").inc()
        raise kopf.PermanentError(error_msg)

    def ensure_finalizer(self, meta: dict[str, Any], patch: kopf.Patch) -> None:
        finalizers = list(meta.get("finalizers", []))
        if FINALIZER in finalizers:
            return
        patch.metadata["finalizers"] = [*finalizers, FINALIZER]

    def remove_finalizer(self, meta: dict[str, Any], patch: kopf.Patch) -> None:
        finalizers = list(meta.get("finalizers", []))
        if FINALIZER not in finalizers:
            return
        remaining = [f for f in finalizers if f != FINALIZER]
        patch.metadata["finalizers"] = remaining or None

    def reconcile_with_metrics(self, meta: dict[str, Any], reconcile_fn: Callable[[], None]) -> None:
        """Run one reconciliation pass, counting and timing it.

        Failures are logged, reported as a Warning event and re-raised so kopf
        schedules a retry.
        """
        emit_reconcile_started(meta)
        metrics.reconcile_total.labels(kind=self.kind, result="started").inc()

        start_time = time.time()
        try:
            reconcile_fn()
        except Exception as e:
            metrics.error_total.labels(kind=self.kind, error_type=type(e).__name__).inc()
            metrics.reconcile_total.labels(kind=self.kind, result="error").inc()
            self.log_error(meta, "Reconciliation failed", error=e, reason="ReconciliationFailed")
            emit_reconcile_failed(meta, f"Reconciliation failed: {sanitize_exception(e)}")
            raise
        else:
            metrics.reconcile_total.labels(kind=self.kind, result="success").inc()
        finally:
            metrics.reconcile_duration_seconds.labels(kind=self.kind).observe(time.time() - start_time)

    def update_resource_status(
        self,
        patch: kopf.Patch,
        meta: dict[str, Any],
        ready: bool,
        status_data: dict[str, Any] | None = None,
    ) -> None:
        """Merge status fields into the patch, stamped with the observed generation."""
        metrics.resource_status_total.labels(kind=self.kind, status="ready" if ready else "not_ready").inc()
        patch.status.update({"observedGeneration": meta.get("generation", 0), **(status_data or {})})
