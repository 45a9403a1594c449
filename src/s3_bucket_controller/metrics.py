"""Prometheus metrics for the S3 Bucket Controller."""

from prometheus_client import Counter, Histogram

PREFIX = "s3_bucket_controller"

# Handler passes
reconcile_total = Counter(
    f"{PREFIX}_reconcile_total",
    "Reconciliation passes by resource kind and result",
    ["kind", "result"],
)

reconcile_duration_seconds = Histogram(
    f"{PREFIX}_reconcile_duration_seconds",
    "Wall time of one reconciliation pass",
    ["kind"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

error_total = Counter(
    f"{PREFIX}_error_total",
    "Failed reconciliation passes by exception type",
    ["kind", "error_type"],
)

resource_status_total = Counter(
    f"{PREFIX}_resource_status_total",
    "Status writes by readiness",
    ["kind", "status"],
)

# Lifecycle operations: create, read, update, delete
bucket_operations_total = Counter(
    f"{PREFIX}_bucket_operations_total",
    "Bucket lifecycle operations by result",
    ["operation", "result"],
)

drift_detected_total = Counter(
    f"{PREFIX}_drift_detected_total",
    "Buckets found to differ from their recorded state",
    ["kind", "resource_type"],
)

# Provider calls, one per gateway operation
api_call_total = Counter(
    f"{PREFIX}_api_call_total",
    "Provider API calls by operation and result",
    ["api_type", "operation", "result"],
)

api_call_duration_seconds = Histogram(
    f"{PREFIX}_api_call_duration_seconds",
    "Latency of provider API calls, retries included",
    ["api_type", "operation"],
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)
