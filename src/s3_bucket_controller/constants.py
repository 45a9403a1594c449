"""Constants for the S3 Bucket Controller."""

# API Group
API_GROUP = "s3.cloud37.dev"
API_GROUP_VERSION = f"{API_GROUP}/v1alpha1"

# Resource Kinds
KIND_BUCKET = "Bucket"

# Finalizers
FINALIZER = f"{API_GROUP}/bucket-finalizer"

# Controller name used in structured logs
CONTROLLER_NAME = "s3-bucket-controller"

# The provider's default region must not be sent as a LocationConstraint
DEFAULT_REGION = "us-east-1"
DEFAULT_ACL = "private"

CANNED_ACLS = frozenset(
    {
        "private",
        "public-read",
        "public-read-write",
        "authenticated-read",
        "aws-exec-read",
        "bucket-owner-read",
        "bucket-owner-full-control",
        "log-delivery-write",
    }
)

# Condition Types
COND_READY = "Ready"
COND_BUCKET_NOT_READY = "BucketNotReady"
COND_CREATION_FAILED = "CreationFailed"

# Event Reasons
EVENT_REASON_RECONCILE_STARTED = "ReconcileStarted"
EVENT_REASON_RECONCILE_FAILED = "ReconcileFailed"
EVENT_REASON_VALIDATE_SUCCEEDED = "ValidateSucceeded"
EVENT_REASON_VALIDATE_FAILED = "ValidateFailed"
EVENT_REASON_BUCKET_CREATED = "BucketCreated"
EVENT_REASON_BUCKET_UPDATED = "BucketUpdated"
EVENT_REASON_BUCKET_DELETED = "BucketDeleted"
EVENT_REASON_DRIFT_DETECTED = "DriftDetected"
