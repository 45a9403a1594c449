"""S3 Bucket Controller - declarative reconciliation of S3 buckets."""

__version__ = "0.1.0"
