"""Structured logging configuration for the S3 Bucket Controller.

Every handler log line is one JSON object on stdout so it can be shipped
without a parser. Records written through :func:`log_resource_event` always
carry these keys:

    controller  Controller that wrote the line, ``s3-bucket-controller``
    resource    Resource kind, ``Bucket``
    name        Name of the Bucket resource (not the S3 bucket)
    namespace   Namespace of the Bucket resource
    uid         UID of the Bucket resource
    event       Handler phase, e.g. ``info``, ``error`` or ``deletion``
    reason      CamelCase reason shared with the Kubernetes event, e.g.
                ``BucketCreated``, ``DriftDetected``, ``DeletionFailed``
    message     Human readable message, credentials already redacted

Handlers add ``bucket_name`` for the S3 bucket addressed and, on failures,
``error`` and ``error_type``. Drift lines add ``resource_type``.
"""

import json
import logging
import sys
from typing import Any


def setup_structured_logging(level: str = "INFO") -> None:
    """Send bare JSON messages to stdout at ``level`` (unknown names mean INFO)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def log_resource_event(
    logger: logging.Logger,
    controller: str,
    resource_kind: str,
    resource_name: str,
    namespace: str,
    uid: str,
    event: str,
    reason: str,
    message: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """Write one JSON line describing something that happened to a Bucket resource.

    Extra keyword arguments become additional keys; values that are not JSON
    serializable are written with ``str()``.
    """
    record = {
        "controller": controller,
        "resource": resource_kind,
        "name": resource_name,
        "namespace": namespace,
        "uid": uid,
        "event": event,
        "reason": reason,
        "message": message,
        **kwargs,
    }
    logger.log(level, json.dumps(record, default=str))
