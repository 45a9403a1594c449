"""Main entry point for the S3 Bucket Controller.

Run with ``kopf run -m s3_bucket_controller.main``.
"""

from __future__ import annotations

from typing import Any

import kopf

from . import handlers  # noqa: F401
from . import health
from . import logging as structured_logging
from .config import get_config
from .tracing import initialize_tracing


@kopf.on.startup()
def configure(settings: kopf.OperatorSettings, **_: Any) -> None:
    """Configure the controller."""
    controller_config = get_config()

    structured_logging.setup_structured_logging(controller_config.log_level)
    initialize_tracing()

    # Use annotations so kopf's own bookkeeping stays out of the status we own
    settings.persistence.progress_storage = kopf.AnnotationsProgressStorage()
    settings.persistence.diffbase_storage = kopf.AnnotationsDiffBaseStorage()

    settings.posting.level = 0
    settings.networking.request_timeout = 30.0
    settings.execution.max_workers = 4

    health.start_health_server(controller_config.metrics_port)
