"""Shared utilities for handlers."""

from __future__ import annotations

from functools import lru_cache

from ..builders.provider import create_provider_from_config
from ..config import get_config
from ..reconcilers.lifecycle import BucketReconciler


@lru_cache(maxsize=1)
def get_reconciler() -> BucketReconciler:
    """Get the process-wide bucket reconciler.

    The gateway and region are built once from the controller configuration.
    """
    controller_config = get_config()
    gateway = create_provider_from_config(controller_config)
    return BucketReconciler(gateway, controller_config.region)
