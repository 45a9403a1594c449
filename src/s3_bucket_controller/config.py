"""Process-wide controller configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from .constants import DEFAULT_REGION


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ControllerConfig:
    """Configuration for the bucket controller.

    Environment Variables:
        S3_REGION: Provider region new buckets are created in (default: us-east-1)
        S3_ENDPOINT: Optional S3 endpoint URL override
        S3_PATH_STYLE: Use path-style addressing (default: true)
        S3_MAX_ATTEMPTS: Attempts per provider call, including retries (default: 3)
        S3_CREDENTIALS_SECRET_NAME: Optional Secret holding provider credentials
        S3_CREDENTIALS_SECRET_NAMESPACE: Namespace of that Secret (default: default)
        S3_ACCESS_KEY_FIELD: Secret key holding the access key ID (default: access-key)
        S3_SECRET_KEY_FIELD: Secret key holding the secret access key (default: secret-key)
        S3_SESSION_TOKEN_FIELD: Optional Secret key holding a session token for temporary credentials
        METRICS_PORT: Port for metrics and health endpoints (default: 8080)
        DRIFT_CHECK_INTERVAL_SECONDS: Interval between observed-state refreshes (default: 300)
        LOG_LEVEL: Root log level (default: INFO)
    """

    region: str = DEFAULT_REGION
    endpoint: str | None = None
    path_style: bool = True
    max_attempts: int = 3
    credentials_secret_name: str | None = None
    credentials_secret_namespace: str = "default"
    access_key_field: str = "access-key"
    secret_key_field: str = "secret-key"
    session_token_field: str | None = None
    metrics_port: int = 8080
    drift_check_interval_seconds: int = 300
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ControllerConfig:
        """Build configuration from environment variables."""
        return cls(
            region=os.getenv("S3_REGION") or DEFAULT_REGION,
            endpoint=os.getenv("S3_ENDPOINT") or None,
            path_style=_env_bool("S3_PATH_STYLE", True),
            max_attempts=int(os.getenv("S3_MAX_ATTEMPTS", "3")),
            credentials_secret_name=os.getenv("S3_CREDENTIALS_SECRET_NAME") or None,
            credentials_secret_namespace=os.getenv("S3_CREDENTIALS_SECRET_NAMESPACE", "default"),
            access_key_field=os.getenv("S3_ACCESS_KEY_FIELD", "access-key"),
            secret_key_field=os.getenv("S3_SECRET_KEY_FIELD", "secret-key"),
            session_token_field=os.getenv("S3_SESSION_TOKEN_FIELD") or None,
            metrics_port=int(os.getenv("METRICS_PORT", "8080")),
            drift_check_interval_seconds=int(os.getenv("DRIFT_CHECK_INTERVAL_SECONDS", "300")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_config() -> ControllerConfig:
    """Get the configuration, read once per process."""
    return ControllerConfig.from_env()
