"""Reading provider credentials from Kubernetes secrets."""

from __future__ import annotations

import base64
import binascii

from kubernetes import client


def _decode(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    try:
        return base64.b64decode(value, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        # Already decoded
        return value


def get_secret_value(api: client.CoreV1Api, namespace: str, secret_name: str, key: str) -> str:
    """Read one key of a secret as text.

    Values are base64-decoded as the API returns them; values that are not
    valid base64 are returned unchanged.

    Raises:
        ValueError: If the secret does not exist or lacks ``key``
        kubernetes.client.exceptions.ApiException: On any other API failure
    """
    try:
        secret = api.read_namespaced_secret(name=secret_name, namespace=namespace)
    except client.exceptions.ApiException as e:
        if e.status != 404:
            raise
        raise ValueError(f"Secret '{secret_name}' not found in namespace '{namespace}'") from e

    data = secret.data or {}
    if key not in data:
        raise ValueError(f"Key '{key}' not found in secret '{secret_name}'")
    return _decode(data[key])
