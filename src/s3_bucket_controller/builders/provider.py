"""Builder for S3 gateway instances."""

from __future__ import annotations

import logging

from kubernetes import client, config

from ..config import ControllerConfig
from ..services.aws.client import AWSProvider
from ..utils.secrets import get_secret_value

logger = logging.getLogger(__name__)


def create_provider_from_config(controller_config: ControllerConfig) -> AWSProvider:
    """Create an S3 gateway from controller configuration.

    Credentials come from the configured Secret when one is named, otherwise
    from boto3's default credential chain.

    Args:
        controller_config: Controller configuration

    Returns:
        Configured S3 gateway

    Raises:
        ValueError: If the credentials Secret or one of its keys is missing
    """
    access_key = None
    secret_key = None
    session_token = None

    secret_name = controller_config.credentials_secret_name
    if secret_name:
        try:
            config.load_incluster_config()
        except config.ConfigException:
            config.load_kube_config()

        api = client.CoreV1Api()
        namespace = controller_config.credentials_secret_namespace
        access_key = get_secret_value(api, namespace, secret_name, controller_config.access_key_field)
        secret_key = get_secret_value(api, namespace, secret_name, controller_config.secret_key_field)
        if controller_config.session_token_field:
            session_token = get_secret_value(api, namespace, secret_name, controller_config.session_token_field)
        logger.info(f"Loaded S3 credentials from secret {namespace}/{secret_name}")

    return AWSProvider(
        region=controller_config.region,
        endpoint=controller_config.endpoint,
        access_key=access_key,
        secret_key=secret_key,
        session_token=session_token,
        path_style=controller_config.path_style,
        max_attempts=controller_config.max_attempts,
    )
