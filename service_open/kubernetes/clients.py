from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from kubernetes import client, config
from kubernetes.client import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from ..errors import HostNotFoundError

logger = logging.getLogger(__name__)

# Raised by the client when the API server cannot be reached at all
# (MaxRetryError, NewConnectionError, ...).
TRANSPORT_ERRORS = (HTTPError,)


@dataclass(frozen=True)
class KubernetesClientSet:
    core: client.CoreV1Api
    networking: client.NetworkingV1Api
    custom_objects: client.CustomObjectsApi
    version: client.VersionApi


def describe_api_error(exc: Exception) -> str:
    if isinstance(exc, ApiException):
        return f"{exc.status} {exc.reason}"
    return f"connection failed ({exc})"


def load_clients(*, kubeconfig: Optional[str] = None, context: Optional[str] = None) -> KubernetesClientSet:
    """Create Kubernetes API clients using kubeconfig/context.

    This is the single place where kubeconfig is loaded so the providers
    only ever see API objects.
    """

    try:
        config.load_kube_config(config_file=kubeconfig, context=context)
    except (ConfigException, OSError) as exc:
        raise HostNotFoundError(f"Cannot load cluster configuration: {exc}") from exc

    logger.debug("Loaded kubeconfig=%s context=%s", kubeconfig or "<default>", context or "<current>")
    return KubernetesClientSet(
        core=client.CoreV1Api(),
        networking=client.NetworkingV1Api(),
        custom_objects=client.CustomObjectsApi(),
        version=client.VersionApi(),
    )
