from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from kubernetes.client import ApiException

from ..errors import HostNotFoundError, HostNotRunningError
from .clients import TRANSPORT_ERRORS, KubernetesClientSet, describe_api_error

logger = logging.getLogger(__name__)

# Preference order when picking the address node ports are reached on.
ADDRESS_TYPES = ("ExternalIP", "InternalIP", "Hostname")


def _is_ready(node: Any) -> bool:
    for cond in getattr(node.status, "conditions", None) or []:
        if getattr(cond, "type", None) == "Ready":
            return getattr(cond, "status", None) == "True"
    return False


def ensure_cluster_running(clients: KubernetesClientSet, host_override: Optional[str] = None) -> Optional[List[Any]]:
    """Fail unless the API answers; return the Ready nodes.

    Returns None when the caller may not list nodes (403). That only passes
    with a `host_override`, since node addresses are then unknown. Without an
    override at least one node has to be Ready.
    """

    errors: List[str] = []
    version_ok = False
    try:
        clients.version.get_code()
        version_ok = True
    except (ApiException, *TRANSPORT_ERRORS) as exc:
        errors.append(f"version: {describe_api_error(exc)}")

    nodes: Optional[List[Any]] = None
    nodes_answered = False
    try:
        nodes = [n for n in clients.core.list_node().items if _is_ready(n)]
        nodes_answered = True
    except ApiException as exc:
        # Forbidden still proves the API server is up.
        nodes_answered = exc.status == 403
        errors.append(f"nodes: {describe_api_error(exc)}")
    except TRANSPORT_ERRORS as exc:
        errors.append(f"nodes: {describe_api_error(exc)}")

    if not version_ok and not nodes_answered:
        raise HostNotRunningError(f"Cluster is not reachable: {'; '.join(errors)}")

    if host_override:
        logger.debug("Cluster reachable, using host override %s", host_override)
        return nodes

    if nodes is None:
        raise HostNotFoundError(
            f"Error getting IP: cannot list cluster nodes ({'; '.join(errors)}); "
            "set --host or SERVICE_OPEN_HOST"
        )
    if not nodes:
        raise HostNotRunningError("Cluster is not running: no node is Ready")
    logger.debug("Cluster reachable, %d Ready node(s)", len(nodes))
    return nodes


def node_address(node: Any) -> Optional[str]:
    addresses = getattr(node.status, "addresses", None) or []
    by_type: Dict[str, str] = {}
    for a in addresses:
        # Keep the first address of each type.
        by_type.setdefault(getattr(a, "type", ""), getattr(a, "address", ""))
    for kind in ADDRESS_TYPES:
        if by_type.get(kind):
            return by_type[kind]
    return None


def get_host_address(nodes: Optional[List[Any]], override: Optional[str] = None) -> str:
    if override:
        return override

    for node in nodes or []:
        address = node_address(node)
        if address:
            logger.debug("Using address %s of node %s", address, node.metadata.name)
            return address
    raise HostNotFoundError("Error getting IP: no Ready node reports an address")
