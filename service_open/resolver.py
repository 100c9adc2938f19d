"""Turn a service name into exactly one URL.

Resolution only looks at the records it is handed. Restricting to a
namespace happens earlier, when the records are queried.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .errors import AmbiguousNamespaceError, NoEndpointError, ServiceNotFoundError
from .models import ResolvedEndpoint, ServiceRecord

logger = logging.getLogger(__name__)


def matching_records(records: Iterable[ServiceRecord], target_name: str) -> List[ServiceRecord]:
    return [r for r in records if r.name == target_name]


def candidate_namespaces(records: Iterable[ServiceRecord], target_name: str) -> List[str]:
    """Namespaces holding `target_name`, first-seen order, no duplicates."""
    seen: List[str] = []
    for record in matching_records(records, target_name):
        if record.namespace not in seen:
            seen.append(record.namespace)
    return seen


def node_port_url(host_address: str, node_port: str, *, prefer_https: bool = False) -> str:
    scheme = "https" if prefer_https else "http"
    return f"{scheme}://{host_address}:{node_port}"


def resolve(
    records: Iterable[ServiceRecord],
    target_name: str,
    host_address: str,
    prefer_https: bool = False,
    explicit_namespace: str = "",
) -> ResolvedEndpoint:
    """Pick the endpoint for `target_name`.

    A route URL always wins over a node port; the first route is used and
    weights are ignored. Raises ServiceNotFoundError, AmbiguousNamespaceError
    or NoEndpointError.
    """

    matches = matching_records(records, target_name)
    namespaces = candidate_namespaces(matches, target_name)

    if not namespaces:
        raise ServiceNotFoundError(target_name, explicit_namespace)
    if len(namespaces) > 1:
        raise AmbiguousNamespaceError(target_name, namespaces)

    # Duplicate names inside one namespace: first record wins.
    record = matches[0]

    if record.route_urls:
        url = record.route_urls[0]
        source = ResolvedEndpoint.SOURCE_ROUTE
    elif record.node_port:
        url = node_port_url(host_address, record.node_port, prefer_https=prefer_https)
        source = ResolvedEndpoint.SOURCE_NODE_PORT
    else:
        raise NoEndpointError(record.name, record.namespace)

    logger.debug("Resolved %s/%s -> %s (%s)", record.namespace, record.name, url, source)
    return ResolvedEndpoint(url=url, namespace=record.namespace, name=record.name, source=source)
