"""Fold Services, OpenShift Routes and Ingresses into ServiceRecords.

Routes come back from the custom objects API as plain dicts (camelCase
keys); Services and Ingresses are typed client models (snake_case
attributes).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from kubernetes.client import ApiException

from ..errors import ClusterQueryError
from ..models import ServiceRecord
from .clients import TRANSPORT_ERRORS, KubernetesClientSet, describe_api_error

logger = logging.getLogger(__name__)

ROUTE_GROUP = "route.openshift.io"
ROUTE_VERSION = "v1"
ROUTE_PLURAL = "routes"

_Key = Tuple[str, str]


def _query_error(what: str, exc: Exception) -> ClusterQueryError:
    return ClusterQueryError(f"Error listing {what}: {describe_api_error(exc)}")


def _list_services(core_api: Any, namespace: Optional[str]) -> List[Any]:
    try:
        if namespace:
            return core_api.list_namespaced_service(namespace=namespace).items
        return core_api.list_service_for_all_namespaces().items
    except (ApiException, *TRANSPORT_ERRORS) as exc:
        raise _query_error("services", exc) from exc


def _list_routes(custom_api: Any, namespace: Optional[str]) -> List[Dict[str, Any]]:
    try:
        if namespace:
            data = custom_api.list_namespaced_custom_object(
                group=ROUTE_GROUP, version=ROUTE_VERSION, namespace=namespace, plural=ROUTE_PLURAL
            )
        else:
            data = custom_api.list_cluster_custom_object(group=ROUTE_GROUP, version=ROUTE_VERSION, plural=ROUTE_PLURAL)
    except ApiException as exc:
        if exc.status == 404:
            # Plain Kubernetes: the Route API is not served.
            logger.debug("Route API not available, skipping routes")
            return []
        raise _query_error("routes", exc) from exc
    except TRANSPORT_ERRORS as exc:
        raise _query_error("routes", exc) from exc
    return list((data or {}).get("items") or [])


def _list_ingresses(networking_api: Any, namespace: Optional[str]) -> List[Any]:
    try:
        if namespace:
            return networking_api.list_namespaced_ingress(namespace=namespace).items
        return networking_api.list_ingress_for_all_namespaces().items
    except (ApiException, *TRANSPORT_ERRORS) as exc:
        raise _query_error("ingresses", exc) from exc


def first_node_port(service: Any) -> Optional[str]:
    for p in getattr(service.spec, "ports", None) or []:
        node_port = getattr(p, "node_port", None)
        if node_port:
            return str(node_port)
    return None


def route_url(route: Dict[str, Any]) -> Optional[str]:
    spec = route.get("spec") or {}
    host = spec.get("host")
    if not host:
        return None
    scheme = "https" if spec.get("tls") else "http"
    return f"{scheme}://{host}{spec.get('path') or ''}"


def route_backends(route: Dict[str, Any]) -> List[Tuple[str, str]]:
    """(service name, weight label) for each backend of a route.

    Labels are the backend's share of the total weight, e.g. "25%". A route
    with a single backend and no explicit weight gets an empty label.
    """

    spec = route.get("spec") or {}
    backends = [spec.get("to") or {}] + list(spec.get("alternateBackends") or [])
    backends = [b for b in backends if b.get("name") and (b.get("kind") or "Service") == "Service"]
    if not backends:
        return []

    if len(backends) == 1:
        weight = backends[0].get("weight")
        return [(backends[0]["name"], "100%" if weight is not None else "")]

    # OpenShift treats an unset weight as 100.
    weights = [100 if b.get("weight") is None else int(b["weight"]) for b in backends]
    total = sum(weights)
    out: List[Tuple[str, str]] = []
    for backend, weight in zip(backends, weights):
        share = round(weight * 100 / total) if total else 0
        out.append((backend["name"], f"{share}%"))
    return out


def ingress_urls(ingress: Any) -> List[Tuple[str, str]]:
    """(backend service name, URL) for every host rule of an ingress."""

    spec = ingress.spec
    tls_hosts = set()
    for t in getattr(spec, "tls", None) or []:
        tls_hosts.update(getattr(t, "hosts", None) or [])

    out: List[Tuple[str, str]] = []
    for rule in getattr(spec, "rules", None) or []:
        host = getattr(rule, "host", None)
        http = getattr(rule, "http", None)
        if not host or http is None:
            continue
        scheme = "https" if host in tls_hosts else "http"
        for p in getattr(http, "paths", None) or []:
            backend_service = getattr(getattr(p, "backend", None), "service", None)
            name = getattr(backend_service, "name", None)
            if name:
                out.append((name, f"{scheme}://{host}{getattr(p, 'path', None) or ''}"))
    return out


def list_service_records(
    clients: KubernetesClientSet,
    namespace: Optional[str] = None,
    *,
    include_routes: bool = True,
    include_ingresses: bool = True,
) -> List[ServiceRecord]:
    """Snapshot of every service visible in `namespace` (all when empty)."""

    services = _list_services(clients.core, namespace)

    urls: Dict[_Key, List[str]] = {}
    weights: Dict[_Key, List[str]] = {}

    if include_routes:
        for route in _list_routes(clients.custom_objects, namespace):
            url = route_url(route)
            ns = (route.get("metadata") or {}).get("namespace")
            if not url or not ns:
                continue
            for svc_name, label in route_backends(route):
                urls.setdefault((ns, svc_name), []).append(url)
                weights.setdefault((ns, svc_name), []).append(label)

    if include_ingresses:
        for ingress in _list_ingresses(clients.networking, namespace):
            ns = ingress.metadata.namespace
            for svc_name, url in ingress_urls(ingress):
                urls.setdefault((ns, svc_name), []).append(url)
                weights.setdefault((ns, svc_name), []).append("")

    records: List[ServiceRecord] = []
    for s in services:
        key = (s.metadata.namespace, s.metadata.name)
        labels = list(weights.get(key, []))
        # Weights stay positional; only trailing blanks are dropped.
        while labels and not labels[-1]:
            labels.pop()
        records.append(
            ServiceRecord(
                namespace=key[0],
                name=key[1],
                route_urls=tuple(urls.get(key, [])),
                node_port=first_node_port(s),
                weights=tuple(labels),
            )
        )

    logger.debug("Collected %d service record(s) in %s", len(records), namespace or "all namespaces")
    return records
