from types import SimpleNamespace

import pytest

from service_open.models import ServiceRecord


def make_service(name, namespace="default", node_ports=()):
    ports = [SimpleNamespace(port=80, node_port=p) for p in node_ports] or [SimpleNamespace(port=80, node_port=None)]
    return SimpleNamespace(
        metadata=SimpleNamespace(name=name, namespace=namespace),
        spec=SimpleNamespace(type="NodePort" if node_ports else "ClusterIP", ports=ports),
    )


def make_node(name, ready=True, addresses=(("InternalIP", "10.0.0.5"),)):
    return SimpleNamespace(
        metadata=SimpleNamespace(name=name),
        status=SimpleNamespace(
            conditions=[SimpleNamespace(type="Ready", status="True" if ready else "False")],
            addresses=[SimpleNamespace(type=t, address=a) for t, a in addresses],
        ),
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "SERVICE_OPEN_KUBECONFIG",
        "K8S_KUBECONFIG",
        "K8S_CONTEXT",
        "SERVICE_OPEN_HOST",
        "SERVICE_OPEN_ROUTES",
        "SERVICE_OPEN_INGRESSES",
        "SERVICE_OPEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def records():
    return [
        ServiceRecord(namespace="myproject", name="frontend", route_urls=("http://frontend.example.com",)),
        ServiceRecord(namespace="myproject", name="api", node_port="30080"),
        ServiceRecord(namespace="staging", name="api", node_port="31080"),
        ServiceRecord(namespace="default", name="db"),
    ]
