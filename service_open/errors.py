from __future__ import annotations

from typing import Sequence


class ServiceOpenError(Exception):
    """Base for every failure the command reports to the user."""


class ResolutionError(ServiceOpenError):
    """A service name could not be turned into a single endpoint."""

    kind: str = "ResolutionError"


class ServiceNotFoundError(ResolutionError):
    kind = "NotFound"

    def __init__(self, service: str, namespace: str = "") -> None:
        self.service = service
        self.namespace = namespace
        if namespace:
            message = f"Service '{service}' does not exist in namespace '{namespace}'"
        else:
            message = f"Service '{service}' does not exist"
        super().__init__(message)


class AmbiguousNamespaceError(ResolutionError):
    kind = "AmbiguousNamespace"

    def __init__(self, service: str, namespaces: Sequence[str]) -> None:
        self.service = service
        self.namespaces = list(namespaces)
        super().__init__(
            f"Service '{service}' exists in multiple namespaces ({', '.join(self.namespaces)}), "
            "you need to choose a specific namespace using -n <namespace>."
        )


class NoEndpointError(ResolutionError):
    kind = "NoEndpoint"

    def __init__(self, service: str, namespace: str) -> None:
        self.service = service
        self.namespace = namespace
        super().__init__(
            f"Service '{service}' in namespace '{namespace}' does not have route associated "
            "which can be opened in the browser."
        )


class ClusterError(ServiceOpenError):
    """The cluster could not supply records or a host address."""


class HostNotRunningError(ClusterError):
    pass


class HostNotFoundError(ClusterError):
    pass


class ClusterQueryError(ClusterError):
    pass
