from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional


_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off"}


def env_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip()


def env_optional_str(*names: str) -> Optional[str]:
    """First non-blank value among `names`, or None."""
    for name in names:
        value = (os.environ.get(name) or "").strip()
        if value:
            return value
    return None


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class ServiceOpenConfig:
    """Runtime configuration for the `service-open` command.

    Env vars:
    - SERVICE_OPEN_KUBECONFIG (falls back to K8S_KUBECONFIG): kubeconfig path
    - K8S_CONTEXT: kube context name
    - SERVICE_OPEN_HOST: address used for node-port URLs instead of a node address
    - SERVICE_OPEN_ROUTES: query OpenShift routes (default true)
    - SERVICE_OPEN_INGRESSES: query ingresses (default true)
    - SERVICE_OPEN_LOG_LEVEL: logging level name

    If no kubeconfig is set, the Kubernetes client falls back to its default
    kubeconfig loading rules.
    """

    kubeconfig: Optional[str]
    context: Optional[str]
    host_address: Optional[str]
    include_routes: bool
    include_ingresses: bool
    log_level: str

    DEFAULT_LOG_LEVEL: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ServiceOpenConfig":
        return cls(
            kubeconfig=env_optional_str("SERVICE_OPEN_KUBECONFIG", "K8S_KUBECONFIG"),
            context=env_optional_str("K8S_CONTEXT"),
            host_address=env_optional_str("SERVICE_OPEN_HOST"),
            include_routes=env_bool("SERVICE_OPEN_ROUTES", True),
            include_ingresses=env_bool("SERVICE_OPEN_INGRESSES", True),
            log_level=env_str("SERVICE_OPEN_LOG_LEVEL", cls.DEFAULT_LOG_LEVEL).upper(),
        )

    def with_overrides(
        self,
        *,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        host_address: Optional[str] = None,
        verbose: bool = False,
    ) -> "ServiceOpenConfig":
        # Only explicitly given values replace what came from the environment.
        return replace(
            self,
            kubeconfig=kubeconfig or self.kubeconfig,
            context=context or self.context,
            host_address=host_address or self.host_address,
            log_level="DEBUG" if verbose else self.log_level,
        )
