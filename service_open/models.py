from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ServiceRecord:
    """One service as seen by a single cluster query.

    `weights` lines up with `route_urls` by position but may be shorter;
    it is only ever displayed.
    """

    namespace: str
    name: str
    route_urls: Tuple[str, ...] = field(default_factory=tuple)
    node_port: Optional[str] = None
    weights: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.namespace:
            raise ValueError("ServiceRecord.namespace must be non-empty")
        if not self.name:
            raise ValueError("ServiceRecord.name must be non-empty")
        # Accept lists from callers but keep the record hashable.
        object.__setattr__(self, "route_urls", tuple(self.route_urls or ()))
        object.__setattr__(self, "weights", tuple(self.weights or ()))


@dataclass(frozen=True)
class ResolvedEndpoint:
    url: str
    namespace: str
    name: str
    source: str  # "route" or "node-port"

    SOURCE_ROUTE = "route"
    SOURCE_NODE_PORT = "node-port"

    def __str__(self) -> str:
        return self.url
