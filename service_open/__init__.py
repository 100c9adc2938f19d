"""Resolve a cluster service name to a reachable URL.

Modules:
- `resolver`: pure name -> endpoint resolution
- `presenter`: table / URL / browser output
- `kubernetes`: cluster-state and host providers
- `cli`: the `service-open` command
"""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "errors",
    "kubernetes",
    "models",
    "presenter",
    "resolver",
]
