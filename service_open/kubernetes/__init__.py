"""Cluster-facing helpers.

- `clients`: kubeconfig loading
- `cluster`: reachability, running check and host address
- `services`: Services, Routes and Ingresses folded into ServiceRecords
"""

__all__ = [
	"clients",
	"cluster",
	"services",
]
