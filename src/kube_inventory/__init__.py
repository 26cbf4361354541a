"""kube_inventory - discover and enumerate live Kubernetes resources."""

from kube_inventory.__version__ import __version__

__all__ = ["__version__"]
