"""Version information for kube_inventory."""

__version__ = "0.1.0"
