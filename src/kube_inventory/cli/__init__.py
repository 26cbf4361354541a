"""Command line interface for kube_inventory."""
