"""Plugins shipped with kube_inventory."""
