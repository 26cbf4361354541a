"""Kubernetes CLI command modules."""

from kube_inventory.plugins.kubernetes.commands.discovery import register_discovery_commands

__all__ = ["register_discovery_commands"]
