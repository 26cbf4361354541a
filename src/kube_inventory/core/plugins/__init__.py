"""Plugin system for kube_inventory."""

from kube_inventory.core.plugins.base import Plugin, hookimpl, hookspec
from kube_inventory.core.plugins.manager import PluginManager

__all__ = ["Plugin", "PluginManager", "hookimpl", "hookspec"]
