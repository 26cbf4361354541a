"""Plugin discovery, registration and lifecycle."""

from __future__ import annotations

import importlib.metadata
from typing import TYPE_CHECKING, Any

import pluggy
import structlog

from kube_inventory.core.plugins.base import PROJECT_NAME, Plugin, _PluginSpec

if TYPE_CHECKING:
    import typer

logger = structlog.get_logger()


class PluginManager:
    """Loads plugins and drives their hooks.

    Plugins come from the ``kube_inventory.plugins`` entry-point group, or
    are handed over directly with :meth:`register`.
    """

    NAMESPACE = f"{PROJECT_NAME}.plugins"

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(_PluginSpec)
        self._plugins: dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        """Register an already constructed plugin.

        Registering a second plugin under a taken name is a no-op.
        """
        if plugin.name in self._plugins:
            logger.debug("plugin_already_registered", name=plugin.name)
            return
        self._pm.register(plugin, name=plugin.name)
        self._plugins[plugin.name] = plugin
        logger.debug("plugin_registered", name=plugin.name, version=plugin.version)

    def discover_plugins(self) -> list[str]:
        """List plugin names advertised through entry points."""
        names = []
        try:
            for ep in importlib.metadata.entry_points(group=self.NAMESPACE):
                names.append(ep.name)
                logger.debug("plugin_discovered", name=ep.name, value=ep.value)
        except Exception as e:
            logger.warning("plugin_discovery_failed", error=str(e))
        return names

    def load_plugin(self, name: str) -> bool:
        """Load and register a plugin by entry-point name.

        Returns:
            True if the plugin is registered afterwards, False otherwise.
        """
        if name in self._plugins:
            return True

        for ep in importlib.metadata.entry_points(group=self.NAMESPACE):
            if ep.name != name:
                continue
            try:
                plugin_class = ep.load()
                plugin = plugin_class() if callable(plugin_class) else plugin_class
            except Exception as e:
                logger.error("plugin_load_failed", name=name, error=str(e))
                return False
            self.register(plugin)
            return True

        logger.warning("plugin_not_found", name=name)
        return False

    def load_all(self) -> list[str]:
        """Load every plugin advertised through entry points.

        Returns:
            Names of the plugins that loaded.
        """
        return [name for name in self.discover_plugins() if self.load_plugin(name)]

    def initialize_all(self, config: dict[str, Any]) -> None:
        """Hand each plugin its slice of ``config["plugins"]``.

        A plugin that fails to initialize is logged and left uninitialized.
        """
        slices = config.get("plugins", {})
        for name, plugin in self._plugins.items():
            try:
                plugin.initialize(slices.get(name) or {})
                logger.debug("plugin_initialized", name=name)
            except Exception as e:
                logger.error("plugin_initialize_failed", name=name, error=str(e))

    def register_commands(self, app: typer.Typer) -> None:
        """Let every plugin attach its commands to ``app``."""
        try:
            self._pm.hook.register_commands(app=app)
        except Exception as e:
            logger.error("plugin_command_registration_failed", error=str(e))

    def cleanup_all(self) -> None:
        try:
            self._pm.hook.cleanup()
        except Exception as e:
            logger.error("plugin_cleanup_failed", error=str(e))

    def get_plugin(self, name: str) -> Plugin | None:
        return self._plugins.get(name)

    def list_plugins(self) -> list[dict[str, Any]]:
        """Summarize registered plugins."""
        return [
            {
                "name": p.name,
                "version": p.version,
                "description": p.description,
                "initialized": p.is_initialized,
            }
            for p in self._plugins.values()
        ]
