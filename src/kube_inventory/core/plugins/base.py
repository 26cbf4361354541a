"""Plugin contract built on pluggy hooks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    import typer

PROJECT_NAME = "kube_inventory"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class _PluginSpec:
    """Hooks every plugin answers."""

    @hookspec
    def initialize(self, config: dict[str, Any]) -> None:
        """Receive the plugin's own configuration slice.

        Args:
            config: The entry under ``plugins.<name>`` of the config file.
        """

    @hookspec
    def register_commands(self, app: typer.Typer) -> None:
        """Attach the plugin's commands to the root application.

        Args:
            app: The root Typer application.
        """

    @hookspec
    def cleanup(self) -> None:
        """Release anything the plugin holds."""

    @hookspec
    def get_name(self) -> str:
        """Return the plugin name."""
        return ""


class Plugin:
    """Base class for plugins.

    Subclasses set ``name`` and ``version`` and usually override
    ``on_initialize`` and ``register_commands``.
    """

    name: str = ""
    version: str = ""
    description: str = ""

    def __init__(self) -> None:
        for attr in ("name", "version"):
            if not getattr(self, attr):
                raise ValueError(f"{type(self).__name__} must define '{attr}' class attribute")
        self._config: dict[str, Any] = {}
        self._initialized = False

    @hookimpl
    def get_name(self) -> str:
        return self.name

    @hookimpl
    def initialize(self, config: dict[str, Any]) -> None:
        """Store the configuration slice, then run ``on_initialize``."""
        self._config = dict(config)
        self.on_initialize()
        self._initialized = True

    def on_initialize(self) -> None:
        """Subclass hook run during ``initialize``."""

    @hookimpl
    def register_commands(self, app: typer.Typer) -> None:
        """Register CLI commands. Override in subclasses."""

    @hookimpl
    def cleanup(self) -> None:
        self._initialized = False

    @property
    def config(self) -> dict[str, Any]:
        """The configuration slice passed to ``initialize``."""
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._initialized
