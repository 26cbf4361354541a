"""Kubernetes plugin implementation.

Reads the ``kubernetes`` configuration slice and, when a cluster is
configured, installs a KubernetesService behind the ``k8s`` command group:
- ``k8s status``: configured cluster, connectivity and server version
- ``k8s resources``: every accessible resource in the cluster
"""

from __future__ import annotations

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

from kube_inventory.core.plugins.base import Plugin, hookimpl
from kube_inventory.integrations.kubernetes.config import KubernetesPluginConfig
from kube_inventory.plugins.kubernetes.commands import register_discovery_commands
from kube_inventory.plugins.kubernetes.formatters import OutputFormat
from kube_inventory.services.kubernetes import KubernetesService

logger = structlog.get_logger()
console = Console()


class KubernetesPlugin(Plugin):
    """Kubernetes cluster inventory plugin.

    Provides CLI commands and a tool entry point over a single configured
    cluster via the official kubernetes Python client.
    """

    name = "kubernetes"
    version = "0.1.0"
    description = "Kubernetes cluster resource discovery and inventory"

    def __init__(self) -> None:
        """Initialize Kubernetes plugin."""
        super().__init__()
        self._service: KubernetesService | None = None
        self._plugin_config: KubernetesPluginConfig | None = None
        self._config_error: str | None = None

    def on_initialize(self) -> None:
        """Parse the configuration slice and build the service.

        Environment variables override configuration file values. Without
        any cluster settings the plugin stays installed but inactive.
        """
        self._service = None
        self._config_error = None
        try:
            self._plugin_config = KubernetesPluginConfig.from_env(self._config)
        except ValidationError as e:
            self._plugin_config = None
            self._config_error = str(e)
            logger.error("kubernetes_config_invalid", error=self._config_error)
            return

        if self._plugin_config.cluster is None:
            logger.debug("kubernetes_plugin_not_configured")
            return

        self._service = KubernetesService(self._plugin_config.cluster)
        logger.info(
            "Kubernetes plugin initialized",
            cluster=self._plugin_config.cluster.cluster_name,
            namespace=self._plugin_config.cluster.namespace or "<all>",
        )

    @property
    def service(self) -> KubernetesService | None:
        """The installed service, None unless a cluster is configured."""
        return self._service

    @property
    def plugin_config(self) -> KubernetesPluginConfig | None:
        return self._plugin_config

    def _get_service(self) -> KubernetesService | None:
        if self._config_error:
            console.print("[red]Error:[/red] Invalid Kubernetes configuration")
            console.print(f"  {self._config_error}")
            raise typer.Exit(1)
        return self._service

    @hookimpl
    def register_commands(self, app: typer.Typer) -> None:
        """Register Kubernetes commands with the CLI."""
        k8s_app = typer.Typer(
            name="k8s",
            help="Kubernetes cluster inventory commands",
            no_args_is_help=True,
        )

        default_output = OutputFormat(
            self._plugin_config.output_format if self._plugin_config else OutputFormat.TABLE
        )
        register_discovery_commands(k8s_app, self._get_service, default_output=default_output)

        app.add_typer(k8s_app, name="k8s")
        logger.debug("Kubernetes commands registered")

    @hookimpl
    def cleanup(self) -> None:
        """Drop the service and mark the plugin uninitialized."""
        self._service = None
        super().cleanup()
