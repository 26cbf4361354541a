"""CLI commands for cluster status and resource inventory.

Both commands go through the KubernetesService built by the plugin.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import typer

from kube_inventory.integrations.kubernetes.exceptions import KubernetesError
from kube_inventory.integrations.kubernetes.models.inventory import ResourceFailure
from kube_inventory.plugins.kubernetes.commands.base import (
    FailuresOnlyOption,
    OutputOption,
    ProgressOption,
    console,
    err_console,
    handle_k8s_error,
    not_configured,
)
from kube_inventory.plugins.kubernetes.formatters import OutputFormat, get_formatter
from kube_inventory.services.kubernetes.events import DiscoveryEvent, DiscoveryPhase

if TYPE_CHECKING:
    from kube_inventory.services.kubernetes import KubernetesService


def print_progress(event: DiscoveryEvent) -> None:
    """Event sink that echoes discovery progress to stderr."""
    style = "red" if event.phase is DiscoveryPhase.FAILURE else "dim"
    err_console.print(f"[{style}]{event.phase}[/{style}] {event.detail}", highlight=False)


def register_discovery_commands(
    app: typer.Typer,
    get_service: Callable[[], KubernetesService | None],
    default_output: OutputFormat = OutputFormat.TABLE,
) -> None:
    """Register the status and resources commands on ``app``."""

    @app.command()
    def status(
        output: OutputOption = default_output,
    ) -> None:
        """Show the configured cluster and whether it answers.

        Examples:
            kube-inventory k8s status
            kube-inventory k8s status --output json
        """
        service = get_service()
        if service is None:
            not_configured()
            return

        try:
            data = {**service.status(), **service.cluster_info()}
        except KubernetesError as e:
            handle_k8s_error(e)
            return

        formatter = get_formatter(output, console)
        formatter.format_dict(data, title="Kubernetes Cluster Status")

    @app.command()
    def resources(
        output: OutputOption = default_output,
        progress: ProgressOption = False,
        failures_only: FailuresOnlyOption = False,
    ) -> None:
        """List every accessible resource in the cluster.

        Walks the core group and the preferred version of every other API
        group. Anything that cannot be listed is reported as a failure
        alongside the resources that were found.

        Examples:
            kube-inventory k8s resources
            kube-inventory k8s resources --output yaml --progress
            kube-inventory k8s resources --failures-only
        """
        service = get_service()
        if service is None:
            not_configured()
            return

        try:
            records = service.list_all_api_resource_types(
                event_sink=print_progress if progress else None
            )
        except KubernetesError as e:
            handle_k8s_error(e)
            return

        if failures_only:
            records = [r for r in records if isinstance(r, ResourceFailure)]

        formatter = get_formatter(output, console)
        formatter.format_records(records, title=f"Resources in {service.cluster_name}")
