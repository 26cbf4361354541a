"""Shared helpers for Kubernetes CLI commands.

Common Typer options and the error rendering every command uses.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from kube_inventory.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesTimeoutError,
)
from kube_inventory.plugins.kubernetes.formatters import OutputFormat

console = Console()
err_console = Console(stderr=True)


# =============================================================================
# Common Typer Option Annotations
# =============================================================================

OutputOption = Annotated[
    OutputFormat,
    typer.Option(
        "--output",
        "-o",
        help="Output format: table, json, or yaml",
        case_sensitive=False,
    ),
]

ProgressOption = Annotated[
    bool,
    typer.Option(
        "--progress",
        "-p",
        help="Print discovery progress to stderr while scanning",
    ),
]

FailuresOnlyOption = Annotated[
    bool,
    typer.Option(
        "--failures-only",
        help="Only show the units of work that failed",
    ),
]


# =============================================================================
# Error Handling
# =============================================================================


def not_configured() -> None:
    """Report a missing cluster configuration.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    console.print("[red]Error:[/red] Kubernetes plugin not configured")
    console.print(
        "\n[dim]Hint: Set plugins.kubernetes.cluster in the config file "
        "or KUBE_INVENTORY_CLUSTER_NAME and KUBE_INVENTORY_API_SERVER_URL.[/dim]"
    )
    raise typer.Exit(1)


def handle_k8s_error(error: KubernetesError) -> None:
    """Render a Kubernetes error and exit.

    Args:
        error: The error to render.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    if isinstance(error, KubernetesConnectionError):
        console.print("[red]Error:[/red] Cannot connect to Kubernetes cluster")
        console.print(f"  {error.message}")
        if error.original_error:
            console.print(f"  Cause: {error.original_error}")
        console.print(
            "\n[dim]Hint: Check the API server URL and credentials in the config.[/dim]"
        )

    elif isinstance(error, KubernetesAuthError):
        console.print("[red]Error:[/red] Authentication/authorization failed")
        console.print(f"  {error.message}")
        console.print("\n[dim]Hint: Check your credentials or RBAC permissions.[/dim]")

    elif isinstance(error, KubernetesTimeoutError):
        console.print("[red]Error:[/red] Operation timed out")
        console.print(f"  {error.message}")

    else:
        console.print(f"[red]Error:[/red] {error.message}")
        if error.status_code:
            console.print(f"  HTTP Status: {error.status_code}")

    raise typer.Exit(1)
