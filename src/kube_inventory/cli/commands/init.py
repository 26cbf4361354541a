"""Init command: write a starter configuration file."""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.panel import Panel

from kube_inventory.core.config.models import CONFIG_FILE, InventoryConfig

app = typer.Typer(help="Create a starter kube-inventory configuration.")
console = Console()
logger = structlog.get_logger()


@app.callback(invoke_without_command=True)
def init(
    ctx: typer.Context,
    path: Path = typer.Option(
        CONFIG_FILE,
        "--path",
        help="Where to write the configuration file.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration.",
    ),
) -> None:
    """Write a starter configuration to ~/.config/kube-inventory/config.yaml."""
    if ctx.invoked_subcommand is not None:
        return

    if path.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {path}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(code=1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(InventoryConfig.starter().to_yaml())

    console.print(
        Panel(
            f"[green]Configuration initialized![/green]\n\n"
            f"Configuration created at: {path}\n\n"
            f"Next steps:\n"
            f"  1. Fill in plugins.kubernetes.cluster (cluster_name, api_server_url, token)\n"
            f"  2. Run [bold]kube-inventory k8s status[/bold] to verify the connection\n"
            f"  3. Run [bold]kube-inventory k8s resources[/bold] to list everything",
            title="kube-inventory init",
            border_style="green",
        )
    )

    logger.info("config_initialized", config_file=str(path))
