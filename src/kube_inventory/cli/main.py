"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from rich.console import Console

from kube_inventory import __version__
from kube_inventory.cli.commands import init
from kube_inventory.core.config import InventoryConfig, load_config
from kube_inventory.core.plugins import PluginManager
from kube_inventory.logging.config import configure_logging
from kube_inventory.plugins.kubernetes.plugin import KubernetesPlugin

app = typer.Typer(
    name="kube-inventory",
    help="Discover and list every resource in a Kubernetes cluster.",
    add_completion=True,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kube-inventory version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Write console logs as JSON.",
    ),
) -> None:
    """kube-inventory - enumerate cluster resources across every API group."""
    configure_logging(verbose=verbose, debug=debug, json_output=json_logs)


app.add_typer(init.app, name="init")


def build_plugin_manager(config: InventoryConfig) -> PluginManager:
    """Register built-in and entry-point plugins and initialize them."""
    manager = PluginManager()
    manager.register(KubernetesPlugin())
    manager.load_all()
    manager.initialize_all(config.model_dump())
    return manager


def run() -> None:
    """Console script entry point: load config and plugins, then dispatch."""
    # Quiet defaults until the root callback applies the command line flags
    configure_logging()

    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {e}")
        raise SystemExit(1) from e

    manager = build_plugin_manager(config)
    manager.register_commands(app)
    try:
        app()
    finally:
        manager.cleanup_all()


if __name__ == "__main__":
    run()
