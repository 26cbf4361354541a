"""Output formatters for inventory commands.

Strategy pattern: each formatter renders scan records and plain status
mappings to a console in one output format.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

from kube_inventory.integrations.kubernetes.models.inventory import (
    ResourceFailure,
    ResourceInstance,
    dump_records,
    split_records,
)

Record = ResourceInstance | ResourceFailure


class OutputFormat(StrEnum):
    """Supported output formats for CLI commands."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def failure_scope(failure: ResourceFailure) -> str:
    """Describe where a failure happened, e.g. ``apps/v1 Deployment in prod``."""
    parts = []
    if failure.version:
        parts.append(f"{failure.group}/{failure.version}" if failure.group else failure.version)
    elif failure.group:
        parts.append(failure.group)
    if failure.kind:
        parts.append(failure.kind)
    if failure.namespace:
        parts.append(f"in {failure.namespace}")
    return " ".join(parts) or "-"


def records_payload(records: Sequence[Record]) -> dict[str, Any]:
    """Structured form of a scan result for machine-readable output."""
    instances, failures = split_records(records)
    return {
        "resources": dump_records(records),
        "total": len(instances),
        "failures": len(failures),
    }


class InventoryFormatter(ABC):
    """Base class for output formatters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def format_records(self, records: Sequence[Record], title: str = "") -> None:
        """Render scan records."""

    @abstractmethod
    def format_dict(self, data: dict[str, Any], title: str = "") -> None:
        """Render a flat mapping."""

    def format_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {message}")


class TableFormatter(InventoryFormatter):
    """Rich table output formatter."""

    def format_records(self, records: Sequence[Record], title: str = "") -> None:
        """Render instances and failures as two tables."""
        instances, failures = split_records(records)

        if instances:
            table = Table(title=title or "Cluster Resources", show_header=True)
            table.add_column("Kind", style="cyan", no_wrap=True)
            table.add_column("API Version")
            table.add_column("Namespace", style="cyan")
            table.add_column("Name", overflow="fold")
            for instance in instances:
                table.add_row(
                    instance.kind,
                    instance.api_version,
                    instance.namespace or "-",
                    instance.name,
                )
            self.console.print(table)

        if failures:
            table = Table(title="Failures", show_header=True, title_style="red")
            table.add_column("Scope", style="yellow")
            table.add_column("Error", overflow="fold")
            for failure in failures:
                table.add_row(failure_scope(failure), failure.error)
            self.console.print(table)

        self.console.print(
            f"\n[dim]Total: {len(instances)} resources, {len(failures)} failures[/dim]"
        )

    def format_dict(self, data: dict[str, Any], title: str = "") -> None:
        table = Table(title=title, show_header=True)
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        for key, value in data.items():
            table.add_row(key, self._format_value(value))

        self.console.print(table)

    def _format_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "[green]Yes[/green]" if value else "[red]No[/red]"
        elif value is None:
            return "[dim]-[/dim]"
        elif isinstance(value, dict | list):
            return json.dumps(value)
        return str(value)


class JsonFormatter(InventoryFormatter):
    """JSON output formatter."""

    def format_records(self, records: Sequence[Record], title: str = "") -> None:
        self.console.print_json(json.dumps(records_payload(records), default=str))

    def format_dict(self, data: dict[str, Any], title: str = "") -> None:
        self.console.print_json(json.dumps(data, default=str))


class YamlFormatter(InventoryFormatter):
    """YAML output formatter."""

    def format_records(self, records: Sequence[Record], title: str = "") -> None:
        self._print(records_payload(records))

    def format_dict(self, data: dict[str, Any], title: str = "") -> None:
        self._print(data)

    def _print(self, data: Any) -> None:
        self.console.print(
            yaml.safe_dump(data, default_flow_style=False, sort_keys=False),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def get_formatter(format_type: OutputFormat, console: Console | None = None) -> InventoryFormatter:
    """Factory function to get the appropriate formatter."""
    if console is None:
        console = Console()

    formatters: dict[OutputFormat, type[InventoryFormatter]] = {
        OutputFormat.TABLE: TableFormatter,
        OutputFormat.JSON: JsonFormatter,
        OutputFormat.YAML: YamlFormatter,
    }

    return formatters.get(format_type, TableFormatter)(console)
