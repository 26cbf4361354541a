"""Application configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = structlog.get_logger()

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "kube-inventory"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

CONFIG_VERSION = "1"

_STARTER_KUBERNETES: dict[str, Any] = {
    "cluster": {
        "cluster_name": "",
        "api_server_url": "",
        "namespace": "",
        "token": "",
        "client_certificate": "",
        "client_key": "",
        "ca_certificate": "",
    },
    "output_format": "table",
}


class InventoryConfig(BaseModel):
    """Top-level configuration file.

    Each plugin owns one entry under ``plugins``, keyed by plugin name, and
    validates it itself.
    """

    model_config = ConfigDict(extra="forbid")

    version: str = Field(default=CONFIG_VERSION, description="Configuration format version")
    plugins: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Per-plugin configuration slices"
    )

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        """Accept numeric versions written without quotes."""
        return str(v) if isinstance(v, int | float) else v

    @field_validator("plugins", mode="before")
    @classmethod
    def drop_empty_slices(cls, v: Any) -> Any:
        """A plugin key with no body is the same as an empty mapping."""
        if isinstance(v, dict):
            return {name: body or {} for name, body in v.items()}
        return v

    @classmethod
    def starter(cls) -> InventoryConfig:
        """Configuration written by ``kube-inventory init``."""
        return cls(plugins={"kubernetes": _STARTER_KUBERNETES})

    def plugin_config(self, name: str) -> dict[str, Any]:
        """Return the configuration slice for one plugin (empty if absent)."""
        return dict(self.plugins.get(name, {}))

    def to_yaml(self) -> str:
        """Render as YAML for writing to disk."""
        return yaml.safe_dump(self.model_dump(), sort_keys=False, default_flow_style=False)


def load_config(path: Path | None = None) -> InventoryConfig:
    """Load the configuration file.

    Args:
        path: File to read. Defaults to ``CONFIG_FILE``.

    Returns:
        The parsed configuration, or defaults if the file does not exist.

    Raises:
        ValueError: If the file is not valid YAML or not a mapping.
        ValidationError: If the file does not match the configuration schema.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        logger.debug("config_file_missing", path=str(config_path))
        return InventoryConfig()

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {config_path} must be a mapping")

    logger.debug("config_loaded", path=str(config_path))
    return InventoryConfig.model_validate(data)
