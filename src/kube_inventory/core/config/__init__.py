"""Configuration management with Pydantic validation."""

from kube_inventory.core.config.models import (
    CONFIG_DIR,
    CONFIG_FILE,
    InventoryConfig,
    load_config,
)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "InventoryConfig",
    "load_config",
]
