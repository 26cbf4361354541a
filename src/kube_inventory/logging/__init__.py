"""Logging configuration for kube_inventory."""

from kube_inventory.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
