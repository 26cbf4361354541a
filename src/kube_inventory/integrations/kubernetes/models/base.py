"""Shared helpers for Kubernetes models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """Safely traverse nested attributes or keys.

    Works on kubernetes SDK objects (attribute access) and on the plain
    dicts returned by the custom objects API (key access).
    """
    current = obj
    for attr in attrs:
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(attr)
        else:
            current = getattr(current, attr, None)
    return current if current is not None else default


def _get_items(obj: Any) -> list[Any]:
    """Extract the ``items`` list of a list response, tolerating a missing key."""
    items = _safe_get(obj, "items")
    return list(items) if items else []
