"""Progress events emitted during an inventory scan."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

import structlog

logger = structlog.get_logger()


class DiscoveryPhase(StrEnum):
    """Step of the scan an event belongs to."""

    NAMESPACES = "namespaces"
    GROUP_VERSION = "group_version"
    GROUP_SKIPPED = "group_skipped"
    GROUP_LIST = "group_list"
    KIND = "kind"
    FAILURE = "failure"
    COMPLETE = "complete"


@dataclass(frozen=True)
class DiscoveryEvent:
    """A progress notification: which phase, and a short description."""

    phase: DiscoveryPhase
    detail: str


EventSink = Callable[[DiscoveryEvent], None]


def log_event_sink(event: DiscoveryEvent) -> None:
    """Default sink: forward events to the structured log at debug level."""
    if event.phase is DiscoveryPhase.FAILURE:
        logger.warning("discovery_event", phase=str(event.phase), detail=event.detail)
    else:
        logger.debug("discovery_event", phase=str(event.phase), detail=event.detail)
