"""Kubernetes service module.

Provides the cluster inventory service and the discovery manager behind it.
"""

from kube_inventory.services.kubernetes.client import KubernetesService
from kube_inventory.services.kubernetes.discovery_manager import ResourceDiscoveryManager
from kube_inventory.services.kubernetes.events import (
    DiscoveryEvent,
    DiscoveryPhase,
    EventSink,
    log_event_sink,
)

__all__ = [
    "DiscoveryEvent",
    "DiscoveryPhase",
    "EventSink",
    "KubernetesService",
    "ResourceDiscoveryManager",
    "log_event_sink",
]
