"""Tool entry points for agent frameworks.

Tools take their collaborators as arguments and always return a plain,
JSON-serializable mapping: either the result or an ``error`` message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from kube_inventory.integrations.kubernetes.models.inventory import dump_records

if TYPE_CHECKING:
    from kube_inventory.services.kubernetes import EventSink, KubernetesService

logger = structlog.get_logger()

TOOL_NAME = "kubernetes_listKubernetesApiResources"

TOOL_DESCRIPTION = (
    "Lists all instances of all accessible API resource types in the configured "
    "Kubernetes cluster. Fetches resources from all discoverable namespaces if no "
    "namespace is configured, or from the configured namespace otherwise."
)


def list_kubernetes_api_resources(
    service: KubernetesService | None,
    event_sink: EventSink | None = None,
) -> dict[str, Any]:
    """List every accessible resource through ``service``.

    Args:
        service: The registered inventory service, or None if none is installed.
        event_sink: Optional receiver for progress events.

    Returns:
        ``{"resources": [...]}`` with one dict per record, or ``{"error": "..."}``.
    """
    if service is None:
        return {"error": "KubernetesService not found in registry."}

    try:
        records = service.list_all_api_resource_types(event_sink=event_sink)
    except Exception as e:
        logger.error("list_resources_tool_failed", error=str(e))
        return {"error": f"Failed to list Kubernetes resources: {e}"}

    return {"resources": dump_records(records)}
