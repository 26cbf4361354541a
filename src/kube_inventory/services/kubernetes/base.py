"""Base manager for Kubernetes service managers.

Provides shared infrastructure for Kubernetes managers: client access,
structured logging and error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from kube_inventory.integrations.kubernetes.client import KubernetesClient
    from kube_inventory.integrations.kubernetes.exceptions import KubernetesError

logger = structlog.get_logger()


class K8sBaseManager:
    """Base class for Kubernetes service managers.

    Subclasses set ``_entity_name`` for structured log context.
    """

    _entity_name: str = ""

    def __init__(self, client: KubernetesClient) -> None:
        """Initialize the manager.

        Args:
            client: Kubernetes API client instance.
        """
        self._client = client
        self._log = logger.bind(entity=self._entity_name, cluster=client.cluster_name)

    def _translate_error(
        self,
        e: Exception,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate an API exception into a KubernetesError."""
        return self._client.translate_api_exception(
            e,
            resource_type=resource_type,
            namespace=namespace,
        )

    def _describe_error(
        self,
        e: Exception,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> str:
        """Render an API exception as a one-line message."""
        return str(self._translate_error(e, resource_type=resource_type, namespace=namespace))
