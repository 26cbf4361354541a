"""Kubernetes inventory service.

Provides the framework-facing entry point for scanning one cluster: it holds
the connection configuration and opens a short-lived API client per scan.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from kube_inventory.integrations.kubernetes.client import KubernetesClient
from kube_inventory.integrations.kubernetes.config import ClusterConnectionConfig
from kube_inventory.services.kubernetes.discovery_manager import ResourceDiscoveryManager

if TYPE_CHECKING:
    from kube_inventory.integrations.kubernetes.models.inventory import K8sResourceInfo
    from kube_inventory.services.kubernetes.events import EventSink

logger = structlog.get_logger()

SERVICE_NAME = "KubernetesService"


class KubernetesService:
    """Inventory service for a single cluster.

    Handles client construction and provides methods for:
    - Service status
    - Connectivity and server version checks
    - Enumerating every accessible resource in the cluster

    Example:
        >>> k8s = KubernetesService.from_options(
        ...     clusterName="prod", apiServerUrl="https://10.0.0.1:6443", token="..."
        ... )
        >>> records = k8s.list_all_api_resource_types()
    """

    def __init__(self, config: ClusterConnectionConfig) -> None:
        """Initialize Kubernetes service.

        Args:
            config: Validated cluster connection parameters.
        """
        self._config = config
        self._log = logger.bind(service="kubernetes", cluster=config.cluster_name)
        self._log.debug("service_initialized", server=config.api_server_url)

    @classmethod
    def from_options(cls, **options: Any) -> KubernetesService:
        """Create a service from camelCase or snake_case options.

        Raises:
            ValidationError: If ``clusterName`` or ``apiServerUrl`` is missing or empty.
        """
        return cls(ClusterConnectionConfig.from_options(**options))

    # =========================================================================
    # Configuration Accessors
    # =========================================================================

    @property
    def config(self) -> ClusterConnectionConfig:
        return self._config

    @property
    def cluster_name(self) -> str:
        return self._config.cluster_name

    @property
    def api_server_url(self) -> str:
        return self._config.api_server_url

    @property
    def namespace(self) -> str | None:
        return self._config.namespace

    @property
    def token(self) -> str | None:
        return self._config.token

    @property
    def client_certificate(self) -> str | None:
        return self._config.client_certificate

    @property
    def client_key(self) -> str | None:
        return self._config.client_key

    @property
    def ca_certificate(self) -> str | None:
        return self._config.ca_certificate

    # =========================================================================
    # Status
    # =========================================================================

    def status(self) -> dict[str, Any]:
        """Report that the service is installed and which cluster it targets."""
        return {"active": True, "service": SERVICE_NAME, "cluster": self.cluster_name}

    def cluster_info(self) -> dict[str, Any]:
        """Check connectivity and fetch the server version.

        Returns:
            Dict with ``cluster``, ``context``, ``namespace``, ``connected``
            and ``version`` (None when unreachable).

        Raises:
            KubernetesConnectionError: If the client context cannot be built.
        """
        with KubernetesClient(self._config) as client:
            connected = client.check_connection()
            version = client.get_cluster_version() if connected else None
            return {
                "cluster": client.cluster_name,
                "context": client.get_current_context(),
                "namespace": client.configured_namespace or "<all>",
                "connected": connected,
                "version": version,
            }

    # =========================================================================
    # Inventory
    # =========================================================================

    def list_all_api_resource_types(
        self, event_sink: EventSink | None = None
    ) -> list[K8sResourceInfo]:
        """Enumerate every accessible object in the cluster.

        Failures while talking to the cluster are returned as
        ``ResourceFailure`` records, never raised.

        Args:
            event_sink: Optional receiver for progress events.

        Returns:
            Instance and failure records in processing order.

        Raises:
            KubernetesConnectionError: If the client context cannot be built.
        """
        self._log.info("listing_all_resources")
        with KubernetesClient(self._config) as client:
            manager = ResourceDiscoveryManager(client, event_sink=event_sink)
            return manager.list_all_resources()
