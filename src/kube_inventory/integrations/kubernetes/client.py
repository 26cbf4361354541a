"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client for a single cluster connection
with lazy API group initialization, the discovery and listing calls used by
the inventory scan, and consistent error translation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import structlog

from kube_inventory.integrations.kubernetes.connection import (
    DEFAULT_NAMESPACE,
    context_name_for,
    create_api_client,
)
from kube_inventory.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
)
from kube_inventory.integrations.kubernetes.models.base import _get_items, _safe_get
from kube_inventory.integrations.kubernetes.models.discovery import parse_group_version

if TYPE_CHECKING:
    from kubernetes.client import (
        ApiClient,
        ApisApi,
        CoreV1Api,
        CustomObjectsApi,
        V1APIGroupList,
        V1APIResourceList,
        VersionApi,
    )

    from kube_inventory.integrations.kubernetes.config import ClusterConnectionConfig

logger = structlog.get_logger()

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(kind: str) -> str:
    """``PersistentVolumeClaim`` -> ``persistent_volume_claim``."""
    return _CAMEL_BOUNDARY.sub("_", kind).lower()


class KubernetesClient:
    """API client for one cluster connection.

    Provides:
    - An ``ApiClient`` built from raw credentials (no kubeconfig file needed)
    - Lazy API group initialization bound to that ``ApiClient``
    - Discovery calls scoped to a single group/version
    - Object listing for any group, including the core group
    - Consistent error translation to custom exceptions
    - Context manager support

    Example:
        ```python
        from kube_inventory.integrations.kubernetes import (
            ClusterConnectionConfig,
            KubernetesClient,
        )

        config = ClusterConnectionConfig(
            cluster_name="prod", api_server_url="https://10.0.0.1:6443", token="..."
        )
        with KubernetesClient(config) as client:
            print(client.list_namespace_names())
        ```
    """

    def __init__(self, connection: ClusterConnectionConfig) -> None:
        """Initialize the client.

        Args:
            connection: Cluster connection parameters.

        Raises:
            KubernetesConnectionError: If the client context cannot be built.
        """
        self._connection = connection
        self._api_client: ApiClient | None = create_api_client(connection)

        # Lazy-loaded API group instances
        self._core_v1: CoreV1Api | None = None
        self._apis: ApisApi | None = None
        self._custom_objects: CustomObjectsApi | None = None
        self._version_api: VersionApi | None = None

        logger.info(
            "Kubernetes client initialized",
            cluster=connection.cluster_name,
            context=self.get_current_context(),
            namespace=connection.namespace or "<all>",
        )

    @property
    def api_client(self) -> ApiClient:
        """The underlying ApiClient."""
        if self._api_client is None:
            raise KubernetesConnectionError(
                message=f"Client for cluster '{self.cluster_name}' is closed"
            )
        return self._api_client

    def _invalidate_api_cache(self) -> None:
        """Clear cached API group instances."""
        self._core_v1 = None
        self._apis = None
        self._custom_objects = None
        self._version_api = None

    # =========================================================================
    # Lazy API Group Accessors
    # =========================================================================

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (namespaces, core discovery and listing)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api(self.api_client)
        return self._core_v1

    @property
    def apis(self) -> ApisApi:
        """Get ApisApi instance (API group list)."""
        if self._apis is None:
            from kubernetes.client import ApisApi

            self._apis = ApisApi(self.api_client)
        return self._apis

    @property
    def custom_objects(self) -> CustomObjectsApi:
        """Get CustomObjectsApi instance (discovery and listing for named groups)."""
        if self._custom_objects is None:
            from kubernetes.client import CustomObjectsApi

            self._custom_objects = CustomObjectsApi(self.api_client)
        return self._custom_objects

    @property
    def version_api(self) -> VersionApi:
        """Get VersionApi instance for cluster version info."""
        if self._version_api is None:
            from kubernetes.client import VersionApi

            self._version_api = VersionApi(self.api_client)
        return self._version_api

    # =========================================================================
    # Discovery
    # =========================================================================

    def list_namespace_names(self) -> list[str]:
        """List the names of all namespaces, in server order."""
        result = self.core_v1.list_namespace()
        return [
            name for ns in _get_items(result) if (name := _safe_get(ns, "metadata", "name"))
        ]

    def list_api_groups(self) -> V1APIGroupList:
        """Get the list of API groups. The core group is not part of it."""
        return self.apis.get_api_versions()

    def get_api_resources(self, group_version: str) -> V1APIResourceList:
        """Get the resource kinds served by exactly one group/version.

        Args:
            group_version: Combined form, e.g. ``v1`` or ``apps/v1``.
        """
        gv = parse_group_version(group_version)
        if gv.is_core:
            return self.core_v1.get_api_resources()
        return self.custom_objects.get_api_resources(gv.group, gv.version)

    # =========================================================================
    # Listing
    # =========================================================================

    def list_namespaced_objects(
        self, group: str, version: str, namespace: str, plural: str, *, kind: str
    ) -> Any:
        """List objects of one kind in one namespace.

        Named groups go through the custom objects endpoint and return a
        dict; core kinds go through the typed ``CoreV1Api`` list call and
        return its list model. Both expose ``items``.
        """
        if group:
            return self.custom_objects.list_namespaced_custom_object(
                group, version, namespace, plural
            )
        return self._core_list_call(version, kind, namespaced=True)(namespace)

    def list_cluster_objects(self, group: str, version: str, plural: str, *, kind: str) -> Any:
        """List objects of one cluster-scoped kind."""
        if group:
            return self.custom_objects.list_cluster_custom_object(group, version, plural)
        return self._core_list_call(version, kind, namespaced=False)()

    def _core_list_call(self, version: str, kind: str, *, namespaced: bool) -> Any:
        """Resolve the ``CoreV1Api`` list method for a core kind.

        ``ConfigMap`` maps to ``list_namespaced_config_map``, ``Node`` to
        ``list_node``.

        Raises:
            KubernetesError: If the installed client has no list call for the kind.
        """
        name = _snake_case(kind)
        method_name = f"list_namespaced_{name}" if namespaced else f"list_{name}"
        method = getattr(self.core_v1, method_name, None) if version == "v1" else None
        if method is None:
            raise KubernetesError(
                message=f"No client list call for core kind {kind} ({version})",
                resource_type=kind,
            )
        return method

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes ApiException to a custom exception.

        Args:
            e: The original exception.
            resource_type: Kind being operated on.
            resource_name: Name of the object.
            namespace: Namespace involved.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException

        if isinstance(e, KubernetesError):
            return e

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e) or type(e).__name__,
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        status = e.status

        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
                resource_type=resource_type,
                namespace=namespace,
            )

        if status == 404:
            return KubernetesNotFoundError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status == 409:
            return KubernetesConflictError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status in (400, 422):
            return KubernetesValidationError(
                message=e.reason or "Validation failed",
                status_code=status,
            )

        if status in (408, 504):
            return KubernetesTimeoutError(
                message=e.reason or "Request timed out",
                status_code=status,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )

    # =========================================================================
    # Connection Check
    # =========================================================================

    def check_connection(self) -> bool:
        """Check if the API server answers.

        Returns:
            True if connection is successful, False otherwise.
        """
        try:
            self.version_api.get_code()
            return True
        except Exception as e:
            logger.debug("connection_check_failed", cluster=self.cluster_name, error=str(e))
            return False

    def get_cluster_version(self) -> str:
        """Get the Kubernetes cluster version string.

        Returns:
            Kubernetes version (e.g., "v1.28").

        Raises:
            KubernetesConnectionError: If the cluster is unreachable.
        """
        try:
            version_info = self.version_api.get_code()
            return f"v{version_info.major}.{version_info.minor}"
        except Exception as e:
            raise KubernetesConnectionError(
                message="Failed to get cluster version",
                original_error=e,
            ) from e

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def cluster_name(self) -> str:
        """Name of the connected cluster."""
        return self._connection.cluster_name

    @property
    def configured_namespace(self) -> str | None:
        """Namespace from the connection config, None when all namespaces are scanned."""
        return self._connection.namespace

    @property
    def default_namespace(self) -> str:
        """Namespace of the generated context."""
        return self._connection.namespace or DEFAULT_NAMESPACE

    def get_current_context(self) -> str:
        """Get the name of the generated context."""
        return context_name_for(self._connection)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the client and release its connection pool."""
        self._invalidate_api_cache()
        if self._api_client is not None:
            self._api_client.close()
            self._api_client = None
        logger.debug("Kubernetes client closed", cluster=self.cluster_name)

    def __enter__(self) -> KubernetesClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
