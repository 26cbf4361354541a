"""Kubernetes integration - connection, API client and configuration models."""

from kube_inventory.integrations.kubernetes.client import KubernetesClient
from kube_inventory.integrations.kubernetes.config import (
    ClusterConnectionConfig,
    KubernetesPluginConfig,
)
from kube_inventory.integrations.kubernetes.connection import (
    SERVICE_USER,
    build_kubeconfig,
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

__all__ = [
    "SERVICE_USER",
    "ClusterConnectionConfig",
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConflictError",
    "KubernetesConnectionError",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesPluginConfig",
    "KubernetesTimeoutError",
    "KubernetesValidationError",
    "build_kubeconfig",
    "create_api_client",
]
