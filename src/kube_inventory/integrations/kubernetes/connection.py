"""Build an authenticated API client from raw cluster credentials.

The credentials are assembled into an in-memory kubeconfig document with
exactly one cluster, one user and one context (marked current), which is then
loaded into a dedicated ``kubernetes.client.Configuration``. The process-wide
default configuration is never touched, so clients for several clusters can
coexist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from kube_inventory.integrations.kubernetes.exceptions import KubernetesConnectionError

if TYPE_CHECKING:
    from kubernetes.client import ApiClient

    from kube_inventory.integrations.kubernetes.config import ClusterConnectionConfig

logger = structlog.get_logger()

SERVICE_USER = "service-user"
DEFAULT_NAMESPACE = "default"


def context_name_for(config: ClusterConnectionConfig) -> str:
    """Return the name of the single context generated for ``config``."""
    return f"{config.cluster_name}-context"


def build_kubeconfig(config: ClusterConnectionConfig) -> dict[str, Any]:
    """Assemble a kubeconfig document for a single cluster connection.

    Credential precedence for the user entry: bearer token, then a client
    certificate/key pair, otherwise no credentials at all. Without a CA
    certificate the cluster entry disables TLS verification.

    Args:
        config: Cluster connection parameters.

    Returns:
        A kubeconfig mapping suitable for ``load_kube_config_from_dict``.
    """
    cluster_entry: dict[str, Any] = {"server": config.api_server_url}
    if config.ca_certificate:
        cluster_entry["certificate-authority-data"] = config.ca_certificate
    else:
        cluster_entry["insecure-skip-tls-verify"] = True

    user_entry: dict[str, Any] = {}
    if config.has_token:
        if config.has_conflicting_credentials:
            logger.warning(
                "conflicting_credentials",
                cluster=config.cluster_name,
                detail="token and client certificate both supplied; using token",
            )
        user_entry["token"] = config.token
    elif config.has_client_certificate:
        user_entry["client-certificate-data"] = config.client_certificate
        user_entry["client-key-data"] = config.client_key

    context_name = context_name_for(config)
    return {
        "apiVersion": "v1",
        "kind": "Config",
        "clusters": [{"name": config.cluster_name, "cluster": cluster_entry}],
        "users": [{"name": SERVICE_USER, "user": user_entry}],
        "contexts": [
            {
                "name": context_name,
                "context": {
                    "cluster": config.cluster_name,
                    "user": SERVICE_USER,
                    "namespace": config.namespace or DEFAULT_NAMESPACE,
                },
            }
        ],
        "current-context": context_name,
        "preferences": {},
    }


def create_api_client(config: ClusterConnectionConfig) -> ApiClient:
    """Create an API client bound to a private configuration for ``config``.

    No request is sent to the cluster.

    Raises:
        KubernetesConnectionError: If the generated kubeconfig cannot be loaded.
    """
    from kubernetes import client
    from kubernetes import config as kube_config
    from kubernetes.config import ConfigException

    configuration = client.Configuration()
    try:
        kube_config.load_kube_config_from_dict(
            build_kubeconfig(config),
            context=context_name_for(config),
            client_configuration=configuration,
            persist_config=False,
        )
    except (ConfigException, ValueError) as e:
        raise KubernetesConnectionError(
            message=f"Cannot build client context for cluster '{config.cluster_name}'",
            original_error=e,
        ) from e

    logger.debug(
        "client_context_built",
        cluster=config.cluster_name,
        server=config.api_server_url,
        namespace=config.namespace or DEFAULT_NAMESPACE,
    )
    return client.ApiClient(configuration)
