"""Kubernetes integration configuration models."""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Env var -> ClusterConnectionConfig field
ENV_CONNECTION_OVERRIDES: dict[str, str] = {
    "KUBE_INVENTORY_CLUSTER_NAME": "cluster_name",
    "KUBE_INVENTORY_API_SERVER_URL": "api_server_url",
    "KUBE_INVENTORY_NAMESPACE": "namespace",
    "KUBE_INVENTORY_TOKEN": "token",
    "KUBE_INVENTORY_CLIENT_CERTIFICATE": "client_certificate",
    "KUBE_INVENTORY_CLIENT_KEY": "client_key",
    "KUBE_INVENTORY_CA_CERTIFICATE": "ca_certificate",
}

_CAMEL_ALIASES: dict[str, str] = {
    "clusterName": "cluster_name",
    "apiServerUrl": "api_server_url",
    "clientCertificate": "client_certificate",
    "clientKey": "client_key",
    "caCertificate": "ca_certificate",
}


class ClusterConnectionConfig(BaseModel):
    """Connection parameters for a single cluster.

    Immutable once constructed. ``cluster_name`` and ``api_server_url`` are
    required and must be non-empty; everything else is optional. A missing
    ``namespace`` means every namespace the credentials can see is scanned.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    cluster_name: str = Field(description="Name of the Kubernetes cluster")
    api_server_url: str = Field(description="API server URL of the Kubernetes cluster")
    namespace: str | None = Field(default=None, description="Namespace to scan (all if unset)")
    token: str | None = Field(default=None, description="Bearer token for authentication")
    client_certificate: str | None = Field(
        default=None, description="Base64 PEM client certificate for TLS authentication"
    )
    client_key: str | None = Field(
        default=None, description="Base64 PEM client key for TLS authentication"
    )
    ca_certificate: str | None = Field(
        default=None, description="Base64 PEM CA certificate for TLS verification"
    )

    @field_validator("cluster_name", "api_server_url")
    @classmethod
    def validate_required(cls, v: str, info: ValidationInfo) -> str:
        """Reject empty required values."""
        if not v:
            raise ValueError(f"{info.field_name} must not be empty")
        return v

    @field_validator(
        "namespace", "token", "client_certificate", "client_key", "ca_certificate", mode="before"
    )
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        """Treat empty strings as not supplied."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_options(cls, **options: Any) -> ClusterConnectionConfig:
        """Build from framework-style options.

        Accepts the camelCase keys used by tool frameworks
        (``clusterName``, ``apiServerUrl``, ...) as well as snake_case names.

        Raises:
            ValidationError: If ``clusterName`` or ``apiServerUrl`` is missing or empty.
        """
        normalized = {_CAMEL_ALIASES.get(key, key): value for key, value in options.items()}
        return cls.model_validate(normalized)

    @property
    def has_token(self) -> bool:
        """Whether a bearer token was supplied."""
        return bool(self.token)

    @property
    def has_client_certificate(self) -> bool:
        """Whether a complete client certificate/key pair was supplied."""
        return bool(self.client_certificate and self.client_key)

    @property
    def has_conflicting_credentials(self) -> bool:
        """Whether both a token and a client certificate pair were supplied."""
        return self.has_token and self.has_client_certificate


class KubernetesPluginConfig(BaseModel):
    """The ``kubernetes`` slice of the application configuration."""

    model_config = ConfigDict(extra="forbid")

    cluster: ClusterConnectionConfig | None = None
    output_format: Literal["table", "json", "yaml"] = "table"

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_output_format(cls, v: Any) -> Any:
        """Accept output format names case-insensitively."""
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KubernetesPluginConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.
        Connection keys may be given either under a ``cluster`` mapping or
        directly at the top level of ``base_config``.

        Supported environment variables:
            KUBE_INVENTORY_CLUSTER_NAME: Cluster name
            KUBE_INVENTORY_API_SERVER_URL: API server URL
            KUBE_INVENTORY_NAMESPACE: Namespace to scan
            KUBE_INVENTORY_TOKEN: Bearer token
            KUBE_INVENTORY_CLIENT_CERTIFICATE: Base64 PEM client certificate
            KUBE_INVENTORY_CLIENT_KEY: Base64 PEM client key
            KUBE_INVENTORY_CA_CERTIFICATE: Base64 PEM CA certificate
            KUBE_INVENTORY_OUTPUT: Output format (table, json, yaml)

        Raises:
            ValidationError: If connection settings are present but incomplete.
        """
        config_dict = dict(base_config) if base_config else {}

        cluster_dict: dict[str, Any] = {
            _CAMEL_ALIASES.get(key, key): value
            for key, value in (config_dict.pop("cluster", None) or {}).items()
        }
        connection_fields = set(ENV_CONNECTION_OVERRIDES.values())
        for key in list(config_dict):
            field = _CAMEL_ALIASES.get(key, key)
            if field in connection_fields:
                cluster_dict.setdefault(field, config_dict.pop(key))

        for env_var, field in ENV_CONNECTION_OVERRIDES.items():
            if value := os.environ.get(env_var):
                cluster_dict[field] = value

        if output_format := os.environ.get("KUBE_INVENTORY_OUTPUT"):
            config_dict["output_format"] = output_format

        if any(value not in (None, "") for value in cluster_dict.values()):
            config_dict["cluster"] = ClusterConnectionConfig.from_options(**cluster_dict)

        return cls.model_validate(config_dict)

    @property
    def is_configured(self) -> bool:
        """Whether a cluster connection is configured."""
        return self.cluster is not None


__all__ = [
    "ENV_CONNECTION_OVERRIDES",
    "ClusterConnectionConfig",
    "KubernetesPluginConfig",
]
