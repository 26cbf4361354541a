"""Unit tests for Kubernetes configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kube_inventory.integrations.kubernetes.config import (
    ClusterConnectionConfig,
    KubernetesPluginConfig,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestClusterConnectionConfig:
    """Tests for ClusterConnectionConfig."""

    def test_minimal(self) -> None:
        config = ClusterConnectionConfig(cluster_name="prod", api_server_url="https://k8s:6443")

        assert config.cluster_name == "prod"
        assert config.namespace is None
        assert config.token is None
        assert config.ca_certificate is None

    @pytest.mark.parametrize("missing", ["cluster_name", "api_server_url"])
    def test_required_fields_missing(self, missing: str) -> None:
        values = {"cluster_name": "prod", "api_server_url": "https://k8s:6443"}
        del values[missing]

        with pytest.raises(ValidationError, match=missing):
            ClusterConnectionConfig(**values)

    @pytest.mark.parametrize("field", ["cluster_name", "api_server_url"])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_required_fields_empty(self, field: str, value: str) -> None:
        values = {"cluster_name": "prod", "api_server_url": "https://k8s:6443", field: value}

        with pytest.raises(ValidationError, match="must not be empty"):
            ClusterConnectionConfig(**values)

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ClusterConnectionConfig(cluster_name="", api_server_url="https://k8s:6443")

    def test_empty_optionals_become_none(self) -> None:
        config = ClusterConnectionConfig(
            cluster_name="prod",
            api_server_url="https://k8s:6443",
            namespace="",
            token="  ",
            ca_certificate="",
        )

        assert config.namespace is None
        assert config.token is None
        assert config.ca_certificate is None

    def test_whitespace_stripped(self) -> None:
        config = ClusterConnectionConfig(cluster_name=" prod ", api_server_url=" https://k8s ")
        assert config.cluster_name == "prod"
        assert config.api_server_url == "https://k8s"

    def test_frozen(self) -> None:
        config = ClusterConnectionConfig(cluster_name="prod", api_server_url="https://k8s")
        with pytest.raises(ValidationError):
            config.cluster_name = "other"  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClusterConnectionConfig(
                cluster_name="prod", api_server_url="https://k8s", password="x"
            )  # type: ignore[call-arg]

    def test_from_options_camel_case(self) -> None:
        config = ClusterConnectionConfig.from_options(
            clusterName="prod",
            apiServerUrl="https://k8s:6443",
            namespace="team-a",
            token="tok",
            clientCertificate="cert",
            clientKey="key",
            caCertificate="ca",
        )

        assert config.cluster_name == "prod"
        assert config.api_server_url == "https://k8s:6443"
        assert config.namespace == "team-a"
        assert config.client_certificate == "cert"
        assert config.client_key == "key"
        assert config.ca_certificate == "ca"

    def test_from_options_missing_api_server_url(self) -> None:
        with pytest.raises(ValidationError):
            ClusterConnectionConfig.from_options(clusterName="prod")

    def test_credential_predicates(self) -> None:
        token_only = ClusterConnectionConfig(
            cluster_name="c", api_server_url="https://k", token="t"
        )
        cert_only = ClusterConnectionConfig(
            cluster_name="c", api_server_url="https://k", client_certificate="c", client_key="k"
        )
        half_cert = ClusterConnectionConfig(
            cluster_name="c", api_server_url="https://k", client_certificate="c"
        )
        both = ClusterConnectionConfig(
            cluster_name="c",
            api_server_url="https://k",
            token="t",
            client_certificate="c",
            client_key="k",
        )

        assert token_only.has_token and not token_only.has_client_certificate
        assert cert_only.has_client_certificate and not cert_only.has_token
        assert not half_cert.has_client_certificate
        assert both.has_conflicting_credentials
        assert not token_only.has_conflicting_credentials


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesPluginConfig:
    """Tests for KubernetesPluginConfig."""

    def test_defaults(self) -> None:
        config = KubernetesPluginConfig()
        assert config.cluster is None
        assert config.output_format == "table"
        assert not config.is_configured

    def test_output_format_case_insensitive(self) -> None:
        assert KubernetesPluginConfig(output_format="JSON").output_format == "json"

    def test_invalid_output_format(self) -> None:
        with pytest.raises(ValidationError):
            KubernetesPluginConfig(output_format="xml")

    def test_from_env_empty(self) -> None:
        config = KubernetesPluginConfig.from_env({})
        assert not config.is_configured

    def test_from_env_nested_cluster(self) -> None:
        config = KubernetesPluginConfig.from_env(
            {"cluster": {"cluster_name": "prod", "api_server_url": "https://k8s"}}
        )

        assert config.is_configured
        assert config.cluster is not None
        assert config.cluster.cluster_name == "prod"

    def test_from_env_flat_camel_case(self) -> None:
        config = KubernetesPluginConfig.from_env(
            {"clusterName": "prod", "apiServerUrl": "https://k8s", "token": "t"}
        )

        assert config.cluster is not None
        assert config.cluster.token == "t"

    def test_from_env_blank_cluster_block_is_unconfigured(self) -> None:
        config = KubernetesPluginConfig.from_env(
            {"cluster": {"cluster_name": "", "api_server_url": "", "token": ""}}
        )
        assert config.cluster is None

    def test_from_env_partial_cluster_fails(self) -> None:
        with pytest.raises(ValidationError):
            KubernetesPluginConfig.from_env({"cluster": {"cluster_name": "prod"}})

    def test_env_overrides_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBE_INVENTORY_NAMESPACE", "from-env")
        monkeypatch.setenv("KUBE_INVENTORY_OUTPUT", "YAML")

        config = KubernetesPluginConfig.from_env(
            {
                "cluster": {
                    "cluster_name": "prod",
                    "api_server_url": "https://k8s",
                    "namespace": "from-file",
                },
                "output_format": "json",
            }
        )

        assert config.cluster is not None
        assert config.cluster.namespace == "from-env"
        assert config.output_format == "yaml"

    def test_env_alone_configures_cluster(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBE_INVENTORY_CLUSTER_NAME", "env-cluster")
        monkeypatch.setenv("KUBE_INVENTORY_API_SERVER_URL", "https://env:6443")
        monkeypatch.setenv("KUBE_INVENTORY_TOKEN", "env-token")

        config = KubernetesPluginConfig.from_env(None)

        assert config.cluster is not None
        assert config.cluster.cluster_name == "env-cluster"
        assert config.cluster.token == "env-token"

    def test_from_env_does_not_mutate_input(self) -> None:
        base = {"cluster": {"cluster_name": "prod", "api_server_url": "https://k8s"}}
        KubernetesPluginConfig.from_env(base)
        assert "cluster" in base
