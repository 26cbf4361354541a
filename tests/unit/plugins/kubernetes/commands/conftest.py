"""Shared fixtures for Kubernetes command tests."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
import typer

from kube_inventory.integrations.kubernetes.models.inventory import (
    ResourceFailure,
    ResourceInstance,
)
from kube_inventory.plugins.kubernetes.commands import register_discovery_commands


@pytest.fixture
def sample_records() -> list[ResourceInstance | ResourceFailure]:
    """One namespaced pod, one node and one denied namespace."""
    return [
        ResourceInstance(group="", version="v1", kind="Pod", namespace="default", name="nginx"),
        ResourceInstance(group="", version="v1", kind="Node", name="node-1"),
        ResourceFailure(
            group="",
            version="v1",
            kind="Pod",
            namespace="kube-system",
            error="Failed to list instances: Forbidden (status: 403) [Pod in kube-system]",
        ),
    ]


@pytest.fixture
def mock_service(sample_records: list[ResourceInstance | ResourceFailure]) -> MagicMock:
    """Create a mock KubernetesService."""
    service = MagicMock()
    service.cluster_name = "test-cluster"
    service.list_all_api_resource_types.return_value = sample_records
    service.status.return_value = {
        "active": True,
        "service": "KubernetesService",
        "cluster": "test-cluster",
    }
    service.cluster_info.return_value = {
        "cluster": "test-cluster",
        "context": "kube-inventory-test-cluster",
        "namespace": "<all>",
        "connected": True,
        "version": "v1.29",
    }
    return service


@pytest.fixture
def get_service(mock_service: MagicMock) -> Callable[[], MagicMock]:
    """Create a factory function that returns the mock service."""
    return lambda: mock_service


@pytest.fixture
def app(get_service: Callable[[], MagicMock]) -> typer.Typer:
    """Create a test app with discovery commands."""
    app = typer.Typer()
    register_discovery_commands(app, get_service)
    return app
