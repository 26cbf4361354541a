"""Shared fixtures for Kubernetes service tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from kube_inventory.integrations.kubernetes.client import KubernetesClient
from kube_inventory.services.kubernetes.events import DiscoveryEvent

ObjectKey = tuple[str, str, str | None, str]


def resource(
    kind: str,
    plural: str,
    *,
    namespaced: bool = True,
    verbs: Iterable[str] = ("get", "list", "watch"),
    **extra: Any,
) -> dict[str, Any]:
    """A discovery document entry as the API server returns it."""
    return {"kind": kind, "name": plural, "namespaced": namespaced, "verbs": list(verbs), **extra}


def item(name: str, namespace: str | None = None) -> dict[str, Any]:
    """A listed object with only the metadata the scan reads."""
    metadata: dict[str, Any] = {"name": name}
    if namespace is not None:
        metadata["namespace"] = namespace
    return {"metadata": metadata}


class FakeCluster:
    """In-memory stand-in for KubernetesClient.

    Every call is recorded in ``calls``; any call key present in ``errors``
    raises the mapped exception instead of answering.
    """

    translate_api_exception = staticmethod(KubernetesClient.translate_api_exception)

    def __init__(
        self,
        *,
        namespace: str | None = None,
        namespaces: Iterable[str] = (),
        groups: Iterable[tuple[str, str | None]] = (),
        resources: dict[str, list[dict[str, Any]]] | None = None,
        objects: dict[ObjectKey, list[dict[str, Any]]] | None = None,
        errors: dict[tuple[Any, ...], Exception] | None = None,
    ) -> None:
        self.cluster_name = "test-cluster"
        self.configured_namespace = namespace
        self.namespaces = list(namespaces)
        self.groups = list(groups)
        self.resources = resources or {}
        self.objects = objects or {}
        self.errors = errors or {}
        self.calls: list[tuple[Any, ...]] = []

    def _call(self, *key: Any) -> None:
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]

    def list_namespace_names(self) -> list[str]:
        self._call("namespaces")
        return list(self.namespaces)

    def list_api_groups(self) -> dict[str, Any]:
        self._call("groups")
        groups = []
        for name, preferred in self.groups:
            group: dict[str, Any] = {"name": name}
            if preferred:
                group["preferredVersion"] = {"groupVersion": preferred}
            groups.append(group)
        return {"groups": groups}

    def get_api_resources(self, group_version: str) -> dict[str, Any]:
        self._call("resources", group_version)
        return {"resources": self.resources.get(group_version, [])}

    def list_namespaced_objects(
        self, group: str, version: str, namespace: str, plural: str, *, kind: str
    ) -> dict[str, Any]:
        self._call("list", group, version, namespace, plural)
        return {"items": self.objects.get((group, version, namespace, plural), [])}

    def list_cluster_objects(
        self, group: str, version: str, plural: str, *, kind: str
    ) -> dict[str, Any]:
        self._call("list", group, version, None, plural)
        return {"items": self.objects.get((group, version, None, plural), [])}

    def list_calls(self) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == "list"]


@pytest.fixture
def make_cluster() -> Callable[..., FakeCluster]:
    """Factory for FakeCluster instances."""
    return FakeCluster


@pytest.fixture
def events() -> list[DiscoveryEvent]:
    """Collects events from an event sink."""
    return []


@pytest.fixture
def event_sink(events: list[DiscoveryEvent]) -> Callable[[DiscoveryEvent], None]:
    return events.append


@pytest.fixture
def k8s_resource() -> Callable[..., dict[str, Any]]:
    """Builder for discovery document entries."""
    return resource


@pytest.fixture
def k8s_item() -> Callable[..., dict[str, Any]]:
    """Builder for listed objects."""
    return item
