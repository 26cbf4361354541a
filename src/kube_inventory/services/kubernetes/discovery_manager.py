"""Cluster-wide resource discovery.

Walks every API group/version the server offers, every listable kind in
each, and every instance of each kind, scoped per namespace for namespaced
kinds and once for cluster-scoped kinds.

Failures never abort the scan. Each unit of work (namespace discovery, the
group list, one group/version's discovery, one kind in one namespace) is
attempted exactly once; if it fails, a ``ResourceFailure`` record takes the
place of its results and the scan moves on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kube_inventory.integrations.kubernetes.models.base import _get_items, _safe_get
from kube_inventory.integrations.kubernetes.models.discovery import (
    CORE_GROUP_VERSION,
    APIGroupSummary,
    GroupVersion,
    ResourceTypeDescriptor,
    parse_group_version,
)
from kube_inventory.integrations.kubernetes.models.inventory import (
    K8sResourceInfo,
    ResourceFailure,
    ResourceInstance,
)
from kube_inventory.services.kubernetes.base import K8sBaseManager
from kube_inventory.services.kubernetes.events import (
    DiscoveryEvent,
    DiscoveryPhase,
    EventSink,
    log_event_sink,
)

if TYPE_CHECKING:
    from kube_inventory.integrations.kubernetes.client import KubernetesClient

FALLBACK_NAMESPACE = "default"


class ResourceDiscoveryManager(K8sBaseManager):
    """Enumerates every accessible object in a cluster.

    Example:
        >>> with KubernetesClient(config) as client:
        ...     records = ResourceDiscoveryManager(client).list_all_resources()
    """

    _entity_name = "resource_discovery"

    def __init__(self, client: KubernetesClient, *, event_sink: EventSink | None = None) -> None:
        """Initialize the manager.

        Args:
            client: Kubernetes API client instance.
            event_sink: Receives progress events. Defaults to the debug log.
        """
        super().__init__(client)
        self._sink = event_sink or log_event_sink

    def _emit(self, phase: DiscoveryPhase, detail: str) -> None:
        """Hand an event to the sink. A failing sink never stops the scan."""
        try:
            self._sink(DiscoveryEvent(phase=phase, detail=detail))
        except Exception as e:
            self._log.warning("event_sink_failed", phase=str(phase), error=str(e))

    def _fail(self, records: list[K8sResourceInfo], failure: ResourceFailure) -> None:
        records.append(failure)
        self._emit(DiscoveryPhase.FAILURE, failure.error)

    # =========================================================================
    # Namespace Resolution
    # =========================================================================

    def resolve_namespaces(self, records: list[K8sResourceInfo]) -> list[str]:
        """Determine the namespaces to scan.

        A configured namespace is used as-is, without asking the server.
        Otherwise every namespace is listed; an empty answer or a failed
        call falls back to ``default`` (a failure also appends one
        ``ResourceFailure`` to ``records``).

        Args:
            records: Result sequence to append a failure record to.

        Returns:
            Namespace names, never empty.
        """
        configured = self._client.configured_namespace
        if configured:
            namespaces = [configured]
        else:
            self._emit(DiscoveryPhase.NAMESPACES, "listing all namespaces")
            try:
                namespaces = self._client.list_namespace_names()
            except Exception as e:
                message = self._describe_error(e, resource_type="Namespace")
                self._fail(
                    records,
                    ResourceFailure(
                        error=(
                            f"Namespace discovery failed "
                            f"(falling back to '{FALLBACK_NAMESPACE}'): {message}"
                        )
                    ),
                )
                namespaces = [FALLBACK_NAMESPACE]

        if not namespaces:
            self._emit(
                DiscoveryPhase.NAMESPACES,
                f"no namespaces found, using '{FALLBACK_NAMESPACE}'",
            )
            namespaces = [FALLBACK_NAMESPACE]

        self._emit(DiscoveryPhase.NAMESPACES, f"scanning namespaces: {', '.join(namespaces)}")
        return namespaces

    # =========================================================================
    # Group/Version Traversal
    # =========================================================================

    def list_group_version_resources(
        self,
        group_version: GroupVersion,
        namespaces: list[str],
        records: list[K8sResourceInfo],
    ) -> None:
        """List every instance of every listable kind in one group/version.

        Args:
            group_version: Group/version to process.
            namespaces: Namespaces to scan namespaced kinds in.
            records: Result sequence to append to.
        """
        self._emit(DiscoveryPhase.GROUP_VERSION, f"discovering resources in {group_version}")
        try:
            resource_list = self._client.get_api_resources(group_version.api_version)
            kinds = [
                ResourceTypeDescriptor.from_k8s_object(resource, group_version)
                for resource in _safe_get(resource_list, "resources", default=[])
            ]
        except Exception as e:
            message = self._describe_error(e)
            self._fail(
                records,
                ResourceFailure(
                    group=group_version.group,
                    version=group_version.version,
                    error=(
                        f"Resource discovery failed for groupVersion "
                        f"{group_version.api_version}: {message}"
                    ),
                ),
            )
            return

        for kind in kinds:
            if not kind.supports_list:
                continue
            if kind.namespaced:
                for namespace in namespaces:
                    self._list_namespaced(kind, namespace, records)
            else:
                self._list_cluster_scoped(kind, records)

    def _list_namespaced(
        self,
        kind: ResourceTypeDescriptor,
        namespace: str,
        records: list[K8sResourceInfo],
    ) -> None:
        self._emit(DiscoveryPhase.KIND, f"listing {kind.plural} in {namespace}")
        try:
            result = self._client.list_namespaced_objects(
                kind.group, kind.version, namespace, kind.plural, kind=kind.kind
            )
        except Exception as e:
            message = self._describe_error(e, resource_type=kind.kind, namespace=namespace)
            self._fail(
                records,
                ResourceFailure(
                    group=kind.group,
                    version=kind.version,
                    kind=kind.kind,
                    namespace=namespace,
                    error=f"Failed to list instances: {message}",
                ),
            )
            return

        for item in _get_items(result):
            records.append(
                ResourceInstance(
                    group=kind.group,
                    version=kind.version,
                    kind=kind.kind,
                    namespace=_safe_get(item, "metadata", "namespace", default=namespace),
                    name=_safe_get(item, "metadata", "name", default=""),
                )
            )

    def _list_cluster_scoped(
        self,
        kind: ResourceTypeDescriptor,
        records: list[K8sResourceInfo],
    ) -> None:
        self._emit(DiscoveryPhase.KIND, f"listing cluster-scoped {kind.plural}")
        try:
            result = self._client.list_cluster_objects(
                kind.group, kind.version, kind.plural, kind=kind.kind
            )
        except Exception as e:
            message = self._describe_error(e, resource_type=kind.kind)
            self._fail(
                records,
                ResourceFailure(
                    group=kind.group,
                    version=kind.version,
                    kind=kind.kind,
                    error=f"Failed to list instances: {message}",
                ),
            )
            return

        for item in _get_items(result):
            records.append(
                ResourceInstance(
                    group=kind.group,
                    version=kind.version,
                    kind=kind.kind,
                    name=_safe_get(item, "metadata", "name", default=""),
                )
            )

    # =========================================================================
    # Full Scan
    # =========================================================================

    def list_all_resources(self) -> list[K8sResourceInfo]:
        """Enumerate every accessible object in the cluster.

        Order: core ``v1`` first, then every other API group's preferred
        version in server order; within a group/version, kinds in server
        order; within a namespaced kind, namespaces in resolved order.

        Returns:
            Instance and failure records, interleaved in processing order.
        """
        records: list[K8sResourceInfo] = []
        self._log.info("scan_started")

        namespaces = self.resolve_namespaces(records)

        # The core group is never part of the group list
        self.list_group_version_resources(CORE_GROUP_VERSION, namespaces, records)

        self._emit(DiscoveryPhase.GROUP_LIST, "discovering API groups")
        try:
            group_list = self._client.list_api_groups()
            groups = [
                APIGroupSummary.from_k8s_object(group)
                for group in _safe_get(group_list, "groups", default=[])
            ]
        except Exception as e:
            message = self._describe_error(e)
            self._fail(records, ResourceFailure(error=f"Failed to get API group list: {message}"))
            groups = []

        for group in groups:
            if not group.preferred_version:
                self._emit(
                    DiscoveryPhase.GROUP_SKIPPED,
                    f"skipping API group {group.name}: no preferred version",
                )
                continue
            try:
                group_version = parse_group_version(group.preferred_version)
            except ValueError as e:
                self._fail(
                    records,
                    ResourceFailure(
                        group=group.name,
                        error=f"Resource discovery failed for groupVersion "
                        f"{group.preferred_version}: {e}",
                    ),
                )
                continue
            self.list_group_version_resources(group_version, namespaces, records)

        failures = sum(1 for record in records if isinstance(record, ResourceFailure))
        self._emit(
            DiscoveryPhase.COMPLETE,
            f"found {len(records) - failures} resources with {failures} failures",
        )
        self._log.info("scan_finished", instances=len(records) - failures, failures=failures)
        return records
