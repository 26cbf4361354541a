"""Kubernetes discovery and inventory models."""

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
    dump_records,
    load_records,
    split_records,
)

__all__ = [
    "CORE_GROUP_VERSION",
    "APIGroupSummary",
    "GroupVersion",
    "K8sResourceInfo",
    "ResourceFailure",
    "ResourceInstance",
    "ResourceTypeDescriptor",
    "dump_records",
    "load_records",
    "parse_group_version",
    "split_records",
]
