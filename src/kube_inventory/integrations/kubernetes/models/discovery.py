"""Models for API discovery metadata (group/versions and resource kinds)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kube_inventory.integrations.kubernetes.models.base import _safe_get

LIST_VERB = "list"


class GroupVersion(BaseModel):
    """An API group/version pair. The core group has an empty group name."""

    model_config = ConfigDict(frozen=True)

    group: str = Field(default="", description="API group, empty for core")
    version: str = Field(description="API version, e.g. v1")

    @property
    def is_core(self) -> bool:
        """Whether this is the built-in core group."""
        return not self.group

    @property
    def api_version(self) -> str:
        """Combined form as used in ``apiVersion`` fields (``v1``, ``apps/v1``)."""
        return self.version if self.is_core else f"{self.group}/{self.version}"

    def __str__(self) -> str:
        return self.api_version


def parse_group_version(value: str) -> GroupVersion:
    """Split a combined ``group/version`` string.

    ``"v1"`` is the core group; ``"apps/v1"`` is group ``apps`` version ``v1``.

    Raises:
        ValueError: If ``value`` is empty or has an empty version part.
    """
    value = (value or "").strip()
    if not value:
        raise ValueError("group/version must not be empty")
    group, sep, version = value.rpartition("/")
    if not version or (sep and not group):
        raise ValueError(f"invalid group/version: {value!r}")
    return GroupVersion(group=group, version=version)


CORE_GROUP_VERSION = GroupVersion(group="", version="v1")


class APIGroupSummary(BaseModel):
    """An API group as reported by the group list endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(description="API group name")
    preferred_version: str | None = Field(
        default=None, description="Preferred group/version, e.g. apps/v1"
    )

    @classmethod
    def from_k8s_object(cls, obj: Any) -> APIGroupSummary:
        """Create from a kubernetes V1APIGroup object."""
        return cls(
            name=_safe_get(obj, "name", default=""),
            preferred_version=_safe_get(obj, "preferred_version", "group_version")
            or _safe_get(obj, "preferredVersion", "groupVersion"),
        )


class ResourceTypeDescriptor(BaseModel):
    """A resource kind offered by a group/version."""

    model_config = ConfigDict(frozen=True)

    group: str = Field(description="Effective API group, empty for core")
    version: str = Field(description="Effective API version")
    kind: str = Field(description="Kind name, e.g. Pod")
    plural: str = Field(description="Plural resource name used for listing")
    namespaced: bool = Field(default=False, description="Whether the kind is namespaced")
    verbs: tuple[str, ...] = Field(default=(), description="Verbs advertised by the server")

    @property
    def supports_list(self) -> bool:
        """Whether the server advertises the ``list`` verb."""
        return LIST_VERB in self.verbs

    @property
    def group_version(self) -> GroupVersion:
        """Effective group/version of this kind."""
        return GroupVersion(group=self.group, version=self.version)

    @classmethod
    def from_k8s_object(cls, obj: Any, group_version: GroupVersion) -> ResourceTypeDescriptor:
        """Create from a kubernetes V1APIResource object.

        The resource's own ``group``/``version`` win when advertised; otherwise
        the group/version being processed is used.

        Args:
            obj: V1APIResource (or equivalent mapping).
            group_version: Group/version whose discovery document listed ``obj``.
        """
        return cls(
            group=_safe_get(obj, "group") or group_version.group,
            version=_safe_get(obj, "version") or group_version.version,
            kind=_safe_get(obj, "kind", default=""),
            plural=_safe_get(obj, "name", default=""),
            namespaced=bool(_safe_get(obj, "namespaced", default=False)),
            verbs=tuple(_safe_get(obj, "verbs", default=()) or ()),
        )
