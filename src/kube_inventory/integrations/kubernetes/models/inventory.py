"""Output records of a cluster inventory scan.

A scan yields a flat sequence of two record shapes: an instance that was
found, or a failure encountered while looking. Each record carries all the
scoping it has, so it can be read without any other record for context.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _RecordBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ResourceInstance(_RecordBase):
    """A live object found in the cluster."""

    record_type: Literal["instance"] = "instance"
    group: str = Field(description="API group, empty for core")
    version: str = Field(description="API version")
    kind: str = Field(description="Kind name")
    namespace: str | None = Field(default=None, description="Namespace, None if cluster-scoped")
    name: str = Field(description="Object name")

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version


class ResourceFailure(_RecordBase):
    """A unit of work that could not be completed."""

    record_type: Literal["failure"] = "failure"
    group: str | None = Field(default=None, description="API group, if known")
    version: str | None = Field(default=None, description="API version, if known")
    kind: str | None = Field(default=None, description="Kind name, if known")
    namespace: str | None = Field(default=None, description="Namespace, if applicable")
    error: str = Field(description="What went wrong")


K8sResourceInfo = Annotated[
    ResourceInstance | ResourceFailure,
    Field(discriminator="record_type"),
]

_records_adapter: TypeAdapter[list[K8sResourceInfo]] = TypeAdapter(list[K8sResourceInfo])


def dump_records(records: Iterable[ResourceInstance | ResourceFailure]) -> list[dict[str, Any]]:
    """Serialize records to plain dicts, omitting absent fields."""
    return [record.model_dump(exclude_none=True) for record in records]


def load_records(data: Sequence[dict[str, Any]]) -> list[ResourceInstance | ResourceFailure]:
    """Decode dicts produced by :func:`dump_records`."""
    return _records_adapter.validate_python(list(data))


def split_records(
    records: Iterable[ResourceInstance | ResourceFailure],
) -> tuple[list[ResourceInstance], list[ResourceFailure]]:
    """Partition records into instances and failures, keeping order."""
    instances: list[ResourceInstance] = []
    failures: list[ResourceFailure] = []
    for record in records:
        if isinstance(record, ResourceFailure):
            failures.append(record)
        else:
            instances.append(record)
    return instances, failures
