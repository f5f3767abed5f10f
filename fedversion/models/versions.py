"""Propagated version records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class VersionCompareType(StrEnum):
    """How a propagated resource's version token is derived."""

    RESOURCE_VERSION = "ResourceVersion"
    GENERATION = "Generation"


@dataclass(frozen=True)
class ClusterObjectVersion:
    """Last-recorded version token for one cluster's copy of a resource."""

    cluster_name: str
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"clusterName": self.cluster_name, "version": self.version}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClusterObjectVersion:
        return cls(cluster_name=data["clusterName"], version=data.get("version", ""))


@dataclass
class PropagatedVersionStatus:
    """Version-tracking record for one propagated resource.

    ``cluster_versions`` is an unordered set of per-cluster facts stored as a
    list; normalize it with ``sort_cluster_versions`` before persisting or
    comparing.
    """

    template_version: str = ""
    override_version: str = ""
    cluster_versions: list[ClusterObjectVersion] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "templateVersion": self.template_version,
            "overrideVersion": self.override_version,
            "clusterVersions": [cv.to_dict() for cv in self.cluster_versions],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PropagatedVersionStatus:
        return cls(
            template_version=data.get("templateVersion", ""),
            override_version=data.get("overrideVersion", ""),
            cluster_versions=[ClusterObjectVersion.from_dict(cv) for cv in data.get("clusterVersions") or []],
        )
