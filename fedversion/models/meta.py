"""Read-only view of Kubernetes object metadata."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObjectMeta:
    """The subset of ``metadata`` that version comparison looks at.

    Owned by the reconciliation loop; helpers only read it.
    """

    name: str = ""
    namespace: str = ""
    resource_version: str = ""  # opaque, never parsed
    generation: int = 0
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    uid: str = ""

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> ObjectMeta:
        """Build from a Kubernetes object or its ``metadata`` mapping."""
        meta = obj.get("metadata", obj)
        return cls(
            name=meta.get("name") or "",
            namespace=meta.get("namespace") or "",
            resource_version=meta.get("resourceVersion") or "",
            generation=int(meta.get("generation") or 0),
            labels=dict(meta.get("labels") or {}),
            annotations=dict(meta.get("annotations") or {}),
            uid=meta.get("uid") or "",
        )
