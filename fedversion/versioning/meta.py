"""ObjectMeta equivalence used by generation-based comparison."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fedversion.models.meta import ObjectMeta


def object_meta_equivalent(a: ObjectMeta, b: ObjectMeta) -> bool:
    """Return True if two ObjectMetas describe the same object state.

    Compares identity (name, namespace), labels and annotations. A missing
    map and an empty map are equal. ``resource_version``, ``generation`` and
    ``uid`` are ignored: they are assigned by each cluster independently.
    """
    return (
        a.name == b.name
        and a.namespace == b.namespace
        and (a.labels or {}) == (b.labels or {})
        and (a.annotations or {}) == (b.annotations or {})
    )
