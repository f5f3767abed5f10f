"""Comparison helpers selected by VersionCompareType.

A helper answers two questions about a cluster's copy of a resource:
which version token to record (``get_version``) and whether two metadata
snapshots count as the same (``equivalent``). Helpers are frozen and hold
no mutable state, so one instance is shared by every reconcile worker.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fedversion.errors import ConfigurationError
from fedversion.models.versions import VersionCompareType
from fedversion.observability.logging import get_logger
from fedversion.versioning.meta import object_meta_equivalent

if TYPE_CHECKING:
    from fedversion.models.meta import ObjectMeta

_logger = get_logger("versioning.comparison")

MetaEquivalentFunc = Callable[["ObjectMeta", "ObjectMeta"], bool]


class ComparisonHelper(ABC):
    """Capability implemented by every version comparison strategy."""

    compare_type: VersionCompareType

    @abstractmethod
    def get_version(self, meta: ObjectMeta) -> str:
        """Return the version token recorded for ``meta``."""

    @abstractmethod
    def equivalent(self, meta_a: ObjectMeta, meta_b: ObjectMeta) -> bool:
        """Return True if the two metadata snapshots count as equivalent."""


@dataclass(frozen=True)
class ResourceVersionHelper(ComparisonHelper):
    """Compares by the cluster-assigned resourceVersion.

    The token changes on every write, status-only writes included, so the
    real change signal is inequality of ``get_version`` results upstream.
    """

    compare_type = VersionCompareType.RESOURCE_VERSION

    def get_version(self, meta: ObjectMeta) -> str:
        return meta.resource_version

    def equivalent(self, meta_a: ObjectMeta, meta_b: ObjectMeta) -> bool:
        # Token comparison alone decides; metadata is not inspected.
        return True


@dataclass(frozen=True)
class GenerationHelper(ComparisonHelper):
    """Compares by metadata.generation, which ignores status-only churn."""

    compare_type = VersionCompareType.GENERATION

    meta_equivalent: MetaEquivalentFunc = object_meta_equivalent

    def get_version(self, meta: ObjectMeta) -> str:
        return str(int(meta.generation))

    def equivalent(self, meta_a: ObjectMeta, meta_b: ObjectMeta) -> bool:
        return self.meta_equivalent(meta_a, meta_b)


_HELPERS: dict[VersionCompareType, type[ComparisonHelper]] = {
    VersionCompareType.RESOURCE_VERSION: ResourceVersionHelper,
    VersionCompareType.GENERATION: GenerationHelper,
}


def new_comparison_helper(
    compare_type: VersionCompareType | str,
    *,
    meta_equivalent: MetaEquivalentFunc | None = None,
) -> ComparisonHelper:
    """Instantiate the helper for ``compare_type``.

    ``meta_equivalent`` replaces the ObjectMeta equivalence predicate of the
    generation helper; the resourceVersion helper has no use for it.

    Raises:
        ConfigurationError: ``compare_type`` is not a known VersionCompareType.
    """
    try:
        kind = VersionCompareType(compare_type)
    except ValueError:
        _logger.error("unrecognized_compare_type", compare_type=repr(compare_type))
        raise ConfigurationError(
            f"Unrecognized version comparison type {compare_type!r}", value=compare_type
        ) from None

    helper_cls = _HELPERS[kind]
    if helper_cls is GenerationHelper and meta_equivalent is not None:
        helper: ComparisonHelper = GenerationHelper(meta_equivalent=meta_equivalent)
    else:
        helper = helper_cls()

    _logger.debug("comparison_helper_selected", compare_type=str(kind), helper=type(helper).__name__)
    return helper


def version_changed(helper: ComparisonHelper, recorded: str | None, meta: ObjectMeta) -> bool:
    """Return True if ``meta``'s version token differs from ``recorded``.

    A cluster with no recorded version (``None``) always counts as changed.
    """
    if recorded is None:
        return True
    return helper.get_version(meta) != recorded
