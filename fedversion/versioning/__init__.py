"""Version comparison for propagated resources.

Exports:
    ComparisonHelper       -- Capability shared by every comparison strategy.
    ResourceVersionHelper  -- Uses the opaque resourceVersion token.
    GenerationHelper       -- Uses metadata.generation and ObjectMeta equivalence.
    new_comparison_helper  -- Factory selecting a helper by VersionCompareType.
    sort_cluster_versions  -- In-place normalization of per-cluster versions.
    propagated_version_status_equivalent -- Structural status equality.
"""

from fedversion.models.versions import VersionCompareType
from fedversion.versioning.comparison import (
    ComparisonHelper,
    GenerationHelper,
    MetaEquivalentFunc,
    ResourceVersionHelper,
    new_comparison_helper,
    version_changed,
)
from fedversion.versioning.meta import object_meta_equivalent
from fedversion.versioning.propagated import (
    cluster_version_map,
    cluster_versions_from_mapping,
    propagated_version_status_equivalent,
    sort_cluster_versions,
)

__all__ = [
    "ComparisonHelper",
    "GenerationHelper",
    "MetaEquivalentFunc",
    "ResourceVersionHelper",
    "VersionCompareType",
    "cluster_version_map",
    "cluster_versions_from_mapping",
    "new_comparison_helper",
    "object_meta_equivalent",
    "propagated_version_status_equivalent",
    "sort_cluster_versions",
    "version_changed",
]
