"""Version-comparison helpers for multi-cluster resource propagation.

Decides whether a member cluster's copy of a propagated resource has changed
since it was last recorded, and keeps the per-cluster version bookkeeping
deterministic.

Submodules:
    models      -- ObjectMeta and propagated version status records.
    versioning  -- Comparison helpers and propagated version operations.
    config      -- Environment-driven configuration loading.
"""

from fedversion.errors import ConfigurationError, FedVersionError
from fedversion.versioning import (
    ComparisonHelper,
    GenerationHelper,
    ResourceVersionHelper,
    VersionCompareType,
    new_comparison_helper,
    object_meta_equivalent,
    propagated_version_status_equivalent,
    sort_cluster_versions,
)

__version__ = "0.1.0"

__all__ = [
    "ComparisonHelper",
    "ConfigurationError",
    "FedVersionError",
    "GenerationHelper",
    "ResourceVersionHelper",
    "VersionCompareType",
    "new_comparison_helper",
    "object_meta_equivalent",
    "propagated_version_status_equivalent",
    "sort_cluster_versions",
]
