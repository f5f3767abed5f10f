"""Core data structures for fedversion."""

from fedversion.models.config import ComparisonConfig, FedVersionConfig, LogConfig
from fedversion.models.meta import ObjectMeta
from fedversion.models.versions import ClusterObjectVersion, PropagatedVersionStatus, VersionCompareType

__all__ = [
    "ClusterObjectVersion",
    "ComparisonConfig",
    "FedVersionConfig",
    "LogConfig",
    "ObjectMeta",
    "PropagatedVersionStatus",
    "VersionCompareType",
]
