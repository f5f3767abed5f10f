"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from fedversion.models.versions import VersionCompareType


@dataclass
class ComparisonConfig:
    """Version comparison configuration."""

    compare_type: VersionCompareType = VersionCompareType.RESOURCE_VERSION


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    json_output: bool = True


@dataclass
class FedVersionConfig:
    """Top-level fedversion configuration."""

    comparison: ComparisonConfig = field(default_factory=ComparisonConfig)
    log: LogConfig = field(default_factory=LogConfig)
