"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from fedversion.errors import ConfigurationError
from fedversion.models.config import ComparisonConfig, FedVersionConfig, LogConfig
from fedversion.models.versions import VersionCompareType
from fedversion.versioning.comparison import ComparisonHelper, new_comparison_helper

_VALID_LOG_LEVELS = ("debug", "info", "warning", "error")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"FEDVERSION_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _validate_compare_type(value: str) -> VersionCompareType:
    try:
        return VersionCompareType(value)
    except ValueError:
        valid = ", ".join(t.value for t in VersionCompareType)
        raise ConfigurationError(
            f"Invalid version compare type: {value}. Must be one of {valid}", value=value
        ) from None


def _validate_log_level(value: str) -> str:
    if value.lower() not in _VALID_LOG_LEVELS:
        raise ConfigurationError(f"Invalid log level: {value}. Must be one of {_VALID_LOG_LEVELS}", value=value)
    return value.lower()


def load_config() -> FedVersionConfig:
    """Load configuration from FEDVERSION_* environment variables."""
    return FedVersionConfig(
        comparison=ComparisonConfig(
            compare_type=_validate_compare_type(_env("VERSION_COMPARE_TYPE", VersionCompareType.RESOURCE_VERSION)),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            json_output=_env_bool("LOG_JSON", True),
        ),
    )


def comparison_helper_from_config(config: FedVersionConfig) -> ComparisonHelper:
    """Build the comparison helper selected by ``config``."""
    return new_comparison_helper(config.comparison.compare_type)
