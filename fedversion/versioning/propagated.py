"""Operations on propagated version status records.

All functions are pure except ``sort_cluster_versions``, which reorders the
caller's list in place.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from fedversion.models.versions import ClusterObjectVersion

if TYPE_CHECKING:
    from fedversion.models.versions import PropagatedVersionStatus


def _cluster_name(version: ClusterObjectVersion) -> str:
    return version.cluster_name


def sort_cluster_versions(versions: list[ClusterObjectVersion]) -> None:
    """Sort ``versions`` in place, ascending by cluster name.

    Ordering is by code point (byte-wise for ASCII names), not locale-aware.
    ``list.sort`` is stable, so duplicate names keep their relative order.
    """
    versions.sort(key=_cluster_name)


def propagated_version_status_equivalent(a: PropagatedVersionStatus, b: PropagatedVersionStatus) -> bool:
    """Return True if both statuses have identical template, override and cluster versions.

    ``cluster_versions`` is compared position by position; both lists must
    already be normalized with ``sort_cluster_versions``.
    """
    return (
        a.template_version == b.template_version
        and a.override_version == b.override_version
        and a.cluster_versions == b.cluster_versions
    )


def cluster_versions_from_mapping(versions: Mapping[str, str]) -> list[ClusterObjectVersion]:
    """Build a normalized cluster version list from ``{cluster_name: version}``."""
    result = [ClusterObjectVersion(cluster_name=name, version=version) for name, version in versions.items()]
    sort_cluster_versions(result)
    return result


def cluster_version_map(status: PropagatedVersionStatus) -> dict[str, str]:
    """Return ``{cluster_name: version}`` for the status's cluster versions."""
    return {cv.cluster_name: cv.version for cv in status.cluster_versions}
