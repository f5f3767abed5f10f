"""Shared fixtures for fedversion integration tests.

Provides a minimal in-memory stand-in for the reconciliation loop that
records per-cluster versions the way a propagation controller does, so the
helpers can be exercised end to end without touching real clusters.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from fedversion.models.meta import ObjectMeta
from fedversion.models.versions import ClusterObjectVersion, PropagatedVersionStatus
from fedversion.versioning import (
    ComparisonHelper,
    cluster_version_map,
    propagated_version_status_equivalent,
    sort_cluster_versions,
    version_changed,
)


@dataclass
class VersionRecorder:
    """Records observed cluster versions into a PropagatedVersionStatus."""

    helper: ComparisonHelper
    status: PropagatedVersionStatus = field(
        default_factory=lambda: PropagatedVersionStatus(template_version="t1", override_version="")
    )
    writes: int = 0

    def observe(self, cluster_name: str, obj: dict[str, object]) -> bool:
        """Record ``obj`` for ``cluster_name``; return True if the status was persisted."""
        meta = ObjectMeta.from_dict(obj)
        recorded = cluster_version_map(self.status).get(cluster_name)
        if not version_changed(self.helper, recorded, meta):
            return False

        updated = [cv for cv in self.status.cluster_versions if cv.cluster_name != cluster_name]
        updated.append(ClusterObjectVersion(cluster_name=cluster_name, version=self.helper.get_version(meta)))
        sort_cluster_versions(updated)
        candidate = PropagatedVersionStatus(
            template_version=self.status.template_version,
            override_version=self.status.override_version,
            cluster_versions=updated,
        )
        if propagated_version_status_equivalent(self.status, candidate):
            return False
        self.status = candidate
        self.writes += 1
        return True


@pytest.fixture
def make_recorder():
    """Factory fixture building a VersionRecorder around a helper."""

    def _make(helper: ComparisonHelper) -> VersionRecorder:
        return VersionRecorder(helper=helper)

    return _make
