"""Test configuration and fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from upgrade_gate.k8s.base import ClusterStatusStore, ReleaseStore
from upgrade_gate.model.cluster import LifecycleCondition
from upgrade_gate.model.kubernetes import ClusterSnapshot
from upgrade_gate.model.release import Release, ReleaseState

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class MemoryReleaseStore(ReleaseStore):
    """In-memory release catalog."""

    def __init__(self, releases: Optional[Dict[str, ReleaseState]] = None):
        self.releases = {
            name: Release(name=name, state=state) for name, state in (releases or {}).items()
        }
        self.lookups: List[str] = []
        self.error: Optional[Exception] = None

    def get_release(self, name: str) -> Optional[Release]:
        self.lookups.append(name)
        if self.error:
            raise self.error
        return self.releases.get(name)


class MemoryStatusStore(ClusterStatusStore):
    """In-memory cluster status histories keyed by cluster id."""

    def __init__(self, conditions: Optional[Dict[str, Sequence[LifecycleCondition]]] = None):
        self.conditions = dict(conditions or {})
        self.lookups: List[str] = []
        self.error: Optional[Exception] = None

    def get_cluster_conditions(
        self, cluster_id: str, namespace: Optional[str] = None
    ) -> Sequence[LifecycleCondition]:
        self.lookups.append(cluster_id)
        if self.error:
            raise self.error
        return self.conditions.get(cluster_id, [])


def history(*kinds: str) -> List[LifecycleCondition]:
    """Build a most-recent-first history, 15 minutes between entries."""
    return [
        LifecycleCondition(condition=kind, last_transition_time=NOW - timedelta(minutes=15 * i))
        for i, kind in enumerate(kinds)
    ]


def make_cluster(
    release_version: Optional[str],
    cluster_id: str = "a1b2c",
    namespace: str = "org-acme",
) -> ClusterSnapshot:
    """Cluster snapshot with the usual labels."""
    labels = {
        "giantswarm.io/cluster": cluster_id,
        "giantswarm.io/organization": "acme",
    }
    if release_version is not None:
        labels["release.giantswarm.io/version"] = release_version

    return ClusterSnapshot(
        api_version="cluster.x-k8s.io/v1alpha2",
        kind="Cluster",
        metadata={"name": cluster_id, "namespace": namespace, "labels": labels},
    )


@pytest.fixture
def release_store():
    """Catalog with active and deprecated releases across several majors."""
    return MemoryReleaseStore(
        {
            "v5.0.0": ReleaseState.ACTIVE,
            "v4.0.0": ReleaseState.ACTIVE,
            "v3.4.1": ReleaseState.ACTIVE,
            "v3.2.2": ReleaseState.ACTIVE,
            "v3.2.1": ReleaseState.ACTIVE,
            "v3.2.0": ReleaseState.DEPRECATED,
            "v3.1.0": ReleaseState.ACTIVE,
            "v2.0.0": ReleaseState.ACTIVE,
        }
    )


@pytest.fixture
def status_store():
    """Status store with no clusters."""
    return MemoryStatusStore()
