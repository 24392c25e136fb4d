"""Read interfaces for the external stores the policy depends on."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..model.cluster import LifecycleCondition
from ..model.release import Release


class ReleaseStore(ABC):
    """Read access to the release catalog."""

    @abstractmethod
    def get_release(self, name: str) -> Optional[Release]:
        """Return the release called ``name`` ("v3.2.1"), or None if it does not exist.

        Any failure to read the catalog is raised, never reported as None.
        """
        pass


class ClusterStatusStore(ABC):
    """Read access to cluster status histories."""

    @abstractmethod
    def get_cluster_conditions(
        self, cluster_id: str, namespace: Optional[str] = None
    ) -> Sequence[LifecycleCondition]:
        """Return the cluster's lifecycle conditions, most recent first."""
        pass
