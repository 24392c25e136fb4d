"""Cluster stability gate for release transitions."""

from typing import Optional, Sequence, Tuple

from ..exceptions import StatusUnavailable
from ..k8s.base import ClusterStatusStore
from ..model.cluster import LifecycleCondition
from ..model.verdict import RejectionRule, Verdict
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ClusterStabilityChecker:
    """Rejects release changes while a cluster is mid-transition.

    The lifecycle runs Creating -> Created -> Updating -> Updated -> ...; only
    the terminal conditions allow a new release transition to start. The
    history is most-recent-first, so only its head is inspected.
    """

    def __init__(self, store: ClusterStatusStore):
        self.store = store

    def fetch_conditions(
        self, cluster_id: str, namespace: Optional[str] = None
    ) -> Tuple[LifecycleCondition, ...]:
        """Read an immutable snapshot of the cluster's condition history."""
        try:
            conditions = self.store.get_cluster_conditions(cluster_id, namespace)
        except StatusUnavailable:
            raise
        except Exception as e:
            logger.error(f"Failed to read status of cluster {cluster_id}: {e}")
            raise StatusUnavailable(f"status lookup for cluster {cluster_id} failed") from e

        return tuple(conditions)

    def validate(self, conditions: Sequence[LifecycleCondition]) -> Verdict:
        """Check the condition history, most recent entry first."""
        if not conditions:
            # No recorded history; nothing marks the cluster as mid-transition.
            logger.debug("Empty condition history, treating cluster as stable")
            return Verdict.accept()

        latest = conditions[0]
        if latest.is_transient:
            logger.info(f"Rejecting release change: latest condition is {latest.condition}")
            return Verdict.reject(
                RejectionRule.TRANSITION_IN_PROGRESS,
                f"cluster has a transition in progress (latest condition: {latest.condition})",
            )

        return Verdict.accept()

    def check_cluster(self, cluster_id: str, namespace: Optional[str] = None) -> Verdict:
        """Fetch the cluster's history and validate it."""
        return self.validate(self.fetch_conditions(cluster_id, namespace))
