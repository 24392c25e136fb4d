"""Kubernetes-backed release catalog and cluster status stores."""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from ..exceptions import CatalogUnavailable, StatusUnavailable
from ..model.cluster import LifecycleCondition
from ..model.release import Release, ReleaseState
from ..utils.logger import get_logger
from .base import ClusterStatusStore, ReleaseStore
from .client import K8sClient, K8sClientError

logger = get_logger(__name__)


class KubectlReleaseStore(ReleaseStore):
    """Reads Release custom resources (cluster scoped)."""

    def __init__(self, client: K8sClient, resource_type: str = "releases.release.giantswarm.io"):
        self.client = client
        self.resource_type = resource_type

    def get_release(self, name: str) -> Optional[Release]:
        try:
            data = self.client.get_object(self.resource_type, name)
        except K8sClientError as e:
            raise CatalogUnavailable(f"could not read release {name}") from e

        if data is None:
            return None

        spec = data.get("spec") or {}
        return Release(
            name=(data.get("metadata") or {}).get("name", name),
            state=ReleaseState(spec.get("state", "")),
        )


class KubectlClusterStatusStore(ClusterStatusStore):
    """Reads the status conditions of provider cluster resources."""

    def __init__(
        self,
        client: K8sClient,
        resource_type: str = "awsclusters.infrastructure.giantswarm.io",
    ):
        self.client = client
        self.resource_type = resource_type

    def get_cluster_conditions(
        self, cluster_id: str, namespace: Optional[str] = None
    ) -> Tuple[LifecycleCondition, ...]:
        try:
            data = self.client.get_object(self.resource_type, cluster_id, namespace)
        except K8sClientError as e:
            raise StatusUnavailable(f"could not read status of cluster {cluster_id}") from e

        if data is None:
            raise StatusUnavailable(f"{self.resource_type} {cluster_id} not found")

        status = data.get("status") or {}
        raw_conditions: List[Dict[str, Any]] = (status.get("cluster") or {}).get(
            "conditions"
        ) or []

        try:
            return tuple(LifecycleCondition(**item) for item in raw_conditions)
        except (TypeError, ValidationError) as e:
            logger.error(f"Malformed conditions on cluster {cluster_id}: {e}")
            raise StatusUnavailable(f"malformed status on cluster {cluster_id}") from e
