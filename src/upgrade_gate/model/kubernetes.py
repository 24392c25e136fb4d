"""Kubernetes resource models."""

from typing import Dict, Any, Optional

from pydantic import BaseModel

DEFAULT_RELEASE_LABEL = "release.giantswarm.io/version"
DEFAULT_CLUSTER_LABEL = "giantswarm.io/cluster"


class ClusterSnapshot(BaseModel):
    """A cluster resource as seen by the admission layer.

    The admission layer hands over two of these per request: the persisted
    object and the requested one.
    """

    api_version: str = ""
    kind: str = "Cluster"
    metadata: Dict[str, Any]
    spec: Optional[Dict[str, Any]] = None
    status: Optional[Dict[str, Any]] = None

    @classmethod
    def from_manifest(cls, manifest: Dict[str, Any]) -> "ClusterSnapshot":
        """Build a snapshot from a decoded manifest (camelCase keys)."""
        return cls(
            api_version=manifest.get("apiVersion", ""),
            kind=manifest.get("kind", "Cluster"),
            metadata=manifest.get("metadata") or {},
            spec=manifest.get("spec"),
            status=manifest.get("status"),
        )

    @property
    def name(self) -> str:
        """Get resource name."""
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> Optional[str]:
        """Get resource namespace."""
        return self.metadata.get("namespace")

    @property
    def labels(self) -> Dict[str, str]:
        """Get resource labels; anything but a mapping counts as no labels."""
        labels = self.metadata.get("labels")
        return labels if isinstance(labels, dict) else {}

    def release_version(self, label: str = DEFAULT_RELEASE_LABEL) -> Optional[str]:
        """Return the raw release version label, if set."""
        return self.labels.get(label)

    def cluster_id(self, label: str = DEFAULT_CLUSTER_LABEL) -> Optional[str]:
        """Return the cluster identifier, falling back to the object name."""
        return self.labels.get(label) or self.name or None
