"""Kubernetes interaction module."""

from .base import ClusterStatusStore, ReleaseStore
from .client import K8sClient, K8sClientError
from .stores import KubectlClusterStatusStore, KubectlReleaseStore

__all__ = [
    "ClusterStatusStore",
    "ReleaseStore",
    "K8sClient",
    "K8sClientError",
    "KubectlClusterStatusStore",
    "KubectlReleaseStore",
]
