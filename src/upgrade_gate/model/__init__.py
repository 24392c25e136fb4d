"""Data models for upgrade-gate."""

from .cluster import ConditionKind, LifecycleCondition, TRANSIENT_KINDS
from .config import GateConfig
from .kubernetes import ClusterSnapshot
from .release import Release, ReleaseState
from .verdict import RejectionRule, Verdict

__all__ = [
    "ConditionKind",
    "LifecycleCondition",
    "TRANSIENT_KINDS",
    "GateConfig",
    "ClusterSnapshot",
    "Release",
    "ReleaseState",
    "RejectionRule",
    "Verdict",
]
