"""Validation outcome models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class RejectionRule(str, Enum):
    """The policy rule that rejected a transition."""

    MALFORMED_VERSION = "malformed_version"
    MISSING_CLUSTER_ID = "missing_cluster_id"
    RELEASE_NOT_FOUND = "release_not_found"
    RELEASE_NOT_ACTIVE = "release_not_active"
    MAJOR_STEP = "major_step"
    TRANSITION_IN_PROGRESS = "transition_in_progress"


class Verdict(BaseModel):
    """Accept or reject, with the reason surfaced to the requester."""

    allowed: bool
    reason: Optional[str] = None
    rule: Optional[RejectionRule] = None

    class Config:
        frozen = True

    @classmethod
    def accept(cls) -> "Verdict":
        return cls(allowed=True)

    @classmethod
    def reject(cls, rule: RejectionRule, reason: str) -> "Verdict":
        return cls(allowed=False, rule=rule, reason=reason)
