"""Cluster status models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ConditionKind(str, Enum):
    """Known lifecycle condition kinds of a cluster."""

    CREATING = "Creating"
    CREATED = "Created"
    UPDATING = "Updating"
    UPDATED = "Updated"
    DELETING = "Deleting"


# A cluster whose latest condition is one of these is mid-transition.
TRANSIENT_KINDS = frozenset(
    {ConditionKind.CREATING, ConditionKind.UPDATING, ConditionKind.DELETING}
)


class LifecycleCondition(BaseModel):
    """One entry of a cluster's status history."""

    condition: str
    last_transition_time: Optional[datetime] = Field(default=None, alias="lastTransitionTime")

    class Config:
        populate_by_name = True
        frozen = True

    @property
    def kind(self) -> Optional[ConditionKind]:
        """Return the known kind of this condition, or None if unrecognised."""
        try:
            return ConditionKind(self.condition)
        except ValueError:
            return None

    @property
    def is_transient(self) -> bool:
        return self.kind in TRANSIENT_KINDS
