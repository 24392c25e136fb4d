"""Release catalog models."""

from enum import Enum

from pydantic import BaseModel


class ReleaseState(str, Enum):
    """Lifecycle state of a catalog release."""

    ACTIVE = "active"
    DEPRECATED = "deprecated"
    WIP = "wip"
    PREVIEW = "preview"
    DELETED = "deleted"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return cls.UNKNOWN

    @property
    def is_active(self) -> bool:
        """Whether a release in this state may be used as an upgrade target."""
        return self is ReleaseState.ACTIVE


class Release(BaseModel):
    """A named, versioned release as stored in the catalog."""

    name: str
    state: ReleaseState = ReleaseState.UNKNOWN

    class Config:
        frozen = True
