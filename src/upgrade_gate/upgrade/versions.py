"""Release version parsing and ordering."""

import re
from enum import Enum
from functools import total_ordering
from typing import Tuple

from pydantic import BaseModel, Field

from ..exceptions import VersionParseError

# No leading zeros, so a label and its catalog name ("v" + str) always agree.
VERSION_PATTERN = re.compile(r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)")


class Ordering(Enum):
    """Result of comparing two release versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@total_ordering
class ReleaseVersion(BaseModel):
    """A MAJOR.MINOR.PATCH release version."""

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)

    class Config:
        frozen = True

    @classmethod
    def parse(cls, value: str) -> "ReleaseVersion":
        """Parse a dotted version string such as "3.2.1".

        Components with leading zeros ("03.0.0", "3.01.0") are rejected.
        """
        if not isinstance(value, str):
            raise VersionParseError(value)
        match = VERSION_PATTERN.fullmatch(value)
        if not match:
            raise VersionParseError(value)
        major, minor, patch = (int(group) for group in match.groups())
        return cls(major=major, minor=minor, patch=patch)

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.major, self.minor, self.patch

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ReleaseVersion):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(value: str) -> ReleaseVersion:
    """Parse a release version, raising VersionParseError when malformed."""
    return ReleaseVersion.parse(value)


def compare(a: ReleaseVersion, b: ReleaseVersion) -> Ordering:
    """Compare two versions lexicographically on (major, minor, patch)."""
    if a.as_tuple() < b.as_tuple():
        return Ordering.LESS
    if a.as_tuple() > b.as_tuple():
        return Ordering.GREATER
    return Ordering.EQUAL


def major_delta(a: ReleaseVersion, b: ReleaseVersion) -> int:
    """Signed number of major versions from a to b."""
    return b.major - a.major
