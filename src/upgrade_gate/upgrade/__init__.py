"""Release upgrade policy."""

from .catalog import ReleaseCatalog, release_name
from .release_checker import ReleaseTransitionChecker
from .stability import ClusterStabilityChecker
from .versions import Ordering, ReleaseVersion, compare, major_delta, parse_version

__all__ = [
    "ReleaseCatalog",
    "release_name",
    "ReleaseTransitionChecker",
    "ClusterStabilityChecker",
    "Ordering",
    "ReleaseVersion",
    "compare",
    "major_delta",
    "parse_version",
]
