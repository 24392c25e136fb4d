"""Exceptions raised by upgrade-gate."""


class UpgradeGateError(Exception):
    """Base class for all upgrade-gate errors."""


class VersionParseError(UpgradeGateError, ValueError):
    """A release version string is not three dot-separated non-negative integers."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"invalid release version {value!r}: expected MAJOR.MINOR.PATCH")


class DependencyUnavailable(UpgradeGateError):
    """An external read needed to evaluate the policy failed.

    Distinct from a policy rejection: the caller decides whether to fail open,
    fail closed or retry.
    """


class CatalogUnavailable(DependencyUnavailable):
    """The release catalog could not be read."""


class StatusUnavailable(DependencyUnavailable):
    """The cluster status history could not be read."""
