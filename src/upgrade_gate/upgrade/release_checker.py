"""Release version transition policy."""

from ..model.verdict import RejectionRule, Verdict
from ..utils.logger import get_logger
from .catalog import ReleaseCatalog, release_name
from .versions import ReleaseVersion, major_delta

logger = get_logger(__name__)


class ReleaseTransitionChecker:
    """Decides whether a cluster may move from one release version to another.

    Releases roll out one major generation at a time. Within a major version
    any active release may be targeted, upgrades and rollbacks alike; across
    majors only a single step forward is allowed.
    """

    def __init__(self, catalog: ReleaseCatalog):
        self.catalog = catalog

    def validate(self, old: ReleaseVersion, new: ReleaseVersion) -> Verdict:
        """Check the transition from ``old`` to ``new``.

        Raises CatalogUnavailable if the target release cannot be looked up.
        """
        # Unchanged versions are always allowed, even if the catalog no longer
        # lists the running release.
        if old == new:
            return Verdict.accept()

        target = release_name(new)
        state = self.catalog.lookup(new)

        if state is None:
            logger.info(f"Rejecting {old} -> {new}: release {target} not found")
            return Verdict.reject(
                RejectionRule.RELEASE_NOT_FOUND,
                f"target release {target} does not exist",
            )

        if not state.is_active:
            logger.info(f"Rejecting {old} -> {new}: release {target} is {state.value}")
            return Verdict.reject(
                RejectionRule.RELEASE_NOT_ACTIVE,
                f"target release {target} is not active (state: {state.value})",
            )

        delta = major_delta(old, new)
        if delta in (0, 1):
            logger.debug(f"Release transition {old} -> {new} allowed")
            return Verdict.accept()

        logger.info(f"Rejecting {old} -> {new}: major version delta {delta}")
        return Verdict.reject(
            RejectionRule.MAJOR_STEP,
            f"release change from {old} to {new} is not allowed: major version change "
            "must advance by exactly one, or stay within the current major",
        )
