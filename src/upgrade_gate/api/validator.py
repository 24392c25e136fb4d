"""Transition validation for cluster release changes."""

from typing import Optional, Tuple, Union

from ..exceptions import VersionParseError
from ..k8s.base import ClusterStatusStore, ReleaseStore
from ..model.kubernetes import ClusterSnapshot, DEFAULT_CLUSTER_LABEL, DEFAULT_RELEASE_LABEL
from ..model.verdict import RejectionRule, Verdict
from ..upgrade.catalog import ReleaseCatalog
from ..upgrade.release_checker import ReleaseTransitionChecker
from ..upgrade.stability import ClusterStabilityChecker
from ..upgrade.versions import ReleaseVersion
from ..utils.logger import get_logger

logger = get_logger(__name__)


class TransitionValidator:
    """Accept/reject decision for a proposed cluster mutation.

    Holds no per-call state, so one instance can serve concurrent requests.
    Dependency faults (CatalogUnavailable, StatusUnavailable) propagate to the
    caller unchanged.
    """

    def __init__(
        self,
        release_store: ReleaseStore,
        status_store: ClusterStatusStore,
        release_label: str = DEFAULT_RELEASE_LABEL,
        cluster_label: str = DEFAULT_CLUSTER_LABEL,
    ):
        self.release_checker = ReleaseTransitionChecker(ReleaseCatalog(release_store))
        self.stability_checker = ClusterStabilityChecker(status_store)
        self.release_label = release_label
        self.cluster_label = cluster_label

    def validate(self, old: ClusterSnapshot, new: ClusterSnapshot) -> Verdict:
        """Run the release policy, then the stability gate if the version changes."""
        parsed = self._parse_versions(old, new)
        if isinstance(parsed, Verdict):
            return parsed
        old_version, new_version = parsed

        verdict = self.release_checker.validate(old_version, new_version)
        if not verdict.allowed:
            return verdict

        if old_version == new_version:
            return verdict

        return self._check_stability(old, new)

    def release_version_valid(self, old: ClusterSnapshot, new: ClusterSnapshot) -> Verdict:
        """Run the release version policy alone."""
        parsed = self._parse_versions(old, new)
        if isinstance(parsed, Verdict):
            return parsed
        return self.release_checker.validate(*parsed)

    def cluster_status_valid(self, old: ClusterSnapshot, new: ClusterSnapshot) -> Verdict:
        """Run the stability gate when the release version changes."""
        parsed = self._parse_versions(old, new)
        if isinstance(parsed, Verdict):
            return parsed
        old_version, new_version = parsed

        if old_version == new_version:
            return Verdict.accept()

        return self._check_stability(old, new)

    def _parse_versions(
        self, old: ClusterSnapshot, new: ClusterSnapshot
    ) -> Union[Tuple[ReleaseVersion, ReleaseVersion], Verdict]:
        versions = []
        for which, snapshot in (("current", old), ("requested", new)):
            raw = snapshot.release_version(self.release_label)
            try:
                versions.append(ReleaseVersion.parse(raw))
            except VersionParseError:
                reason = (
                    f"{which} release version label {self.release_label} is missing"
                    if raw is None
                    else f"{which} release version label {self.release_label}={raw!r} "
                    "is not a valid MAJOR.MINOR.PATCH version"
                )
                logger.info(f"Rejecting {snapshot.name or 'cluster'}: {reason}")
                return Verdict.reject(RejectionRule.MALFORMED_VERSION, reason)

        return versions[0], versions[1]

    def _check_stability(self, old: ClusterSnapshot, new: ClusterSnapshot) -> Verdict:
        cluster_id = self._cluster_id(old, new)
        if not cluster_id:
            return Verdict.reject(
                RejectionRule.MISSING_CLUSTER_ID,
                f"cluster identifier label {self.cluster_label} is missing",
            )

        namespace = new.namespace or old.namespace
        logger.debug(f"Checking stability of cluster {cluster_id}")
        return self.stability_checker.check_cluster(cluster_id, namespace)

    def _cluster_id(self, old: ClusterSnapshot, new: ClusterSnapshot) -> Optional[str]:
        return new.cluster_id(self.cluster_label) or old.cluster_id(self.cluster_label)
