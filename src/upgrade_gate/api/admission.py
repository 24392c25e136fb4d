"""Admission-layer service wrapping the transition validator."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ..exceptions import DependencyUnavailable
from ..k8s import K8sClient, KubectlClusterStatusStore, KubectlReleaseStore
from ..model.config import GateConfig
from ..model.kubernetes import ClusterSnapshot
from ..model.verdict import RejectionRule, Verdict
from ..utils.logger import get_logger
from .validator import TransitionValidator

logger = get_logger(__name__)

POLICY_UNAVAILABLE_MESSAGE = "could not evaluate upgrade policy"


class AdmissionHook(str, Enum):
    """Which checks an admission hook runs."""

    FULL = "full"
    RELEASE_VERSION = "release-version"
    CLUSTER_STATUS = "cluster-status"


class AdmissionDecision(BaseModel):
    """Decision returned to the admission layer."""

    allowed: bool
    message: str = ""
    rule: Optional[RejectionRule] = None
    dependency_fault: bool = False


class AdmissionService:
    """Turns validator verdicts and faults into admission decisions."""

    def __init__(self, validator: TransitionValidator, fail_open: bool = False):
        self.validator = validator
        self.fail_open = fail_open

    @classmethod
    def from_config(
        cls, config: GateConfig, client: Optional[K8sClient] = None
    ) -> "AdmissionService":
        """Wire a service backed by the cluster reachable through kubectl."""
        if client is None:
            client = K8sClient(context=config.kube_context, timeout=config.kubectl_timeout)

        validator = TransitionValidator(
            release_store=KubectlReleaseStore(client, config.release_resource),
            status_store=KubectlClusterStatusStore(client, config.cluster_status_resource),
            release_label=config.release_label,
            cluster_label=config.cluster_label,
        )
        return cls(validator, fail_open=config.fail_open)

    def review(
        self,
        old: ClusterSnapshot,
        new: ClusterSnapshot,
        hook: AdmissionHook = AdmissionHook.FULL,
    ) -> AdmissionDecision:
        """Review a proposed mutation from ``old`` to ``new``."""
        checks = {
            AdmissionHook.FULL: self.validator.validate,
            AdmissionHook.RELEASE_VERSION: self.validator.release_version_valid,
            AdmissionHook.CLUSTER_STATUS: self.validator.cluster_status_valid,
        }

        try:
            verdict: Verdict = checks[AdmissionHook(hook)](old, new)
        except DependencyUnavailable as e:
            # Internal store errors stay in the logs.
            cause = e.__cause__ or e
            logger.error(f"Policy evaluation failed for {new.name or 'cluster'}: {e} ({cause})")
            return AdmissionDecision(
                allowed=self.fail_open,
                message=POLICY_UNAVAILABLE_MESSAGE,
                dependency_fault=True,
            )

        if verdict.allowed:
            return AdmissionDecision(allowed=True)

        return AdmissionDecision(
            allowed=False, message=verdict.reason or "", rule=verdict.rule
        )
