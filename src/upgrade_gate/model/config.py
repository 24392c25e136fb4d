"""Runtime configuration."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .kubernetes import DEFAULT_CLUSTER_LABEL, DEFAULT_RELEASE_LABEL

ENV_PREFIX = "UPGRADE_GATE_"

_TRUTHY = {"1", "true", "yes", "on"}


class GateConfig(BaseModel):
    """Settings for the validator and its Kubernetes-backed stores."""

    release_label: str = DEFAULT_RELEASE_LABEL
    cluster_label: str = DEFAULT_CLUSTER_LABEL
    release_resource: str = "releases.release.giantswarm.io"
    cluster_status_resource: str = "awsclusters.infrastructure.giantswarm.io"
    kube_context: Optional[str] = None
    kubectl_timeout: float = Field(default=10.0, gt=0)
    fail_open: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "GateConfig":
        """Build a config from UPGRADE_GATE_* variables; explicit overrides win."""
        environ = os.environ if environ is None else environ
        values = {}

        for field_name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + field_name.upper())
            if raw is None or raw == "":
                continue
            if field_name == "fail_open":
                values[field_name] = raw.strip().lower() in _TRUTHY
            else:
                values[field_name] = raw

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
