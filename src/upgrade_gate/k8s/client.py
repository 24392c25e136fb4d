"""Kubernetes client wrapper."""

import subprocess
import json
from typing import List, Tuple, Optional, Dict, Any

from ..exceptions import UpgradeGateError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class K8sClientError(UpgradeGateError):
    """kubectl failed, timed out or returned output that could not be parsed."""


class K8sClient:
    """Wrapper for kubectl commands."""

    def __init__(self, context: Optional[str] = None, timeout: Optional[float] = None):
        self.context = context
        self.timeout = timeout
        self._verify_kubectl()

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise RuntimeError("kubectl command not found. Please install kubectl.")
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired):
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str], namespace: Optional[str] = None) -> List[str]:
        """Build kubectl command with context and namespace."""
        cmd = ["kubectl"]

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)

        if namespace:
            cmd.extend(["-n", namespace])

        return cmd

    def execute(self, args: List[str], namespace: Optional[str] = None) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args, namespace)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, check=True, timeout=self.timeout
            )
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed: {e.stderr}")
            return False, e.stderr or ""
        except subprocess.TimeoutExpired:
            logger.error(f"Command timed out after {self.timeout}s")
            return False, f"kubectl timed out after {self.timeout}s"

    def get_object(
        self, resource_type: str, name: str, namespace: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """Get a single object as JSON, or None if it does not exist."""
        success, output = self.execute(["get", resource_type, name, "-o", "json"], namespace)

        if not success:
            if "(NotFound)" in output:
                logger.debug(f"{resource_type}/{name} not found")
                return None
            raise K8sClientError(
                output.strip() or f"kubectl get {resource_type}/{name} failed"
            )

        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            logger.error("Failed to parse JSON output")
            raise K8sClientError(f"invalid JSON for {resource_type}/{name}") from e
