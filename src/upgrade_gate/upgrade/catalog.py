"""Release catalog lookups."""

from typing import Optional

from ..exceptions import CatalogUnavailable
from ..k8s.base import ReleaseStore
from ..model.release import ReleaseState
from ..utils.logger import get_logger
from .versions import ReleaseVersion

logger = get_logger(__name__)


def release_name(version: ReleaseVersion) -> str:
    """Catalog name of a release version, e.g. "v3.2.1"."""
    return f"v{version}"


class ReleaseCatalog:
    """Resolves release versions to their lifecycle state."""

    def __init__(self, store: ReleaseStore):
        self.store = store

    def lookup(self, version: ReleaseVersion) -> Optional[ReleaseState]:
        """Return the state of the release, or None when it is not in the catalog."""
        name = release_name(version)
        try:
            release = self.store.get_release(name)
        except CatalogUnavailable:
            raise
        except Exception as e:
            logger.error(f"Failed to read release {name}: {e}")
            raise CatalogUnavailable(f"release catalog lookup for {name} failed") from e

        if release is None:
            logger.debug(f"Release {name} not found")
            return None

        return release.state
