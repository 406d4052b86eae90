"""Search root for origin schemes respath cannot read.

An unsupported root contributes nothing to an enumeration. This is a
permissive default: roots published through mechanisms other than a
plain directory or an archive (e.g. ``http:`` or a custom importer)
are skipped rather than failing the whole call.
"""

import logging
from collections.abc import Iterator

from respath.models.entry import ResourceEntry
from respath.roots.base import RootScheme, SearchRoot

logger = logging.getLogger(__name__)


class UnsupportedRoot(SearchRoot):
    """Search root whose origin scheme has no storage backend.

    Args:
        origin: Origin address as yielded by the root provider.
    """

    def __init__(self, origin: str) -> None:
        self._origin = origin

    @property
    def scheme(self) -> RootScheme:
        """Return UNSUPPORTED as the root scheme."""
        return RootScheme.UNSUPPORTED

    @property
    def location(self) -> str:
        return self._origin

    def list_entries(self) -> Iterator[ResourceEntry]:
        """Yield nothing; the origin is logged and skipped."""
        logger.warning("Skipping search root with unsupported scheme: %s", self._origin)
        yield from ()
