"""Archive search root.

Reads the member list of a zip-format archive (jar, zip, wheel, egg)
and reports every non-directory member under the root's prefix.
"""

import logging
import os
import zipfile
from collections.abc import Iterator
from pathlib import Path

from respath.errors import ResourceIOError
from respath.models.entry import ResourceEntry
from respath.roots.base import RootScheme, SearchRoot

logger = logging.getLogger(__name__)


class ArchiveRoot(SearchRoot):
    """Search root backed by a directory inside an archive file.

    Archives mark directory members with a trailing ``/`` and carry no
    separate is-file flag, so any member whose name ends with ``/`` is
    skipped. Member names are already ``/``-separated and are reported
    verbatim; a backslash in a member name is part of the name.

    Members are reported relative to ``prefix``, the same way a plain
    tree reports files relative to its root directory. An empty prefix
    means the archive root, in which case member names are reported
    verbatim.

    Args:
        archive: Path to the archive file.
        prefix: In-archive directory the root points at.
    """

    def __init__(self, archive: Path, prefix: str = "") -> None:
        self._archive = archive
        self._prefix = prefix.strip("/")

    @property
    def scheme(self) -> RootScheme:
        """Return ARCHIVE as the root scheme."""
        return RootScheme.ARCHIVE

    @property
    def location(self) -> str:
        if self._prefix:
            return f"{self._archive}!/{self._prefix}"
        return f"{self._archive}!/"

    @property
    def archive(self) -> Path:
        """Return the archive file path."""
        return self._archive

    @property
    def prefix(self) -> str:
        """Return the in-archive directory, without surrounding slashes."""
        return self._prefix

    def list_entries(self) -> Iterator[ResourceEntry]:
        """Open the archive and yield every member under the prefix.

        The archive handle is released before this generator finishes,
        on both success and failure paths.

        Yields:
            ResourceEntry relative to the prefix.

        Raises:
            ResourceIOError: If the archive is missing, unreadable, or corrupt.
        """
        archive = os.fspath(self._archive)
        member_prefix = f"{self._prefix}/" if self._prefix else ""

        try:
            with zipfile.ZipFile(archive) as zf:
                names = zf.namelist()
        except (OSError, zipfile.BadZipFile) as e:
            msg = f"Failed to read archive {archive}: {e}"
            raise ResourceIOError(msg, location=archive) from e

        skipped = 0
        for name in names:
            if name.endswith("/"):
                continue
            if not name.startswith(member_prefix):
                skipped += 1
                continue
            yield ResourceEntry(name[len(member_prefix) :])

        if skipped:
            logger.debug("Ignored %d members outside %r in %s", skipped, self._prefix, archive)
