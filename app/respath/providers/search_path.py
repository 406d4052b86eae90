"""Process search path root provider.

Looks up a virtual directory on every entry of a Python-style search
path (``sys.path`` by default), the way a classloader resolves a
resource name against its classpath.
"""

import logging
import sys
import zipfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from respath.providers.base import RootProvider
from respath.roots.resolve import archive_origin, plain_tree_origin

logger = logging.getLogger(__name__)


class SearchPathProvider(RootProvider):
    """Finds virtual directories on directory and zip search path entries.

    For every search path entry:

    - a directory containing a ``name`` subdirectory yields a
      ``file:`` origin for that subdirectory;
    - a zip archive with at least one member under ``name/`` yields a
      ``jar:`` origin pointing inside the archive;
    - anything else (missing paths, plain files) is skipped.

    Args:
        entries: Search path entries. Defaults to ``sys.path``, read at
            lookup time so later changes are picked up.
    """

    def __init__(self, entries: Iterable[Path] | None = None) -> None:
        self._entries = tuple(entries) if entries is not None else None

    @property
    def entries(self) -> tuple[Path, ...]:
        """Return the effective search path."""
        if self._entries is not None:
            return self._entries
        # An empty sys.path entry means the current directory
        return tuple(Path(p or ".") for p in sys.path)

    def find_roots(self, name: str) -> Iterator[str]:
        """Yield an origin for every search path entry that publishes ``name``.

        Entries are visited in search path order; an entry listed twice
        is visited once.

        Args:
            name: Virtual directory name.

        Yields:
            Origin addresses for matching entries.
        """
        seen: set[Path] = set()
        for entry in self.entries:
            key = entry.absolute()
            if key in seen:
                continue
            seen.add(key)

            origin = self._match_entry(entry, name)
            if origin is not None:
                logger.debug("Found %r on search path entry %s", name, entry)
                yield origin

    def _match_entry(self, entry: Path, name: str) -> str | None:
        """Check a single search path entry for the virtual directory.

        Args:
            entry: Search path entry (directory or archive).
            name: Virtual directory name.

        Returns:
            Origin address if the entry publishes ``name``, None otherwise.
        """
        if entry.is_dir():
            candidate = entry / name
            if candidate.is_dir():
                return plain_tree_origin(candidate)
            return None

        if entry.is_file() and zipfile.is_zipfile(entry):
            if self._archive_has_directory(entry, name):
                return archive_origin(entry, name)
            return None

        logger.debug("Skipping search path entry: %s", entry)
        return None

    @staticmethod
    def _archive_has_directory(archive: Path, name: str) -> bool:
        """Check whether an archive has any member under ``name/``.

        Archives are not required to carry explicit directory members,
        so any member path below the directory counts.
        """
        prefix = f"{name.strip('/')}/"
        try:
            with zipfile.ZipFile(archive) as zf:
                return any(member.startswith(prefix) for member in zf.namelist())
        except (OSError, zipfile.BadZipFile) as e:
            logger.warning("Cannot inspect archive on search path %s: %s", archive, e)
            return False
