"""Plain directory tree search root.

Walks a directory on the local filesystem and reports every regular
file beneath it.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from respath.errors import ResourceIOError
from respath.models.entry import ResourceEntry, normalize_separators
from respath.roots.base import RootScheme, SearchRoot

logger = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    """Propagate errors from os.walk instead of skipping the directory."""
    raise error


class PlainTreeRoot(SearchRoot):
    """Search root backed by a directory tree.

    Symbolic links to directories are not followed. Symbolic links to
    regular files count as files, matching how the entry would resolve
    when loaded.

    Args:
        path: Root directory of the tree.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def scheme(self) -> RootScheme:
        """Return PLAIN_TREE as the root scheme."""
        return RootScheme.PLAIN_TREE

    @property
    def location(self) -> str:
        return str(self._path)

    @property
    def path(self) -> Path:
        """Return the root directory."""
        return self._path

    def list_entries(self) -> Iterator[ResourceEntry]:
        """Walk the tree and yield every regular file, relative to the root.

        Yields:
            ResourceEntry with a ``/``-separated relative path.

        Raises:
            ResourceIOError: If the root is missing or any directory in
                the tree cannot be read.
        """
        root = os.fspath(self._path)
        if not os.path.isdir(root):
            msg = f"Search root is not a readable directory: {root}"
            raise ResourceIOError(msg, location=root)

        try:
            for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
                for filename in filenames:
                    full = os.path.join(dirpath, filename)
                    # Skips dangling symlinks, sockets, FIFOs and devices
                    if not os.path.isfile(full):
                        logger.debug("Skipping non-regular file: %s", full)
                        continue
                    relative = normalize_separators(os.path.relpath(full, root))
                    if relative.endswith("/"):
                        # A trailing backslash in a POSIX file name has no /-form
                        logger.warning("Skipping file with unrepresentable name: %s", full)
                        continue
                    yield ResourceEntry(relative)
        except OSError as e:
            msg = f"Failed to walk directory {root}: {e}"
            raise ResourceIOError(msg, location=root) from e
