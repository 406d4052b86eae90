"""Abstract base class for search roots.

This module defines the SearchRoot interface that every storage
backend must implement, and the closed set of schemes a root can
carry.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum

from respath.models.entry import ResourceEntry, ResultSet


class RootScheme(str, Enum):
    """Storage backend behind a search root.

    Attributes:
        PLAIN_TREE: A directory tree on the local filesystem.
        ARCHIVE: A zip-format archive file (jar, zip, wheel, egg).
        UNSUPPORTED: Any origin scheme respath cannot read.
    """

    PLAIN_TREE = "plain-tree"
    ARCHIVE = "archive"
    UNSUPPORTED = "unsupported"


class SearchRoot(ABC):
    """Abstract base class for one located origin of a virtual directory.

    Roots are discovered per enumeration call and discarded afterwards.
    Each concrete root lists the leaf entries beneath it, relative to
    the root itself.

    Example:
        >>> root = PlainTreeRoot(Path("/opt/pkg/payloads"))
        >>> for entry in root.list_entries():
        ...     print(entry.path)
    """

    @property
    @abstractmethod
    def scheme(self) -> RootScheme:
        """Return the storage backend this root reads from."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Return a human-readable concrete storage address."""

    @abstractmethod
    def list_entries(self) -> Iterator[ResourceEntry]:
        """Yield every leaf entry beneath this root.

        Yields:
            ResourceEntry for each non-directory item.

        Raises:
            ResourceIOError: If the underlying storage cannot be read.
        """

    def collect(self) -> ResultSet:
        """Return all entries beneath this root as a set.

        The whole listing is materialized before returning, so a read
        failure halfway through never produces a partial set.
        """
        return frozenset(self.list_entries())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"
