"""Resource entry value object.

A resource entry is one leaf item beneath a search root, identified
by its root-relative path using ``/`` as the only separator.
"""

from dataclasses import dataclass


def normalize_separators(path: str) -> str:
    """Replace every backslash in a relative path with a forward slash."""
    return path.replace("\\", "/")


@dataclass(frozen=True, slots=True, order=True)
class ResourceEntry:
    """A single leaf resource, relative to the root that contributed it.

    Entries compare and hash by their path, so the same relative path
    contributed by two different roots collapses into one entry inside
    a set. Paths are stored as given; backends hand in paths that
    already use ``/`` separators.

    Attributes:
        path: Root-relative path with ``/`` separators.
    """

    path: str

    def __post_init__(self) -> None:
        """Reject empty and directory-like paths."""
        if not self.path:
            msg = "Resource path cannot be empty"
            raise ValueError(msg)
        if self.path.endswith("/"):
            msg = f"Resource path names a directory: {self.path!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.path

    @property
    def name(self) -> str:
        """Return the last path segment."""
        return self.path.rsplit("/", 1)[-1]

    @property
    def parent(self) -> str:
        """Return the directory part of the path, or an empty string."""
        head, _, _ = self.path.rpartition("/")
        return head


# A deduplicated, unordered collection of entries
ResultSet = frozenset[ResourceEntry]
