"""Enumeration result model for JSON export.

This module defines the data structure for exporting enumeration
results to JSON with proper metadata.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from respath.models.entry import ResourceEntry


@dataclass(frozen=True, slots=True)
class EnumerationMetadata:
    """Metadata for an enumeration result.

    Attributes:
        timestamp: ISO format timestamp when the enumeration ran.
        hostname: Name of the machine the roots were read on.
        respath_version: Version of respath that produced the result.
        virtual_directory: Virtual directory name that was enumerated.
        origins: Tuple of origin addresses that were visited (immutable).
    """

    timestamp: str
    hostname: str
    respath_version: str
    virtual_directory: str
    origins: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "hostname": self.hostname,
            "respath_version": self.respath_version,
            "virtual_directory": self.virtual_directory,
            "origins": list(self.origins),
        }


@dataclass(frozen=True, slots=True)
class EnumerationResult:
    """Complete enumeration result for export.

    Attributes:
        metadata: Enumeration metadata including timestamp and origins.
        entries: Entries sorted by path.
    """

    metadata: EnumerationMetadata
    entries: tuple[ResourceEntry, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "entries": [entry.path for entry in self.entries],
            "total": len(self.entries),
        }

    @classmethod
    def create(
        cls,
        entries: frozenset[ResourceEntry],
        virtual_directory: str,
        origins: list[str],
    ) -> "EnumerationResult":
        """Create an EnumerationResult with auto-generated metadata.

        Args:
            entries: Deduplicated entries returned by the enumerator.
            virtual_directory: Name that was enumerated.
            origins: Origin addresses that were visited.

        Returns:
            EnumerationResult with populated metadata and sorted entries.
        """
        import socket

        from respath import __version__

        metadata = EnumerationMetadata(
            timestamp=datetime.now(UTC).isoformat(),
            hostname=socket.gethostname(),
            respath_version=__version__,
            virtual_directory=virtual_directory,
            origins=tuple(origins),
        )
        return cls(metadata=metadata, entries=tuple(sorted(entries)))
