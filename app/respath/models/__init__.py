"""Data models for respath.

This module exports the core data structures used throughout the application.
"""

from respath.models.entry import ResourceEntry, ResultSet, normalize_separators
from respath.models.result import EnumerationMetadata, EnumerationResult

__all__ = [
    "EnumerationMetadata",
    "EnumerationResult",
    "ResourceEntry",
    "ResultSet",
    "normalize_separators",
]
