"""Search roots for the supported storage backends.

This module exports the root classes and origin address helpers.
"""

from respath.roots.archive import ArchiveRoot
from respath.roots.base import RootScheme, SearchRoot
from respath.roots.plain import PlainTreeRoot
from respath.roots.resolve import archive_origin, plain_tree_origin, resolve_root
from respath.roots.unsupported import UnsupportedRoot

__all__ = [
    "ArchiveRoot",
    "PlainTreeRoot",
    "RootScheme",
    "SearchRoot",
    "UnsupportedRoot",
    "archive_origin",
    "plain_tree_origin",
    "resolve_root",
]
