"""Origin address resolution.

Origin addresses are URL-like strings yielded by a root provider:

- ``file:///opt/pkg/payloads`` names a plain directory tree.
- ``jar:file:///opt/app.jar!/payloads`` names a directory inside an
  archive; everything between the scheme marker and the first ``!``
  is the archive file, everything after it the in-archive prefix.
  ``zip:`` is accepted as a synonym for ``jar:``.

Any other scheme resolves to an UnsupportedRoot.
"""

import os
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from respath.errors import AddressResolutionError
from respath.roots.archive import ArchiveRoot
from respath.roots.base import SearchRoot
from respath.roots.plain import PlainTreeRoot
from respath.roots.unsupported import UnsupportedRoot

FILE_SCHEME = "file"
ARCHIVE_SCHEMES: tuple[str, ...] = ("jar", "zip")
ARCHIVE_SEPARATOR = "!"


def plain_tree_origin(path: Path) -> str:
    """Build the origin address for a directory tree.

    Args:
        path: Directory path; relative paths are made absolute.

    Returns:
        A ``file:`` URI.
    """
    return path.absolute().as_uri()


def archive_origin(archive: Path, prefix: str = "") -> str:
    """Build the origin address for a directory inside an archive.

    Args:
        archive: Archive file path; relative paths are made absolute.
        prefix: In-archive directory, empty for the archive root.

    Returns:
        A ``jar:file:...!/prefix`` address.
    """
    return f"jar:{archive.absolute().as_uri()}{ARCHIVE_SEPARATOR}/{prefix.strip('/')}"


def _split_scheme(origin: str) -> tuple[str, str]:
    """Split an origin into its lowercased scheme and the remainder."""
    scheme, sep, rest = origin.partition(":")
    if not sep:
        return "", origin
    return scheme.lower(), rest


def _file_uri_to_path(uri: str, origin: str) -> Path:
    """Convert a ``file:`` URI into a local absolute path.

    Args:
        uri: The ``file:`` URI to convert.
        origin: Full origin address, for error reporting.

    Raises:
        AddressResolutionError: If the URI is remote, empty, or relative.
    """
    parsed = urlparse(uri)
    if parsed.netloc not in ("", "localhost"):
        msg = f"File URI points at a remote host {parsed.netloc!r}: {origin}"
        raise AddressResolutionError(msg, origin=origin)
    if not parsed.path:
        msg = f"File URI has no path: {origin}"
        raise AddressResolutionError(msg, origin=origin)

    path = Path(url2pathname(parsed.path))
    if not path.is_absolute():
        msg = f"File URI path is not absolute: {origin}"
        raise AddressResolutionError(msg, origin=origin)
    return path


def _resolve_archive(rest: str, origin: str) -> ArchiveRoot:
    """Resolve the part of an archive origin after its scheme marker."""
    archive_part, sep, prefix = rest.partition(ARCHIVE_SEPARATOR)
    if not sep:
        msg = f"Archive origin has no '{ARCHIVE_SEPARATOR}' separator: {origin}"
        raise AddressResolutionError(msg, origin=origin)
    if not archive_part:
        msg = f"Archive origin has an empty archive path: {origin}"
        raise AddressResolutionError(msg, origin=origin)

    inner_scheme, _ = _split_scheme(archive_part)
    if inner_scheme == FILE_SCHEME:
        archive = _file_uri_to_path(archive_part, origin)
    elif len(inner_scheme) > 1:
        # Single-letter "schemes" are Windows drive letters
        msg = f"Archive must be a local file, got {inner_scheme!r}: {origin}"
        raise AddressResolutionError(msg, origin=origin)
    else:
        archive = Path(os.path.expanduser(archive_part))

    return ArchiveRoot(archive, prefix)


def resolve_root(origin: str) -> SearchRoot:
    """Translate an origin address into a concrete search root.

    Args:
        origin: Origin address yielded by a root provider.

    Returns:
        PlainTreeRoot, ArchiveRoot, or UnsupportedRoot.

    Raises:
        AddressResolutionError: If a ``file:`` or archive origin is malformed.
    """
    scheme, rest = _split_scheme(origin)

    if scheme == FILE_SCHEME:
        return PlainTreeRoot(_file_uri_to_path(origin, origin))
    if scheme in ARCHIVE_SCHEMES:
        return _resolve_archive(rest, origin)
    return UnsupportedRoot(origin)
