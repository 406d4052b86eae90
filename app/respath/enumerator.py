"""Resource enumeration across search roots.

Given a root provider and a virtual directory name, visits every root
that publishes the directory, lists its leaf entries, and unions the
results into one deduplicated set.

Enumeration is all-or-nothing: the first root that cannot be resolved
or read aborts the call and no partial result is returned.
"""

import logging
from collections.abc import Iterable, Iterator

from respath.models.entry import ResourceEntry, ResultSet
from respath.providers.base import RootProvider
from respath.roots.base import SearchRoot
from respath.roots.resolve import resolve_root

logger = logging.getLogger(__name__)


def _validate_name(name: str) -> None:
    """Reject empty virtual directory names."""
    if not isinstance(name, str) or not name.strip():
        msg = "Virtual directory name cannot be empty"
        raise ValueError(msg)


def iter_roots(provider: RootProvider, name: str) -> Iterator[SearchRoot]:
    """Resolve every origin the provider yields for ``name``.

    Args:
        provider: Source of origin addresses.
        name: Virtual directory name.

    Yields:
        SearchRoot for each origin, in provider order.

    Raises:
        ValueError: If ``name`` is empty.
        AddressResolutionError: If an origin is malformed.
    """
    _validate_name(name)
    for origin in provider.find_roots(name):
        yield resolve_root(origin)


def list_under_root(root: SearchRoot) -> ResultSet:
    """List the leaf entries beneath a single root.

    Args:
        root: Resolved search root.

    Returns:
        Set of entries relative to the root. Unsupported roots give
        an empty set.

    Raises:
        ResourceIOError: If the root's storage cannot be read.
    """
    entries = root.collect()
    logger.debug(
        "Listed %d entries under %s root %s", len(entries), root.scheme.value, root.location
    )
    return entries


def union_roots(roots: Iterable[SearchRoot]) -> ResultSet:
    """Union the entries of already-resolved roots.

    Raises:
        ResourceIOError: If any root's storage cannot be read.
    """
    result: set[ResourceEntry] = set()
    for root in roots:
        result.update(list_under_root(root))
    return frozenset(result)


class ResourceEnumerator:
    """Enumerates the resources published under a virtual directory.

    The enumerator keeps no state between calls; concurrent callers
    may share one instance.

    Args:
        provider: Source of origin addresses for a virtual directory.

    Example:
        >>> enumerator = ResourceEnumerator(SearchPathProvider())
        >>> for entry in sorted(enumerator.enumerate("payloads")):
        ...     print(entry)
    """

    def __init__(self, provider: RootProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> RootProvider:
        """Return the root provider."""
        return self._provider

    def roots(self, name: str) -> list[SearchRoot]:
        """Resolve all roots for ``name`` without listing them.

        Raises:
            ValueError: If ``name`` is empty.
            AddressResolutionError: If an origin is malformed.
        """
        return list(iter_roots(self._provider, name))

    def enumerate(self, name: str) -> ResultSet:
        """Return the union of leaf entries under every root for ``name``.

        Args:
            name: Virtual directory name.

        Returns:
            Deduplicated set of entries; same relative path from two
            roots appears once.

        Raises:
            ValueError: If ``name`` is empty.
            AddressResolutionError: If an origin is malformed.
            ResourceIOError: If a root's storage cannot be read.
        """
        result = union_roots(iter_roots(self._provider, name))
        logger.debug("Enumerated %d entries for %r", len(result), name)
        return result


def enumerate_resources(provider: RootProvider, name: str) -> ResultSet:
    """Enumerate the resources published under ``name``.

    Shortcut for ``ResourceEnumerator(provider).enumerate(name)``.
    """
    return ResourceEnumerator(provider).enumerate(name)
