"""Abstract base class for root providers.

A root provider answers "which locations on the search path publish
this virtual directory?" with a sequence of origin addresses.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class RootProvider(ABC):
    """Abstract base class for all root providers.

    Providers are handed to the enumerator explicitly, so tests can
    substitute synthetic roots for the process search path.

    Example:
        >>> provider = SearchPathProvider()
        >>> for origin in provider.find_roots("payloads"):
        ...     print(origin)
    """

    @abstractmethod
    def find_roots(self, name: str) -> Iterator[str]:
        """Yield the origin address of every root that publishes ``name``.

        Args:
            name: Virtual directory name.

        Yields:
            Origin addresses (``file:``, ``jar:`` ...).
        """
