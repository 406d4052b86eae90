"""Root provider over a fixed list of origins."""

from collections.abc import Iterable, Iterator

from respath.providers.base import RootProvider


class StaticRootProvider(RootProvider):
    """Yields the same origins for every virtual directory name.

    Args:
        origins: Origin addresses to yield, in order.
    """

    def __init__(self, origins: Iterable[str]) -> None:
        self._origins = tuple(origins)

    @property
    def origins(self) -> tuple[str, ...]:
        """Return the configured origins."""
        return self._origins

    def find_roots(self, name: str) -> Iterator[str]:
        _ = name  # Origins are fixed regardless of the name
        yield from self._origins


class ChainedRootProvider(RootProvider):
    """Yields the origins of several providers, one after another.

    Args:
        providers: Providers to consult, in order.
    """

    def __init__(self, *providers: RootProvider) -> None:
        self._providers = providers

    def find_roots(self, name: str) -> Iterator[str]:
        for provider in self._providers:
            yield from provider.find_roots(name)
