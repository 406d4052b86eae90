"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

from respath.config import RespathConfig
from respath.providers.base import RootProvider
from respath.providers.search_path import SearchPathProvider
from respath.providers.static import ChainedRootProvider, StaticRootProvider
from respath.roots.resolve import plain_tree_origin


class OutputFormat(str, Enum):
    """Output format options."""

    PLAIN = "plain"
    TABLE = "table"
    JSON = "json"


def coerce_origin(value: str) -> str:
    """Turn a bare directory path into a ``file:`` origin.

    Values that already carry a scheme (``file:``, ``jar:`` ...) are
    returned unchanged. Single-letter schemes are treated as Windows
    drive letters.

    Args:
        value: Origin address or filesystem path from the command line.

    Returns:
        Origin address.
    """
    scheme, sep, _ = value.partition(":")
    if sep and len(scheme) > 1:
        return value
    return plain_tree_origin(Path(value).expanduser())


def build_provider(
    config: RespathConfig,
    roots: list[str] | None = None,
    paths: list[Path] | None = None,
) -> RootProvider:
    """Build the root provider for a command invocation.

    Explicit ``--root`` origins replace discovery entirely. Otherwise
    the search path comes from ``--path``, then the config file, then
    sys.path; configured origins are appended after it.

    Args:
        config: Loaded configuration.
        roots: Origins given with ``--root``.
        paths: Search path entries given with ``--path``.

    Returns:
        RootProvider for the enumerator.
    """
    if roots:
        return StaticRootProvider(coerce_origin(r) for r in roots)

    entries = paths or config.search_path or None
    provider: RootProvider = SearchPathProvider(entries)

    if config.origins:
        provider = ChainedRootProvider(provider, StaticRootProvider(config.origins))
    return provider
