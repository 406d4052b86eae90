"""Root providers for locating virtual directories.

This module exports the provider classes.
"""

from respath.providers.base import RootProvider
from respath.providers.search_path import SearchPathProvider
from respath.providers.static import ChainedRootProvider, StaticRootProvider

__all__ = ["ChainedRootProvider", "RootProvider", "SearchPathProvider", "StaticRootProvider"]
