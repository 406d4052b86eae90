"""respath - classpath-style resource enumeration.

Lists the leaf resources published under a virtual directory across
plain directory trees and archive files.
"""

from respath.enumerator import ResourceEnumerator, enumerate_resources, list_under_root
from respath.errors import AddressResolutionError, ResourceError, ResourceIOError

__version__ = "0.1.0"

__all__ = [
    "AddressResolutionError",
    "ResourceEnumerator",
    "ResourceError",
    "ResourceIOError",
    "__version__",
    "enumerate_resources",
    "list_under_root",
]
