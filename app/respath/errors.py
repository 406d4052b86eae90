"""Exception hierarchy for resource enumeration.

Every failure aborts the enumeration call that raised it; callers
decide whether to retry, skip, or give up.
"""


class ResourceError(Exception):
    """Base exception for resource enumeration errors."""


class ResourceIOError(ResourceError):
    """Raised when the storage behind a search root cannot be read.

    Covers unreadable or missing directories, permission errors, and
    archives that cannot be opened or parsed.

    Attributes:
        location: Filesystem path of the storage that failed.
    """

    def __init__(self, message: str, location: str) -> None:
        super().__init__(message)
        self.location = location


class AddressResolutionError(ResourceError):
    """Raised when an origin address cannot be turned into a storage address.

    Attributes:
        origin: The origin address as yielded by the root provider.
    """

    def __init__(self, message: str, origin: str) -> None:
        super().__init__(message)
        self.origin = origin
