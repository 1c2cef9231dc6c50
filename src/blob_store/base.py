"""Key/blob store interface used for RSVP persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class StoreError(Exception):
    """Base class for blob store failures."""


class StoreWriteError(StoreError):
    """Raised when an object could not be written."""


class StoreListError(StoreError):
    """Raised when listing objects by prefix failed."""


class StoreReadError(StoreError):
    """Raised when an object is missing or could not be fetched."""


@dataclass(frozen=True)
class BlobRef:
    """Reference to a stored object: its key and the URL to fetch it from."""

    pathname: str
    url: str


class BlobStore(ABC):
    @abstractmethod
    async def write(self, key: str, payload: str | bytes) -> BlobRef:
        """
        Store payload under key.
        Raises StoreWriteError on network or backend failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def list(self, prefix: str, limit: int) -> list[BlobRef]:
        """
        Return at most `limit` references whose key starts with prefix.
        Order is unspecified. Raises StoreListError on failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def read(self, ref: BlobRef) -> bytes:
        """
        Fetch the raw content of a stored object.
        Raises StoreReadError if the object is missing or the fetch fails.
        """
        raise NotImplementedError
