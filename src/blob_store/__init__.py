from src.config.settings import settings

from .base import (
    BlobRef,
    BlobStore,
    StoreError,
    StoreListError,
    StoreReadError,
    StoreWriteError,
)
from .http_store import HttpBlobStore


def get_blob_store() -> BlobStore:
    return HttpBlobStore(config=settings)


__all__ = [
    "BlobRef",
    "BlobStore",
    "HttpBlobStore",
    "StoreError",
    "StoreListError",
    "StoreReadError",
    "StoreWriteError",
    "get_blob_store",
]
