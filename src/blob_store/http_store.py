import logging
from typing import Protocol

import httpx
from pydantic import ValidationError

from src.blob_store.base import (
    BlobRef,
    BlobStore,
    StoreListError,
    StoreReadError,
    StoreWriteError,
)
from src.blob_store.schema import BlobListResponse, BlobPutResponse
from src.config.settings import settings

logger = logging.getLogger(__name__)


class BlobStoreConfig(Protocol):
    BLOB_API_URL: str
    BLOB_READ_WRITE_TOKEN: str
    BLOB_API_VERSION: str
    BLOB_TIMEOUT_SECONDS: float


class HttpBlobStore(BlobStore):
    """Blob store client speaking the Vercel Blob HTTP API."""

    def __init__(
        self,
        config: BlobStoreConfig = settings,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    @property
    def api_url(self) -> str:
        return self._config.BLOB_API_URL.rstrip("/")

    def _client(self) -> httpx.AsyncClient:
        return self._http_client_class(timeout=self._config.BLOB_TIMEOUT_SECONDS)

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.BLOB_READ_WRITE_TOKEN}",
            "x-api-version": self._config.BLOB_API_VERSION,
        }

    async def write(self, key: str, payload: str | bytes) -> BlobRef:
        if isinstance(payload, str):
            payload = payload.encode("utf-8")

        try:
            async with self._client() as client:
                response = await client.put(
                    f"{self.api_url}/{key}",
                    content=payload,
                    headers={
                        **self._auth_headers(),
                        "x-content-type": "application/json",
                        # keep the pathname equal to our own unique key
                        "x-add-random-suffix": "0",
                    },
                )
                response.raise_for_status()
                put_data = BlobPutResponse.model_validate(response.json())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise StoreWriteError(f"Failed to write blob {key}: {e}") from e
        except (ValueError, ValidationError) as e:
            raise StoreWriteError(f"Unexpected response writing blob {key}: {e}") from e

        return BlobRef(pathname=put_data.pathname, url=put_data.url)

    async def list(self, prefix: str, limit: int) -> list[BlobRef]:
        try:
            async with self._client() as client:
                response = await client.get(
                    self.api_url,
                    params={"prefix": prefix, "limit": limit},
                    headers=self._auth_headers(),
                )
                response.raise_for_status()
                listing = BlobListResponse.model_validate(response.json())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise StoreListError(f"Failed to list blobs with prefix {prefix!r}: {e}") from e
        except (ValueError, ValidationError) as e:
            raise StoreListError(f"Unexpected listing response for prefix {prefix!r}: {e}") from e

        if listing.has_more:
            logger.warning(
                f"Listing for prefix {prefix!r} truncated at {limit} objects; "
                "raise RSVP_LIST_LIMIT to see the rest"
            )

        return [BlobRef(pathname=blob.pathname, url=blob.url) for blob in listing.blobs[:limit]]

    async def read(self, ref: BlobRef) -> bytes:
        try:
            async with self._client() as client:
                response = await client.get(ref.url)
                if response.status_code == 404:
                    raise StoreReadError(f"Blob {ref.pathname} not found")
                response.raise_for_status()
                return response.content
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise StoreReadError(f"Failed to read blob {ref.pathname}: {e}") from e
