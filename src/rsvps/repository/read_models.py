"""RSVP read model - lists every stored RSVP blob and reads it back."""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

import pydantic

from src.blob_store.base import BlobRef, BlobStore, StoreReadError
from src.rsvps.dtos import RSVPListDTO, RSVPRecord

logger = logging.getLogger(__name__)

# records without a usable timestamp sort as the oldest
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class MalformedRecordError(ValueError):
    """Raised when a stored object does not have the RSVP record shape."""


def parse_record(raw: bytes, fallback_id: str) -> RSVPRecord:
    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as e:
        raise MalformedRecordError(f"not JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedRecordError(f"expected a JSON object, got {type(data).__name__}")

    if not isinstance(data.get("id"), str) or not data["id"]:
        data["id"] = fallback_id
    try:
        return RSVPRecord.model_validate(data)
    except pydantic.ValidationError as e:
        raise MalformedRecordError(str(e)) from e


def parse_timestamp(value: str | None) -> datetime:
    if not value:
        return EARLIEST
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return EARLIEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_newest_first(records: list[RSVPRecord]) -> list[RSVPRecord]:
    return sorted(
        records,
        key=lambda record: (parse_timestamp(record.timestamp), record.id),
        reverse=True,
    )


class RSVPReadModel(ABC):
    @abstractmethod
    async def list_rsvps(self) -> RSVPListDTO:
        """
        Get every readable RSVP, newest first.
        Raises StoreListError when the listing itself fails.
        """
        raise NotImplementedError


class BlobRSVPReadModel(RSVPReadModel):
    """Prefix scan over the blob store. Unreadable records are dropped."""

    def __init__(
        self,
        store: BlobStore,
        key_prefix: str = "rsvp-",
        list_limit: int = 1000,
        read_concurrency: int = 20,
    ):
        self._store = store
        self._key_prefix = key_prefix
        self._list_limit = list_limit
        self._read_concurrency = max(1, read_concurrency)

    async def list_rsvps(self) -> RSVPListDTO:
        refs = await self._store.list(self._key_prefix, self._list_limit)

        semaphore = asyncio.Semaphore(self._read_concurrency)
        results = await asyncio.gather(*(self._load(ref, semaphore) for ref in refs))
        records = [record for record in results if record is not None]

        dropped = len(refs) - len(records)
        if dropped:
            logger.warning(f"Dropped {dropped} of {len(refs)} RSVP records that could not be read")

        return RSVPListDTO(rsvps=sort_newest_first(records))

    async def _load(self, ref: BlobRef, semaphore: asyncio.Semaphore) -> RSVPRecord | None:
        async with semaphore:
            try:
                raw = await self._store.read(ref)
            except StoreReadError as e:
                logger.warning(f"Error fetching RSVP {ref.pathname}: {e}")
                return None

        try:
            return parse_record(raw, fallback_id=ref.pathname)
        except MalformedRecordError as e:
            logger.warning(f"Skipping malformed RSVP {ref.pathname}: {e}")
            return None
