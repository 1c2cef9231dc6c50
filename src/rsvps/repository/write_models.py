"""RSVP write model - validates a submission and stores it as a new blob."""

import logging
import secrets
import string
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from src.blob_store.base import BlobStore
from src.rsvps.dtos import RSVPRecord, RSVPSubmittedDTO, ValidationError

logger = logging.getLogger(__name__)

KEY_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
KEY_SUFFIX_LENGTH = 12


def generate_rsvp_key(prefix: str = "rsvp-", now_millis: int | None = None) -> str:
    """Build a unique object key: <prefix><creation millis>-<random suffix>."""
    if now_millis is None:
        now_millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(KEY_SUFFIX_ALPHABET) for _ in range(KEY_SUFFIX_LENGTH))
    return f"{prefix}{now_millis}-{suffix}"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class RSVPWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(
        self,
        name: str | None,
        response: str | None,
        timestamp: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        message: str | None = None,
    ) -> RSVPSubmittedDTO:
        """
        Validate and store one RSVP.
        Raises ValidationError when name or response is blank.
        """
        raise NotImplementedError


class BlobRSVPWriteModel(RSVPWriteModel):
    """Writes every submission as its own object. Never updates in place."""

    def __init__(self, store: BlobStore, key_prefix: str = "rsvp-"):
        self._store = store
        self._key_prefix = key_prefix

    async def submit_rsvp(
        self,
        name: str | None,
        response: str | None,
        timestamp: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        message: str | None = None,
    ) -> RSVPSubmittedDTO:
        name = _clean(name)
        response = _clean(response)
        if not name or not response:
            raise ValidationError()

        key = generate_rsvp_key(self._key_prefix)
        record = RSVPRecord(
            id=key,
            name=name,
            response=response,
            timestamp=_clean(timestamp) or datetime.now(timezone.utc).isoformat(),
            email=_clean(email),
            phone=_clean(phone),
            message=_clean(message),
        )

        # StoreWriteError propagates; no retry, the guest resubmits
        await self._store.write(key, record.model_dump_json(exclude_none=True))
        logger.info(f"Stored RSVP {key}")

        return RSVPSubmittedDTO(id=key, record=record)
