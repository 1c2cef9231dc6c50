from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ValidationError(Exception):
    """Raised when a submission is missing its name or response."""

    def __init__(self, message: str = "name and response required") -> None:
        self.message = message
        super().__init__(message)


class Classification(str, Enum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


def _as_text(value: Any) -> Any:
    """Render JSON scalars the way a browser would stringify them."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (dict, list)):
        return None
    return value


class RSVPRecord(BaseModel):
    """
    One stored RSVP. Extra keys written by other clients are kept as-is.

    Only `id` and `name` must be strings. Other fields are coerced so that a
    record written by a different client is still listed: scalar answers
    become text, a non-boolean `attending` and a non-text `timestamp` are
    ignored.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    response: str | None = None
    timestamp: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None
    attending: bool | None = None
    status: str | None = None

    @field_validator("response", "status", "email", "phone", "message", mode="before")
    @classmethod
    def scalar_as_text(cls, v: Any) -> Any:
        return _as_text(v)

    @field_validator("attending", mode="before")
    @classmethod
    def ignore_non_boolean_attending(cls, v: Any) -> bool | None:
        return v if isinstance(v, bool) else None

    @field_validator("timestamp", mode="before")
    @classmethod
    def ignore_non_text_timestamp(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None


@dataclass(frozen=True)
class RSVPSubmittedDTO:
    """DTO returned after a record has been written."""

    id: str
    record: RSVPRecord


@dataclass(frozen=True)
class RSVPSummaryDTO:
    """Aggregate counts over a set of records."""

    total: int = 0
    yes: int = 0
    no: int = 0

    @property
    def unknown(self) -> int:
        return self.total - self.yes - self.no


@dataclass(frozen=True)
class RSVPListDTO:
    """All readable records, newest first."""

    rsvps: list[RSVPRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.rsvps)
