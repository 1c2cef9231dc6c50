from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BlobEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pathname: str
    url: str
    size: int | None = None
    uploaded_at: datetime | None = Field(default=None, alias="uploadedAt")


class BlobListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    blobs: list[BlobEntry] = []
    cursor: str | None = None
    has_more: bool = Field(default=False, alias="hasMore")


class BlobPutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    pathname: str
