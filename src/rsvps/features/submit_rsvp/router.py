import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.blob_store import StoreWriteError, get_blob_store
from src.config.settings import settings
from src.rsvps.dtos import ValidationError
from src.rsvps.repository.write_models import BlobRSVPWriteModel, RSVPWriteModel
from src.rsvps.responses import error_response
from src.rsvps.urls import SUBMIT_RSVP_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class RSVPSubmit(BaseModel):
    """Guest submission. Blank name/response is rejected by the write model."""

    name: str | None = None
    response: str | None = None
    timestamp: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None


class RSVPSubmitResponse(BaseModel):
    success: bool = True
    id: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return BlobRSVPWriteModel(store=get_blob_store(), key_prefix=settings.RSVP_KEY_PREFIX)


@router.get(SUBMIT_RSVP_URL)
async def rsvp_api_info() -> dict[str, str]:
    return {"message": "RSVP API is working! Use POST to submit a response."}


@router.post(
    SUBMIT_RSVP_URL,
    response_model=RSVPSubmitResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_rsvp(
    rsvp_data: RSVPSubmit,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPSubmitResponse | JSONResponse:
    """
    Store one RSVP as a new record.
    Each call creates a new record; repeat submissions are not merged.
    """
    try:
        submitted = await write_model.submit_rsvp(
            name=rsvp_data.name,
            response=rsvp_data.response,
            timestamp=rsvp_data.timestamp,
            email=rsvp_data.email,
            phone=rsvp_data.phone,
            message=rsvp_data.message,
        )
    except ValidationError as e:
        return error_response(400, e.message)
    except StoreWriteError as e:
        logger.exception(f"Error saving RSVP: {e}")
        return error_response(500, "save failed", e)

    return RSVPSubmitResponse(id=submitted.id)
