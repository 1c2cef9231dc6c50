import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.blob_store import StoreListError, get_blob_store
from src.config.settings import settings
from src.rsvps.aggregator import summarize
from src.rsvps.dtos import RSVPRecord
from src.rsvps.features.submit_rsvp.router import ErrorResponse
from src.rsvps.repository.read_models import BlobRSVPReadModel, RSVPReadModel
from src.rsvps.responses import error_response
from src.rsvps.urls import LIST_RSVPS_URL, RSVP_SUMMARY_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class RSVPListResponse(BaseModel):
    success: bool = True
    count: int
    rsvps: list[RSVPRecord]


class RSVPSummaryResponse(BaseModel):
    success: bool = True
    total: int
    yes: int
    no: int
    unknown: int


def get_rsvp_read_model() -> RSVPReadModel:
    """Dependency to get RSVP read model instance."""
    return BlobRSVPReadModel(
        store=get_blob_store(),
        key_prefix=settings.RSVP_KEY_PREFIX,
        list_limit=settings.RSVP_LIST_LIMIT,
        read_concurrency=settings.RSVP_READ_CONCURRENCY,
    )


@router.get(
    LIST_RSVPS_URL,
    response_model=RSVPListResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def list_rsvps(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> RSVPListResponse | JSONResponse:
    """
    List every stored RSVP, newest first.
    Records that cannot be fetched or parsed are left out.
    """
    try:
        listing = await read_model.list_rsvps()
    except StoreListError as e:
        logger.exception(f"Error fetching RSVPs: {e}")
        return error_response(500, "failed to fetch", e)

    return RSVPListResponse(count=listing.count, rsvps=listing.rsvps)


@router.get(
    RSVP_SUMMARY_URL,
    response_model=RSVPSummaryResponse,
    responses={500: {"model": ErrorResponse}},
)
async def rsvp_summary(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> RSVPSummaryResponse | JSONResponse:
    try:
        listing = await read_model.list_rsvps()
    except StoreListError as e:
        logger.exception(f"Error fetching RSVPs: {e}")
        return error_response(500, "failed to fetch", e)

    summary = summarize(listing.rsvps)
    return RSVPSummaryResponse(
        total=summary.total,
        yes=summary.yes,
        no=summary.no,
        unknown=summary.unknown,
    )
