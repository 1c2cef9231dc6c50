from fastapi import APIRouter
from pydantic import BaseModel

from src.config.settings import settings

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    blob_store_configured: bool


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running.
    Does not call the blob store; only reports whether a token is set.
    """
    return HealthCheckResponse(
        status="healthy",
        blob_store_configured=bool(settings.BLOB_READ_WRITE_TOKEN),
    )
