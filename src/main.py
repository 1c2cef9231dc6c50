from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from src.config.logging import setup_logging
from src.config.settings import settings
from src.pages.router import router as pages_router
from src.routers.healthz.router import router as healthz_router
from src.rsvps.dtos import ValidationError
from src.rsvps.responses import error_response
from src.rsvps.routers import router as rsvps_router
from src.rsvps.urls import SUBMIT_RSVP_URL


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="RSVP Collector API",
    description="Collects guest RSVPs into a blob store and lists them for the hosts",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(rsvps_router, tags=["RSVPs"])
app.include_router(pages_router, tags=["Pages"], include_in_schema=False)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # submissions only answer 200, 400 or 500
    if request.method == "POST" and request.url.path == SUBMIT_RSVP_URL:
        return error_response(400, ValidationError().message)
    return await request_validation_exception_handler(request, exc)
