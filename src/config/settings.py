from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = True
    cors_origins: list[str] = ["*"]

    ENVIRONMENT: str = "Production"

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    # Blob store
    BLOB_API_URL: str = "https://blob.vercel-storage.com"
    BLOB_READ_WRITE_TOKEN: str = ""
    BLOB_API_VERSION: str = "7"
    BLOB_TIMEOUT_SECONDS: float = 10.0

    # RSVP pipeline
    RSVP_KEY_PREFIX: str = "rsvp-"
    RSVP_LIST_LIMIT: int = 1000  # no pagination past this cap
    RSVP_READ_CONCURRENCY: int = 20
    EXPOSE_ERROR_DETAILS: bool = False

    # Pages
    PAGE_LANGUAGE: str = "nl"
    event_title: str = "Matteo's kraamfeestje"
    event_details: list[str] = [
        "Strandpaviljoen Reuring (Hoorn, NH)",
        "Zaterdag 20.09.2025",
        "13:00 - 16:00",
    ]
    host_names: str = "Derck, Marie en kleine Matteo"
    contact_phone: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
