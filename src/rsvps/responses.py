from fastapi.responses import JSONResponse

from src.config.settings import settings


def error_response(status_code: int, error: str, exc: Exception | None = None) -> JSONResponse:
    """JSON error body; internal details only when EXPOSE_ERROR_DETAILS is on."""
    content = {"error": error}
    if exc is not None and settings.EXPOSE_ERROR_DETAILS:
        content["details"] = str(exc)
    return JSONResponse(status_code=status_code, content=content)
