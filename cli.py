"""CLI commands for RSVP collection."""

import asyncio
from typing import NoReturn

import typer

from src.blob_store import StoreError, get_blob_store
from src.config.logging import setup_logging
from src.config.settings import settings
from src.rsvps.aggregator import classify, summarize
from src.rsvps.dtos import Classification, RSVPListDTO, RSVPSubmittedDTO, ValidationError
from src.rsvps.repository.read_models import BlobRSVPReadModel
from src.rsvps.repository.write_models import BlobRSVPWriteModel

app = typer.Typer(help="CLI commands for RSVP collection")

CLASSIFICATION_COLORS = {
    Classification.YES: typer.colors.GREEN,
    Classification.NO: typer.colors.RED,
    Classification.UNKNOWN: typer.colors.YELLOW,
}


def _read_model() -> BlobRSVPReadModel:
    return BlobRSVPReadModel(
        store=get_blob_store(),
        key_prefix=settings.RSVP_KEY_PREFIX,
        list_limit=settings.RSVP_LIST_LIMIT,
        read_concurrency=settings.RSVP_READ_CONCURRENCY,
    )


async def _submit(
    name: str,
    response: str,
    timestamp: str | None,
    email: str | None,
    phone: str | None,
    message: str | None,
) -> RSVPSubmittedDTO:
    write_model = BlobRSVPWriteModel(store=get_blob_store(), key_prefix=settings.RSVP_KEY_PREFIX)
    return await write_model.submit_rsvp(
        name=name,
        response=response,
        timestamp=timestamp,
        email=email,
        phone=phone,
        message=message,
    )


async def _list() -> RSVPListDTO:
    return await _read_model().list_rsvps()


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main():
    setup_logging()


@app.command()
def submit(
    name: str = typer.Argument(..., help="Guest name"),
    response: str = typer.Argument(..., help="Answer, e.g. Ja or Nee"),
    timestamp: str | None = typer.Option(None, "--timestamp", "-t", help="ISO-8601 time, defaults to now"),
    email: str | None = typer.Option(None, "--email", "-e"),
    phone: str | None = typer.Option(None, "--phone", "-p"),
    message: str | None = typer.Option(None, "--message", "-m"),
):
    """Store one RSVP in the blob store."""
    try:
        submitted = asyncio.run(_submit(name, response, timestamp, email, phone, message))
    except ValidationError as e:
        _fail(f"Invalid RSVP: {e.message}")
    except StoreError as e:
        _fail(f"Saving failed: {e}")

    typer.secho("RSVP stored!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {submitted.id}", fg=typer.colors.CYAN)


@app.command("list")
def list_rsvps():
    """List every RSVP, newest first."""
    try:
        listing = asyncio.run(_list())
    except StoreError as e:
        _fail(f"Fetching RSVPs failed: {e}")

    if not listing.rsvps:
        typer.echo("No RSVPs yet.")
        return

    for record in listing.rsvps:
        classification = classify(record)
        typer.secho(
            f"{classification.value:<8}{record.name:<30}{record.timestamp or '-'}",
            fg=CLASSIFICATION_COLORS[classification],
        )
    typer.echo(f"{listing.count} RSVPs")


@app.command()
def summary():
    """Print total, yes, no and unknown counts."""
    try:
        listing = asyncio.run(_list())
    except StoreError as e:
        _fail(f"Fetching RSVPs failed: {e}")

    counts = summarize(listing.rsvps)
    typer.secho(f"Total:   {counts.total}", fg=typer.colors.BLUE)
    typer.secho(f"Yes:     {counts.yes}", fg=typer.colors.GREEN)
    typer.secho(f"No:      {counts.no}", fg=typer.colors.RED)
    typer.secho(f"Unknown: {counts.unknown}", fg=typer.colors.YELLOW)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
):
    """Run the API and pages with uvicorn."""
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=reload,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    app()
