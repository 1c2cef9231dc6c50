import contextlib
from collections.abc import AsyncIterator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.blob_store.tests.inmemory_store import InMemoryBlobStore
from src.main import app
from src.rsvps.features.list_rsvps.router import get_rsvp_read_model
from src.rsvps.features.submit_rsvp.router import get_rsvp_write_model
from src.rsvps.repository.read_models import BlobRSVPReadModel
from src.rsvps.repository.write_models import BlobRSVPWriteModel


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict[Callable, Callable] | None = None) -> AsyncIterator[AsyncClient]:
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    """Create a test client with no overrides."""
    async with client_factory() as ac:
        yield ac


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    """Create a fresh in-memory blob store for each test."""
    return InMemoryBlobStore()


@pytest.fixture
def store_overrides(blob_store) -> dict[Callable, Callable]:
    """Point the RSVP read and write models at the in-memory blob store."""
    return {
        get_rsvp_write_model: lambda: BlobRSVPWriteModel(store=blob_store),
        get_rsvp_read_model: lambda: BlobRSVPReadModel(store=blob_store),
    }
