"""Root conftest — in-memory phonebook + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryPersonRepository
    - get_phonebook_service overridden, so the lifespan (and MongoDB) never runs
    - raise_app_exceptions=False: the catch-all 500 handler is observable as a response

Design Decisions:
    - Repository double over mongomock: the service only depends on the
      PersonRepository protocol; the Mongo adapter has its own unit tests
"""

import os

# Settings are read at import time; the lifespan that would use this never runs
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/phonebook-test")

import pytest
from httpx import ASGITransport, AsyncClient

from phonebook.api.dependencies import get_phonebook_service
from phonebook.main import app
from phonebook.services.phonebook import PhonebookService
from tests.fake_repository import InMemoryPersonRepository


@pytest.fixture
def repository():
    return InMemoryPersonRepository()


@pytest.fixture
def phonebook(repository):
    return PhonebookService(repository)


@pytest.fixture
async def client(phonebook):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_phonebook_service] = lambda: phonebook

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def ada(repository):
    """One stored person, as the raw document."""
    return await repository.insert("Ada Lovelace", "09-12345678")
