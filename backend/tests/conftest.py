"""
NoteKeeper Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh state per test):
    ├── store:         NoteStore loaded with the seed notes
    ├── empty_store:   NoteStore with nothing in it
    ├── note_service:  NoteService over `store`
    ├── sample_payload: NotePayload for create/update calls
    └── test_client:   HTTPX AsyncClient bound to a freshly created app
"""

import os

# Set before any notekeeper import so Settings() picks them up
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_NOTES"] = "true"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from notekeeper.schemas.note import NotePayload
from notekeeper.seed import SEED_NOTES
from notekeeper.services.note_service import NoteService
from notekeeper.store import NoteStore


@pytest.fixture
def store():
    """A NoteStore holding notes 1-4 with the counter at 4."""
    s = NoteStore()
    s.seed(SEED_NOTES)
    return s


@pytest.fixture
def empty_store():
    return NoteStore()


@pytest.fixture
def note_service(store):
    return NoteService(store)


@pytest.fixture
def sample_payload():
    return NotePayload(title="Groceries", content="Apples and pears")


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    A new app is created per test so each test starts from the seed notes.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    from notekeeper.main import create_app

    app = create_app(seed_notes=True)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
