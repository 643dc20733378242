"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (stores, apps, HTTP clients).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── sample_notes: The two notes most tests start from
    ├── note_store: NoteStore seeded with sample_notes
    ├── empty_store: NoteStore with no notes
    ├── make_client: Factory building an AsyncClient around any store
    └── test_client: AsyncClient for an app serving note_store
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from notes_api.main import create_app
from notes_api.schemas.note import Note
from notes_api.store import NoteStore


@pytest.fixture
def sample_notes():
    return [
        Note(id=1, text="FastAPI seems to be a handy back-end framework"),
        Note(id=2, text="Web application is supposed to be properly tested"),
    ]


@pytest.fixture
def note_store(sample_notes):
    """A fresh store holding [note 1, note 2]."""
    return NoteStore(sample_notes)


@pytest.fixture
def empty_store():
    return NoteStore()


@pytest.fixture
def make_client():
    """
    Factory for HTTP test clients bound to a specific store.

    Usage:
        async with make_client(empty_store) as client:
            response = await client.get("/notes/1")

    raise_app_exceptions=False lets tests observe the 500 response that the
    catch-all handler produces instead of having the exception re-raised.
    """

    def _make(store, raise_app_exceptions=True):
        app = create_app(store=store)
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        return AsyncClient(transport=transport, base_url="http://test")

    return _make


@pytest_asyncio.fixture
async def test_client(make_client, note_store):
    """
    HTTPX AsyncClient talking to an app that serves note_store.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    async with make_client(note_store) as client:
        yield client
