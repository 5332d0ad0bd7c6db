"""Shared fixtures for the todo store tests."""

from itertools import count

import pytest
from fastapi.testclient import TestClient

from todo_store.database import InMemoryDatabase, db
from todo_store.main import app
from todo_store.settings import get_settings
from todo_store.store import Store


@pytest.fixture
def database() -> InMemoryDatabase:
    """Provide a fresh database for each test."""
    return InMemoryDatabase()


@pytest.fixture
def clock():
    """A millisecond clock that advances by one on every reading."""
    ticks = count(1_700_000_000_000)
    return lambda: next(ticks)


@pytest.fixture
def store(database: InMemoryDatabase, clock) -> Store:
    return Store("todos-test", database=database, clock=clock)


@pytest.fixture
def client():
    """Provide a FastAPI test client over a clean shared database."""
    get_settings.cache_clear()
    db.reset()
    yield TestClient(app)
    db.reset()
    get_settings.cache_clear()
