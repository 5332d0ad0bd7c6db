"""Dependency providers for the FastAPI app."""

from fastapi import Depends

from todo_store.database import InMemoryDatabase, db
from todo_store.services.todo_service import TodoService
from todo_store.settings import Settings, get_settings
from todo_store.store import Store


def get_db() -> InMemoryDatabase:
    """Provide the in-memory database instance."""
    return db


def get_store(
    database: InMemoryDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Store:
    """Provide a store bound to the configured collection."""
    return Store(settings.store_name, database=database)


def get_todo_service(store: Store = Depends(get_store)) -> TodoService:
    """Provide the todo service."""
    return TodoService(store)
