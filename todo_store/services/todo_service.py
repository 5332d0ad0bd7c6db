"""Todo service - business logic layer over the store."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from todo_store.database import Record
from todo_store.models.todo import TodoCount, TodoCreate, TodoUpdate
from todo_store.store import Store

logger = logging.getLogger(__name__)

Query = Union[None, int, str, Mapping[str, Any]]


class TodoService:
    """Service for todo business logic."""

    def __init__(self, store: Optional[Store] = None) -> None:
        self.store = store or Store("todos")

    def create_todo(self, todo_data: TodoCreate) -> Record:
        """Create a new todo item."""
        title = todo_data.title.strip()
        if not title:
            raise ValueError("Todo title cannot be empty")
        payload = todo_data.model_dump()
        payload["title"] = title
        (created,) = self.store.save(payload)
        logger.info("Created todo %s", created["id"])
        return created

    def read(self, query: Query = None) -> List[Record]:
        """Read todos.

        ``None`` returns every todo, an id (int or numeric string) returns
        the matching todo, and a mapping is used as an equality query.
        """
        if query is None:
            return self.store.find_all()
        if isinstance(query, str):
            return self.store.find({"id": int(query)}) if query.isdigit() else []
        if isinstance(query, int) and not isinstance(query, bool):
            return self.store.find({"id": query})
        return self.store.find(query)

    def get_todo_by_id(self, todo_id: int) -> Optional[Record]:
        """Get a specific todo by ID."""
        found = self.store.find({"id": todo_id})
        return found[0] if found else None

    def update_todo(self, todo_id: int, todo_data: TodoUpdate) -> Optional[Record]:
        """Update an existing todo item."""
        if self.get_todo_by_id(todo_id) is None:
            return None
        update_data = todo_data.model_dump(exclude_unset=True)
        if "title" in update_data:
            if update_data["title"] is None or not update_data["title"].strip():
                raise ValueError("Todo title cannot be empty")
            update_data["title"] = update_data["title"].strip()
        if "completed" in update_data and update_data["completed"] is None:
            raise ValueError("Todo completed flag cannot be null")
        self.store.save(update_data, id=todo_id)
        return self.get_todo_by_id(todo_id)

    def remove_todo(self, todo_id: int) -> bool:
        """Delete a todo item."""
        before = len(self.store.find_all())
        after = len(self.store.remove(todo_id))
        return after < before

    def remove_all(self) -> None:
        """Delete every todo item."""
        self.store.drop()
        logger.info("Dropped all todos in %s", self.store.name)

    def toggle_all(self, completed: bool) -> List[Record]:
        """Mark every todo as completed or active."""
        for todo in self.store.find({"completed": not completed}):
            self.store.save({"completed": completed}, id=todo["id"])
        return self.store.find_all()

    def clear_completed(self) -> int:
        """Remove completed todos and return how many were removed."""
        completed = self.store.find({"completed": True})
        for todo in completed:
            self.store.remove(todo["id"])
        return len(completed)

    def get_count(self) -> TodoCount:
        """Count active, completed and total todos."""
        todos = self.store.find_all()
        completed = sum(1 for todo in todos if todo.get("completed") is True)
        return TodoCount(
            active=len(todos) - completed,
            completed=completed,
            total=len(todos),
        )
