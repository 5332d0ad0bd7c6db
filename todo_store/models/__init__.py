"""Pydantic models exchanged with the todo store."""

from .todo import Todo, TodoBase, TodoCount, TodoCreate, TodoToggle, TodoUpdate

__all__ = ["Todo", "TodoBase", "TodoCount", "TodoCreate", "TodoToggle", "TodoUpdate"]
