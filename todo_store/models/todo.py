"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TodoBase(BaseModel):
    """Base model for todo items.

    Records are open-ended: unknown fields are kept as-is.
    """

    title: str = Field(..., max_length=200)
    completed: bool = False

    model_config = ConfigDict(extra="allow")


class TodoCreate(TodoBase):
    """Model for creating new todos."""


class TodoUpdate(BaseModel):
    """Model for updating existing todos."""

    title: Optional[str] = Field(None, max_length=200)
    completed: Optional[bool] = None

    model_config = ConfigDict(extra="allow")


class Todo(TodoBase):
    """Stored todo with its store-assigned id."""

    id: int


class TodoCount(BaseModel):
    """Counts of active, completed and all todos."""

    active: int = 0
    completed: int = 0
    total: int = 0


class TodoToggle(BaseModel):
    """Body for marking every todo completed or active."""

    completed: bool
