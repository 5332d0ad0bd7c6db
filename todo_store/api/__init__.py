"""HTTP surface for the todo store."""

from .routes import router

__all__ = ["router"]
