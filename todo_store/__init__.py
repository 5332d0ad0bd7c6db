"""In-memory, callback-style store for the todo demo application.

Importing this package does not start anything; build a :class:`Store`
directly, or run ``todo_store.main`` for the HTTP surface.
"""

from .database import InMemoryDatabase
from .store import AsyncStore, Store

__all__ = ["AsyncStore", "InMemoryDatabase", "Store"]
__version__ = "1.0.0"
