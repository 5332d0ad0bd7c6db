"""In-memory database for demo purposes."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

Record = Dict[str, Any]


@dataclass
class InMemoryDatabase:
    """Simple in-memory storage keyed by collection name."""

    collections: Dict[str, List[Record]] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.collections

    def ensure(self, name: str) -> List[Record]:
        """Return the named collection, creating it empty if absent."""
        return self.collections.setdefault(name, [])

    def get(self, name: str) -> List[Record]:
        """Return the named collection (created empty on first access)."""
        return self.ensure(name)

    def replace(self, name: str, records: Iterable[Record]) -> List[Record]:
        """Swap the named collection for a new list built from ``records``."""
        self.collections[name] = list(records)
        return self.collections[name]

    def reset(self) -> None:
        """Reset the database to an empty state."""
        self.collections.clear()


db = InMemoryDatabase()
