"""Callback-style in-memory store for a single todo collection."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Mapping, Optional

from todo_store.database import InMemoryDatabase, Record

logger = logging.getLogger(__name__)

Callback = Callable[[List[Record]], Any]
Clock = Callable[[], int]


def _noop(_records: List[Record]) -> None:
    return None


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def _strict_equal(left: Any, right: Any) -> bool:
    # bool is an int subclass; True must not match 1.
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def matches(record: Mapping[str, Any], query: Mapping[str, Any]) -> bool:
    """Return True when every queried field is present and equal on ``record``."""
    for key, expected in query.items():
        if key not in record:
            return False
        if not _strict_equal(record[key], expected):
            return False
    return True


def _has_id(record: Mapping[str, Any], id: Any) -> bool:
    return "id" in record and _strict_equal(record["id"], id)


class Store:
    """Synchronous store over one named collection.

    Every operation returns its result and, when ``callback`` is given, also
    invokes it with that same result before returning.
    """

    def __init__(
        self,
        name: str,
        callback: Optional[Callback] = None,
        database: Optional[InMemoryDatabase] = None,
        *,
        clock: Clock = now_ms,
    ) -> None:
        self._name = name
        self._db = database if database is not None else InMemoryDatabase()
        self._clock = clock
        self._last_id: Optional[int] = None
        existing = name in self._db
        records = self._db.ensure(name)
        logger.debug(
            "Opened collection %s (existing=%s, size=%d)", name, existing, len(records)
        )
        (callback or _noop)(list(records))

    @property
    def name(self) -> str:
        return self._name

    @property
    def database(self) -> InMemoryDatabase:
        return self._db

    def _records(self) -> List[Record]:
        return self._db.get(self._name)

    def _next_id(self) -> int:
        # Millisecond timestamps, bumped past anything already issued.
        issued = [r["id"] for r in self._records() if isinstance(r.get("id"), int)]
        if self._last_id is not None:
            issued.append(self._last_id)
        candidate = int(self._clock())
        if issued and candidate <= max(issued):
            candidate = max(issued) + 1
        self._last_id = candidate
        return candidate

    def find(self, query: Mapping[str, Any], callback: Optional[Callback] = None) -> List[Record]:
        """Return records whose fields equal every value in ``query``.

        An empty query matches everything.
        """
        result = [record for record in self._records() if matches(record, query)]
        if callback is not None:
            callback(result)
        return result

    def find_all(self, callback: Optional[Callback] = None) -> List[Record]:
        """Return the whole collection in insertion order."""
        result = list(self._records())
        (callback or _noop)(result)
        return result

    def save(
        self,
        update_data: Mapping[str, Any],
        callback: Optional[Callback] = None,
        id: Optional[int] = None,
    ) -> List[Record]:
        """Create a record, or merge ``update_data`` into the record with ``id``.

        Creating returns a one-element list holding the new record. Updating
        returns the whole collection, changed or not.
        """
        callback = callback or _noop
        records = self._records()

        if id is not None:
            for record in records:
                if _has_id(record, id):
                    for key, value in update_data.items():
                        if key != "id":
                            record[key] = value
                    logger.debug("Updated %s in %s", id, self._name)
                    break
            else:
                logger.debug("No record %s in %s; nothing updated", id, self._name)
            result = list(records)
            callback(result)
            return result

        record = dict(update_data)
        record["id"] = self._next_id()
        records.append(record)
        logger.debug("Created %s in %s", record["id"], self._name)
        result = [record]
        callback(result)
        return result

    def remove(self, id: int, callback: Optional[Callback] = None) -> List[Record]:
        """Remove the record with ``id`` and return the remaining collection."""
        before = self._records()
        remaining = self._db.replace(
            self._name,
            (record for record in before if not _has_id(record, id)),
        )
        logger.debug(
            "Removed %d record(s) with id %s from %s",
            len(before) - len(remaining),
            id,
            self._name,
        )
        result = list(remaining)
        (callback or _noop)(result)
        return result

    def drop(self, callback: Optional[Callback] = None) -> List[Record]:
        """Replace the collection with an empty one."""
        dropped = len(self._records())
        self._db.replace(self._name, [])
        logger.debug("Dropped %d record(s) from %s", dropped, self._name)
        result: List[Record] = []
        (callback or _noop)(result)
        return result


class AsyncStore:
    """Async facade over :class:`Store` for callers living on an event loop."""

    def __init__(self, store: Store) -> None:
        self.store = store

    @property
    def name(self) -> str:
        return self.store.name

    async def find(self, query: Mapping[str, Any], callback: Optional[Callback] = None) -> List[Record]:
        return self.store.find(query, callback)

    async def find_all(self, callback: Optional[Callback] = None) -> List[Record]:
        return self.store.find_all(callback)

    async def save(
        self,
        update_data: Mapping[str, Any],
        callback: Optional[Callback] = None,
        id: Optional[int] = None,
    ) -> List[Record]:
        return self.store.save(update_data, callback, id)

    async def remove(self, id: int, callback: Optional[Callback] = None) -> List[Record]:
        return self.store.remove(id, callback)

    async def drop(self, callback: Optional[Callback] = None) -> List[Record]:
        return self.store.drop(callback)
