"""
Normalized in-memory store for users, posts and comments
"""

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from ..logging import get_logger
from .records import CommentRecord, PostRecord, Record, UserRecord

logger = get_logger(__name__)

T = TypeVar("T", UserRecord, PostRecord, CommentRecord)


class Collection(Generic[T]):
    """
    Append-only, insertion-ordered collection of one record type.

    Reads take the owning store's lock for the length of the scan and hand
    back copies, so a scan never observes a half-applied mutation. The only
    way in is ``EntityStore.append``.
    """

    def __init__(self, name: str, lock: threading.RLock):
        self.name = name
        self._lock = lock
        self._records: list[T] = []
        self._by_id: dict[str, T] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def all(self) -> list[T]:
        """Return every record in insertion order."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: str) -> T | None:
        """Look up a record by id, or None if absent."""
        with self._lock:
            return self._by_id.get(record_id)

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return records matching ``predicate``, in insertion order."""
        with self._lock:
            return [record for record in self._records if predicate(record)]

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        with self._lock:
            return any(predicate(record) for record in self._records)

    def _append(self, record: T) -> None:
        if record.id in self._by_id:
            raise ValueError(f"Duplicate {self.name} id '{record.id}'")
        self._records.append(record)
        self._by_id[record.id] = record


class EntityStore:
    """
    Holds the users, posts and comments collections.

    Mutations wrap their validation and ``append`` in ``transaction()`` so
    the check and the write are one atomic unit.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.users: Collection[UserRecord] = Collection("user", self._lock)
        self.posts: Collection[PostRecord] = Collection("post", self._lock)
        self.comments: Collection[CommentRecord] = Collection("comment", self._lock)

    @contextmanager
    def transaction(self) -> Iterator["EntityStore"]:
        """Hold the store lock for a validate-then-append sequence."""
        with self._lock:
            yield self

    def append(self, record: Record) -> Record:
        """
        Append a record to the collection matching its type.

        Raises:
            ValueError: If the id is already taken in that collection
            TypeError: If the record is not a known record type
        """
        with self._lock:
            self._collection_for(record)._append(record)

        logger.debug("Record appended", record_type=type(record).__name__, record_id=record.id)
        return record

    def counts(self) -> dict[str, int]:
        """Return the size of each collection."""
        with self._lock:
            return {
                "users": len(self.users),
                "posts": len(self.posts),
                "comments": len(self.comments),
            }

    def _collection_for(self, record: Record) -> Collection:
        if isinstance(record, UserRecord):
            return self.users
        if isinstance(record, PostRecord):
            return self.posts
        if isinstance(record, CommentRecord):
            return self.comments
        raise TypeError(f"Unsupported record type: {type(record).__name__}")
