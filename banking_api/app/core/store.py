"""
In‑memory entity store.

The store replaces the SQLite layer with plain containers that live for
the lifetime of the process.  Handlers never reach the containers
directly: the application factory creates one ``MemoryStore``, puts it
on ``app.state`` and routes receive it through the ``get_store``
dependency.  A different backend (for example a real database) only
has to provide the same ``Collection`` operations and counters.

Users and transactions draw their ids from a single shared counter, so
an id is unique across both kinds.  Sessions have a counter of their
own.
"""

import itertools
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from fastapi import Request

from ..schemas.session import Session
from ..schemas.transaction import Transaction
from ..schemas.user import User

T = TypeVar("T", User, Transaction, Session)


class Collection(Generic[T]):
    """Ordered mapping of entities keyed by their integer ``id``."""

    def __init__(self) -> None:
        self._items: Dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, entity: T) -> T:
        self._items[entity.id] = entity
        return entity

    def get(self, entity_id: int) -> Optional[T]:
        return self._items.get(entity_id)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity (in insertion order) matching ``predicate``."""
        for entity in self._items.values():
            if predicate(entity):
                return entity
        return None

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [entity for entity in self._items.values() if predicate(entity)]

    def all(self) -> List[T]:
        return list(self._items.values())

    def replace(self, entity: T) -> T:
        """Swap the stored entity with the same id, keeping its position."""
        if entity.id not in self._items:
            raise KeyError(entity.id)
        self._items[entity.id] = entity
        return entity

    def remove(self, entity_id: int) -> Optional[T]:
        return self._items.pop(entity_id, None)

    def remove_where(self, predicate: Callable[[T], bool]) -> int:
        doomed = [key for key, entity in self._items.items() if predicate(entity)]
        for key in doomed:
            del self._items[key]
        return len(doomed)


class MemoryStore:
    """Users, transactions and sessions held in memory.

    ``locked()`` must wrap every read‑modify‑write sequence.  Requests
    are served on one event loop and services never await while holding
    it, but the lock keeps the store correct if handlers are ever moved
    to a thread pool.
    """

    def __init__(self) -> None:
        self.users: Collection[User] = Collection()
        self.transactions: Collection[Transaction] = Collection()
        self.sessions: Collection[Session] = Collection()
        self._entity_ids = itertools.count(1)
        self._session_ids = itertools.count(1)
        self._lock = threading.RLock()

    def next_entity_id(self) -> int:
        """Next id shared by users and transactions."""
        return next(self._entity_ids)

    def next_session_id(self) -> int:
        return next(self._session_ids)

    @contextmanager
    def locked(self) -> Iterator["MemoryStore"]:
        with self._lock:
            yield self


def get_store(request: Request) -> MemoryStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
