"""Bounded, order-sensitive collections for worker dispatch.

Two structurally parallel types wrap an ordered buffer, a capacity bound and
a one-shot pull cursor:

- ``BoundedLastCollection`` (``FILO``) enforces its bound on construction and
  on every insert, evicting the oldest element, and pulls oldest-first.
- ``BoundedFirstCollection`` (``FIFO``) only truncates on construction, grows
  without limit afterwards, and pulls newest-first.

The names and behaviors do not line up (the "last" type drains like a queue,
the "first" type like a stack). Both are kept as they are; callers depending
on either ordering should pick the type by behavior, not by name.

Only positive capacities are honored. A capacity below 1 (``0``, ``-1``,
``0.5``) is treated as unbounded with a warning, so the initial contents are
kept whole. The JavaScript collections these were first written as sliced
the initial array with such a bound instead, emptying it or dropping
trailing items.

The pull cursor is a two-state machine. Once ``pull_next`` sees an empty
buffer the cursor is ``TERMINATED`` for good, and later inserts are never
returned by it. Neither type locks; see ``task_queue.manager`` for a
serialized wrapper.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Any, Generic, TypeVar

from .config import UNBOUNDED, CollectionConfig

T = TypeVar("T")


class _Empty:
	"""Type of the ``EMPTY`` sentinel."""

	_instance: "_Empty | None" = None

	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __bool__(self) -> bool:
		return False

	def __repr__(self) -> str:
		return "EMPTY"

	def __reduce__(self):
		return "EMPTY"


EMPTY = _Empty()


class CursorState(Enum):
	ACTIVE = "active"
	TERMINATED = "terminated"


class BoundedCollection(ABC, Generic[T]):
	"""Shared storage, cursor and accessors for both bounded collections."""

	kind: str = ""

	def __init__(self, initial: Any = None, capacity: Any = UNBOUNDED):
		config = CollectionConfig.coerce(initial, capacity, kind=type(self).__name__)
		self._capacity = config.capacity
		self._items: deque[T] = deque(config.initial)
		self._cursor = CursorState.ACTIVE

	@property
	def capacity(self) -> int | float:
		return self._capacity

	@property
	def state(self) -> CursorState:
		return self._cursor

	@property
	def exhausted(self) -> bool:
		"""True once ``pull_next`` has observed an empty collection."""
		return self._cursor is CursorState.TERMINATED

	def count(self) -> int:
		return len(self._items)

	def __len__(self) -> int:
		return len(self._items)

	@abstractmethod
	def insert(self, item: T) -> None:
		...

	@abstractmethod
	def _take(self) -> T:
		"""Remove one element from the end this collection pulls from."""

	def pull_next(self) -> T | _Empty:
		"""Remove and return the next element, or ``EMPTY``.

		The first call that finds the collection empty terminates the cursor;
		every later call returns ``EMPTY`` without looking at the contents,
		even after new inserts.
		"""
		if self._cursor is CursorState.TERMINATED:
			return EMPTY
		if not self._items:
			self._cursor = CursorState.TERMINATED
			return EMPTY
		return self._take()

	def snapshot(self) -> list[T]:
		"""Copy of the contents in insertion order."""
		return list(self._items)

	def __repr__(self) -> str:
		return (
			f"{type(self).__name__}(capacity={self._capacity}, "
			f"count={len(self._items)}, state={self._cursor.value})"
		)


class BoundedLastCollection(BoundedCollection[T]):
	"""Capacity is enforced on every insert by evicting the oldest element.

	``pull_next`` removes from the oldest end.
	"""

	kind = "last"

	def insert(self, item: T) -> None:
		if len(self._items) >= self._capacity:
			self._items.popleft()
		self._items.append(item)

	def _take(self) -> T:
		return self._items.popleft()


class BoundedFirstCollection(BoundedCollection[T]):
	"""Capacity only truncates the initial contents; inserts always append.

	``pull_next`` removes from the newest end.
	"""

	kind = "first"

	def insert(self, item: T) -> None:
		self._items.append(item)

	def _take(self) -> T:
		return self._items.pop()


FILO = BoundedLastCollection
FIFO = BoundedFirstCollection

COLLECTION_KINDS: dict[str, type[BoundedCollection]] = {
	"last": BoundedLastCollection,
	"first": BoundedFirstCollection,
}


__all__ = [
	"EMPTY",
	"UNBOUNDED",
	"CursorState",
	"BoundedCollection",
	"BoundedLastCollection",
	"BoundedFirstCollection",
	"FILO",
	"FIFO",
	"COLLECTION_KINDS",
]
