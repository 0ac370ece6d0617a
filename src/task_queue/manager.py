"""Queue manager.

Collections do no locking of their own. ``QueueManager`` owns a set of named
collections and serializes every access to them behind one re-entrant lock,
so several worker threads can share it.
"""

import threading
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from .bounded import COLLECTION_KINDS, EMPTY, BoundedCollection
from .config import UNBOUNDED, QueueSettings
from .exceptions import QueueExistsError, QueueNotFoundError

_logger = logger.bind(name="task_queue.manager")


class QueueManager:
	def __init__(self):
		self._lock = threading.RLock()
		self._queues: Dict[str, BoundedCollection] = {}

	def create(
		self,
		settings: Union[QueueSettings, str],
		kind: str = "last",
		capacity: Any = UNBOUNDED,
		initial: Any = None,
	) -> BoundedCollection:
		"""Register a new collection.

		Args:
			settings: A ``QueueSettings`` or just the queue name
			kind: ``"last"`` or ``"first"`` (ignored when settings are given)
			capacity: Capacity bound (ignored when settings are given)
			initial: Initial contents
		"""
		if not isinstance(settings, QueueSettings):
			settings = QueueSettings(name=settings, kind=kind, capacity=capacity)

		collection = COLLECTION_KINDS[settings.kind](initial, settings.capacity)
		with self._lock:
			if settings.name in self._queues:
				raise QueueExistsError(settings.name)
			self._queues[settings.name] = collection

		_logger.debug(f"Created {settings.kind} queue {settings.name!r}: {collection!r}")
		return collection

	def get(self, name: str) -> BoundedCollection:
		with self._lock:
			try:
				return self._queues[name]
			except KeyError:
				raise QueueNotFoundError(name) from None

	def remove(self, name: str) -> BoundedCollection:
		with self._lock:
			collection = self.get(name)
			del self._queues[name]
		_logger.debug(f"Removed queue {name!r}")
		return collection

	def names(self) -> List[str]:
		with self._lock:
			return list(self._queues)

	def __contains__(self, name: object) -> bool:
		with self._lock:
			return name in self._queues

	def __len__(self) -> int:
		with self._lock:
			return len(self._queues)

	def push(self, name: str, item: Any) -> None:
		with self._lock:
			self.get(name).insert(item)

	def pop(self, name: str) -> Any:
		"""Pull the next item, or ``EMPTY``. See ``BoundedCollection.pull_next``."""
		with self._lock:
			return self.get(name).pull_next()

	def drain(self, name: str) -> List[Any]:
		"""Pull until ``EMPTY``. This terminates the collection's cursor."""
		items = []
		with self._lock:
			collection = self.get(name)
			while True:
				item = collection.pull_next()
				if item is EMPTY:
					break
				items.append(item)
		_logger.debug(f"Drained {len(items)} item(s) from {name!r}")
		return items

	def snapshot(self, name: str) -> List[Any]:
		with self._lock:
			return self.get(name).snapshot()

	def stats(self) -> Dict[str, Dict[str, Any]]:
		with self._lock:
			return {name: self._describe(q) for name, q in self._queues.items()}

	@staticmethod
	def _describe(collection: BoundedCollection) -> Dict[str, Optional[Any]]:
		capacity = collection.capacity
		return {
			"kind": collection.kind,
			"count": collection.count(),
			"capacity": None if capacity == UNBOUNDED else capacity,
			"exhausted": collection.exhausted,
		}


__all__ = ["QueueManager"]
