"""Bounded work-item collections and their manager."""

from .bounded import (  # noqa: F401
	EMPTY,
	UNBOUNDED,
	BoundedCollection,
	BoundedFirstCollection,
	BoundedLastCollection,
	CursorState,
	FIFO,
	FILO,
)
from .config import CollectionConfig, QueueSettings  # noqa: F401
from .exceptions import QueueError, QueueExistsError, QueueNotFoundError  # noqa: F401
from .manager import QueueManager  # noqa: F401

__all__ = [
	"EMPTY",
	"UNBOUNDED",
	"BoundedCollection",
	"BoundedFirstCollection",
	"BoundedLastCollection",
	"CursorState",
	"FIFO",
	"FILO",
	"CollectionConfig",
	"QueueSettings",
	"QueueError",
	"QueueExistsError",
	"QueueNotFoundError",
	"QueueManager",
]
