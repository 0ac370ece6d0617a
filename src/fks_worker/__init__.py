"""Distribution package for the worker queues.

Runtime modules live at top level under src/ (``task_queue``, ``executors``,
``main``); this package re-exports the public surface and the entry point.
"""

from executors import AsyncExecutor, DrainResult  # noqa: F401
from main import main  # noqa: F401
from task_queue import (  # noqa: F401
    EMPTY,
    FIFO,
    FILO,
    UNBOUNDED,
    BoundedFirstCollection,
    BoundedLastCollection,
    CursorState,
    QueueManager,
    QueueSettings,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncExecutor",
    "DrainResult",
    "EMPTY",
    "FIFO",
    "FILO",
    "UNBOUNDED",
    "BoundedFirstCollection",
    "BoundedLastCollection",
    "CursorState",
    "QueueManager",
    "QueueSettings",
    "main",
]
