"""Errors raised by the queue manager.

The collections themselves never raise; emptiness is signalled by ``EMPTY``.
"""


class QueueError(Exception):
	"""Base class for queue manager errors."""


class QueueNotFoundError(QueueError, KeyError):
	def __init__(self, name: str):
		super().__init__(name)
		self.name = name

	def __str__(self) -> str:
		return f"No queue registered under {self.name!r}"


class QueueExistsError(QueueError, ValueError):
	def __init__(self, name: str):
		super().__init__(f"Queue {name!r} already registered")
		self.name = name


__all__ = ["QueueError", "QueueNotFoundError", "QueueExistsError"]
