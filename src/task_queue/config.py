"""Construction and queue settings models.

Malformed construction arguments are coerced to safe defaults rather than
rejected: a non-sequence ``initial`` becomes empty and a non-numeric, NaN or
non-positive ``capacity`` becomes unbounded. Each coercion logs a warning.
"""

from __future__ import annotations

import math
import numbers
import os
from collections.abc import Sequence
from typing import Any, Literal, Optional, Union

from loguru import logger
from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

UNBOUNDED = math.inf

_TEXT_TYPES = (str, bytes, bytearray, memoryview)
_KIND_ALIASES = {"filo": "last", "fifo": "first"}

_logger = logger.bind(name="task_queue.config")


def _owner(info: ValidationInfo) -> str:
	context = info.context or {}
	return context.get("kind", "collection")


def coerce_capacity(value: Any, owner: str = "collection") -> Union[int, float]:
	"""Return a usable capacity: a positive int, or ``UNBOUNDED``."""
	if value is None:
		return UNBOUNDED
	if isinstance(value, bool) or not isinstance(value, numbers.Real):
		_logger.warning(f"{owner}: expecting capacity to be a number, got {value!r}. Defaulting to unbounded.")
		return UNBOUNDED
	if math.isnan(value):
		_logger.warning(f"{owner}: capacity is NaN. Defaulting to unbounded.")
		return UNBOUNDED
	if value == UNBOUNDED:
		return UNBOUNDED
	if value < 1:
		_logger.warning(f"{owner}: capacity must be at least 1, got {value!r}. Defaulting to unbounded.")
		return UNBOUNDED
	return int(math.floor(value))


class CollectionConfig(BaseModel):
	"""Validated constructor arguments for a bounded collection."""

	initial: list[Any] = Field(default_factory=list)
	capacity: Union[int, float] = Field(default=UNBOUNDED)

	@field_validator("initial", mode="before")
	@classmethod
	def coerce_initial(cls, v: Any, info: ValidationInfo) -> list[Any]:
		if v is None:
			return []
		if isinstance(v, Sequence) and not isinstance(v, _TEXT_TYPES):
			return list(v)
		_logger.warning(
			f"Cannot instantiate {_owner(info)} with non-sequence {type(v).__name__}. Defaulting to empty."
		)
		return []

	@field_validator("capacity", mode="before")
	@classmethod
	def validate_capacity(cls, v: Any, info: ValidationInfo) -> Union[int, float]:
		return coerce_capacity(v, _owner(info))

	@model_validator(mode="after")
	def truncate_initial(self) -> "CollectionConfig":
		# keeps the earliest elements
		if self.capacity != UNBOUNDED and len(self.initial) > self.capacity:
			self.initial = self.initial[: int(self.capacity)]
		return self

	@classmethod
	def coerce(cls, initial: Any = None, capacity: Any = UNBOUNDED, kind: str = "collection") -> "CollectionConfig":
		return cls.model_validate(
			{"initial": initial, "capacity": capacity},
			context={"kind": kind},
		)


class QueueSettings(BaseModel):
	"""Settings for a named collection owned by a ``QueueManager``."""

	name: str = "default"
	kind: Literal["last", "first"] = "last"
	capacity: Union[int, float] = Field(default=UNBOUNDED)

	@field_validator("kind", mode="before")
	@classmethod
	def normalize_kind(cls, v: Any) -> Any:
		if isinstance(v, str):
			v = v.strip().lower()
			return _KIND_ALIASES.get(v, v)
		return v

	@field_validator("capacity", mode="before")
	@classmethod
	def validate_capacity(cls, v: Any, info: ValidationInfo) -> Union[int, float]:
		return coerce_capacity(v, info.data.get("name", "queue"))

	@property
	def bounded(self) -> bool:
		return self.capacity != UNBOUNDED

	@classmethod
	def from_env(cls, prefix: str = "WORKER_QUEUE_") -> "QueueSettings":
		"""Build settings from ``<prefix>NAME``, ``<prefix>KIND`` and ``<prefix>CAPACITY``."""
		data: dict[str, Any] = {
			"name": os.getenv(f"{prefix}NAME", "default"),
			"kind": os.getenv(f"{prefix}KIND", "last"),
		}
		capacity = os.getenv(f"{prefix}CAPACITY")
		if capacity:
			data["capacity"] = parse_capacity(capacity)
		return cls(**data)


def parse_capacity(raw: str) -> Optional[Any]:
	"""Turn a capacity string from the environment or command line into a number.

	Unparseable text is returned as is and coerced to unbounded later.
	"""
	raw = raw.strip()
	if raw.lower() in ("", "inf", "infinity", "unbounded", "none"):
		return None
	try:
		return int(raw)
	except ValueError:
		try:
			return float(raw)
		except ValueError:
			return raw


__all__ = ["UNBOUNDED", "CollectionConfig", "QueueSettings", "coerce_capacity", "parse_capacity"]
