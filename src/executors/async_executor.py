"""Async task executor.

Drains a bounded collection into coroutine handlers with a cap on how many
run at once. The collection is only touched from the event loop, which keeps
access to it sequential.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional

from loguru import logger

from task_queue.bounded import EMPTY, BoundedCollection

_logger = logger.bind(name="executors.async")


@dataclass
class DrainResult:
	item: Any
	status: str  # 'success', 'failure'
	result: Optional[Any] = None
	error: Optional[str] = None


class AsyncExecutor:
	def __init__(self, max_concurrency: int = 4):
		if max_concurrency < 1:
			raise ValueError("max_concurrency must be at least 1")
		self.max_concurrency = max_concurrency
		self._loop: Optional[asyncio.AbstractEventLoop] = None
		self._semaphore: Optional[asyncio.Semaphore] = None

	def _slots(self) -> asyncio.Semaphore:
		# a semaphore cannot be shared across event loops
		loop = asyncio.get_running_loop()
		if self._semaphore is None or self._loop is not loop:
			self._loop = loop
			self._semaphore = asyncio.Semaphore(self.max_concurrency)
		return self._semaphore

	async def submit(self, fn: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> Any:
		async with self._slots():
			return await fn(*args, **kwargs)

	async def _run(self, handler: Callable[[Any], Awaitable[Any]], item: Any) -> DrainResult:
		try:
			result = await self.submit(handler, item)
			return DrainResult(item=item, status="success", result=result)
		except Exception as e:
			_logger.error(f"Handler failed for {item!r}: {e}")
			return DrainResult(item=item, status="failure", error=str(e))

	async def drain(
		self, collection: BoundedCollection, handler: Callable[[Any], Awaitable[Any]]
	) -> List[DrainResult]:
		"""Pull from ``collection`` until ``EMPTY``, handling each item.

		Items are pulled in the collection's own order and results are returned
		in that order. A failing handler is recorded in its result and does not
		stop the drain. Ends with the collection's cursor terminated.
		"""
		tasks = []
		while True:
			item = collection.pull_next()
			if item is EMPTY:
				break
			tasks.append(asyncio.ensure_future(self._run(handler, item)))

		results = list(await asyncio.gather(*tasks)) if tasks else []
		failures = sum(1 for r in results if r.status == "failure")
		_logger.info(f"Drained {len(results)} item(s), {failures} failure(s)")
		return results


__all__ = ["AsyncExecutor", "DrainResult"]
