"""Task executors."""

from .async_executor import AsyncExecutor, DrainResult  # noqa: F401

__all__ = ["AsyncExecutor", "DrainResult"]
