"""Per-request memoization for progress reads.

A ``RequestCache`` is created for one incoming request and discarded with it.
Keys are ``(operation, bound arguments)`` with defaults applied, so
``get_lesson(101)`` and ``get_lesson(lesson_id=101)`` share an entry.
Values are whatever the operation returned, including ``None`` and empty
lists.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestCache:
    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def get_or_load(self, key: Hashable, loader: Callable[[], Awaitable[T]]) -> T:
        if key in self._entries:
            logger.debug("Request cache hit for %s", key[0] if isinstance(key, tuple) else key)
            return self._entries[key]
        value = await loader()
        self._entries[key] = value
        return value


def request_memoized(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Memoize an async method on ``self.cache`` for the lifetime of the request."""

    signature = inspect.signature(func)

    @functools.wraps(func)
    async def wrapper(self: Any, *args: Any, **kwargs: Any) -> T:
        bound = signature.bind(self, *args, **kwargs)
        bound.apply_defaults()
        key = (func.__name__, tuple(bound.arguments.items())[1:])
        return await self.cache.get_or_load(key, lambda: func(self, *args, **kwargs))

    return wrapper
