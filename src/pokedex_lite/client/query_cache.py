"""Explicit request cache for read operations.

Entries are keyed by operation name plus arguments. Nothing expires on its
own: callers invalidate after writes (the client clears everything after a
successful create) or when the user asks for a retry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

CacheKey = tuple[str, tuple[Hashable, ...]]


def _freeze(value: Any) -> Hashable:
    # Lists/sets arrive from callers; keys must be hashable and order-stable
    if isinstance(value, (set, frozenset)):
        return tuple(sorted(_freeze(item) for item in value))
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return tuple(_freeze(item) for item in value)
    return value


class QueryCache:
    def __init__(self) -> None:
        self._entries: dict[CacheKey, Any] = {}

    @staticmethod
    def key(operation: str, *args: Any) -> CacheKey:
        return (operation, tuple(_freeze(arg) for arg in args))

    def get_or_fetch(self, operation: str, args: tuple[Any, ...], fetch: Callable[[], T]) -> T:
        """
        Return the cached value for (operation, args), calling ``fetch`` on a miss.

        Failures are not cached: if ``fetch`` raises, the next call fetches again.
        """
        key = self.key(operation, *args)
        if key in self._entries:
            return self._entries[key]

        value = fetch()
        self._entries[key] = value
        return value

    def invalidate(self, operation: str | None = None, *args: Any) -> int:
        """
        Drop cached entries and return how many were removed.

        - no operation: everything
        - operation only: every entry of that operation
        - operation and args: that single entry
        """
        if operation is None:
            removed = len(self._entries)
            self._entries.clear()
        elif args:
            key = self.key(operation, *args)
            removed = 1 if key in self._entries else 0
            self._entries.pop(key, None)
        else:
            stale = [key for key in self._entries if key[0] == operation]
            for key in stale:
                del self._entries[key]
            removed = len(stale)

        logger.debug(
            "Query cache invalidated",
            extra={"operation": operation, "removed": removed},
        )
        return removed

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
