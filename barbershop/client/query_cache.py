"""
List cache for the client views.

Entries are keyed by the list's API path. Mutations call ``invalidate``
right after the server accepts them, so the next ``fetch`` reloads.
"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class QueryCache:
    def __init__(self):
        self._entries: dict[str, Any] = {}

    def fetch(self, key: str, loader: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, loading it on a miss"""
        if key in self._entries:
            logger.debug(f"Cache HIT: {key}")
            return self._entries[key]

        logger.debug(f"Cache MISS: {key}")
        value = loader()
        self._entries[key] = value
        return value

    def get(self, key: str, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)
        logger.debug(f"Cache INVALIDATE: {key}")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries
