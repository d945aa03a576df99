"""Process-local key/value cache with prefix invalidation."""

import logging
from typing import Any, Callable, TypeVar

from tessera.domain.shared.port.cache import CacheInvalidator

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class BlinkCache(CacheInvalidator):
    def __init__(self) -> None:
        self._store: dict[str, Any] = {}

    def once(self, key: str, factory: Callable[[], T]) -> T:
        value = self._store.get(key, _MISSING)
        if value is _MISSING:
            value = factory()
            self._store[key] = value
        return value  # type: ignore[return-value]

    def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._store[key] = value

    def has(self, key: str) -> bool:
        return key in self._store

    def flush(self, key: str) -> None:
        self._store.pop(key, None)
        logger.debug("Flushed cache key '%s'", key)

    def flush_starting_with(self, prefix: str) -> None:
        stale = [key for key in self._store if key.startswith(prefix)]
        for key in stale:
            del self._store[key]
        logger.debug("Flushed %d cache keys starting with '%s'", len(stale), prefix)
