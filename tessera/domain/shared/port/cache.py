"""CacheInvalidator port - request-scoped cache keyed by string scopes."""

from abc import abstractmethod
from typing import Any, Callable, Protocol, TypeVar

from tessera.domain.shared.port import Port

T = TypeVar("T")


class CacheInvalidator(Port, Protocol):
    """Cache that callers invalidate after structural changes.

    Keys are plain strings such as ``"collection-handles"``; related keys
    share a prefix (``"collection-blog"``, ``"collection-blog-entries"``)
    so that a whole family can be dropped at once.
    """

    @abstractmethod
    def once(self, key: str, factory: Callable[[], T]) -> T:
        """Return the cached value for key, computing it with factory on a miss."""
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any: ...

    @abstractmethod
    def put(self, key: str, value: Any) -> None: ...

    @abstractmethod
    def flush(self, key: str) -> None: ...

    @abstractmethod
    def flush_starting_with(self, prefix: str) -> None: ...
