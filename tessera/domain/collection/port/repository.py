from abc import abstractmethod
from typing import TYPE_CHECKING, List, Protocol

from tessera.domain.shared.port import Port

if TYPE_CHECKING:
    from tessera.domain.collection.model.aggregate import Collection


class CollectionRepository(Port, Protocol):
    @abstractmethod
    def save(self, collection: "Collection") -> None: ...

    @abstractmethod
    def find(self, handle: str) -> "Collection | None": ...

    @abstractmethod
    def handles(self) -> "List[str]": ...

    @abstractmethod
    def delete(self, handle: str) -> None: ...
