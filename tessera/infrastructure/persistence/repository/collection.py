import logging

from tessera.domain.collection.model.aggregate import Collection
from tessera.domain.collection.port.repository import CollectionRepository
from tessera.domain.shared.error import ValidationError

logger = logging.getLogger(__name__)


class InMemoryCollectionRepository(CollectionRepository):
    """Keeps collections in a dict keyed by handle.

    Stored and returned collections are copies, so mutating a loaded
    collection has no effect until it is saved again.
    """

    def __init__(self) -> None:
        self._collections: dict[str, Collection] = {}

    def save(self, collection: Collection) -> None:
        if collection.handle is None:
            raise ValidationError("Cannot store a collection without a handle", field="handle")
        self._collections[collection.handle] = collection.model_copy(deep=True)
        logger.debug("Stored collection '%s'", collection.handle)

    def find(self, handle: str) -> Collection | None:
        stored = self._collections.get(handle)
        return stored.model_copy(deep=True) if stored is not None else None

    def handles(self) -> list[str]:
        return sorted(self._collections)

    def delete(self, handle: str) -> None:
        self._collections.pop(handle, None)
