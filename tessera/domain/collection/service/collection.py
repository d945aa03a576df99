import logging

from tessera.domain.collection.model.aggregate import Collection
from tessera.domain.collection.model.value import CollectionPolicy
from tessera.domain.collection.port.repository import CollectionRepository
from tessera.domain.shared.error import ConflictError, NotFoundError, ValidationError
from tessera.domain.shared.port.cache import CacheInvalidator
from tessera.domain.shared.service import Service

logger = logging.getLogger(__name__)

HANDLES_CACHE_KEY = "collection-handles"


def cache_prefix(handle: str) -> str:
    """Prefix shared by every cache key scoped to one collection."""
    return f"collection-{handle}"


class CollectionService(Service):
    collection_repo: CollectionRepository
    cache: CacheInvalidator
    policy: CollectionPolicy

    def create(self, handle: str | None = None) -> Collection:
        """A new, unsaved collection bound to the process-wide policy."""
        return Collection(handle=handle, policy=self.policy)

    def save(self, collection: Collection) -> Collection:
        """Persist a collection and drop every cache entry derived from it."""
        if not collection.handle:
            raise ValidationError("Cannot save a collection without a handle", field="handle")

        self.collection_repo.save(collection)
        self.cache.flush(HANDLES_CACHE_KEY)
        self.cache.flush_starting_with(cache_prefix(collection.handle))

        logger.info("Saved collection '%s'", collection.handle)
        return collection

    def rename(self, collection: Collection, handle: str) -> Collection:
        """Move a collection to a new handle.

        The old record is only removed once the collection is stored under
        the new handle, so a rejected rename leaves both untouched.
        """
        if not handle:
            raise ValidationError("Cannot rename a collection to an empty handle", field="handle")

        previous = collection.handle
        if previous == handle:
            return self.save(collection)

        if self.collection_repo.find(handle) is not None:
            raise ConflictError(f"Collection already exists: {handle}")

        self.save(collection.set_handle(handle))
        if previous:
            self.collection_repo.delete(previous)
            self.cache.flush_starting_with(cache_prefix(previous))
            logger.info("Renamed collection '%s' to '%s'", previous, handle)
        return collection

    def find(self, handle: str) -> Collection | None:
        return self.collection_repo.find(handle)

    def get(self, handle: str) -> Collection:
        collection = self.collection_repo.find(handle)
        if collection is None:
            raise NotFoundError(f"Collection not found: {handle}")
        return collection

    def handles(self) -> list[str]:
        return self.cache.once(HANDLES_CACHE_KEY, self.collection_repo.handles)
