"""Collection services."""

from tessera.domain.collection.service.augmented import AugmentedCollection
from tessera.domain.collection.service.collection import CollectionService

__all__ = ["AugmentedCollection", "CollectionService"]
