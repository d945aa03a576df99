"""Collection domain model."""

from tessera.domain.collection.model.aggregate import Collection
from tessera.domain.collection.model.ordering import EntryPositions
from tessera.domain.collection.model.value import (
    CollectionPolicy,
    DateBehavior,
    SortDirection,
    SortPolicy,
)

__all__ = [
    "Collection",
    "CollectionPolicy",
    "DateBehavior",
    "EntryPositions",
    "SortDirection",
    "SortPolicy",
]
