from tessera.domain.augmentation.port.schema import FieldSchemaLookup
from tessera.domain.augmentation.service.augmented import AbstractAugmented, computed
from tessera.domain.collection.model.aggregate import Collection
from tessera.domain.entry.model.aggregate import Entry


class AugmentedEntry(AbstractAugmented[Entry]):
    """Projects an entry for rendering.

    When given the entry's collection, ``order`` resolves to the entry's
    rank within that collection's ordering.
    """

    def __init__(
        self,
        data: Entry,
        collection: Collection | None = None,
        schema: FieldSchemaLookup | None = None,
    ) -> None:
        super().__init__(data, schema)
        self.collection = collection

    def keys(self) -> list[str]:
        return ["id", "slug", "collection", "order"]

    @computed
    def order(self) -> int | None:
        if self.collection is None or not self.collection.orderable:
            return None
        return self.collection.get_entry_order(self.data.id)
