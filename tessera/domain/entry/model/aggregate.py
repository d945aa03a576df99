from typing import Any

from pydantic import Field

from tessera.domain.blueprint.model.value import Blueprint
from tessera.domain.shared.model.aggregate import Aggregate

# Entry attributes served as computed accessors rather than stored data.
ACCESSORS = frozenset({"id", "slug", "collection"})


class Entry(Aggregate):
    """A single piece of content belonging to a collection.

    ``data`` holds stored field values. ``supplements`` holds derived values
    attached at runtime (never persisted) that take precedence over ``data``.
    """

    id: str
    collection: str | None = None
    slug: str | None = None
    data: dict[str, Any] = {}
    supplements: dict[str, Any] = Field(default_factory=dict, exclude=True)
    blueprint: Blueprint | None = None

    def get(self, handle: str, default: Any = None) -> Any:
        return self.data.get(handle, default)

    def set(self, handle: str, value: Any) -> "Entry":
        self.data[handle] = value
        return self

    def get_supplement(self, handle: str) -> Any:
        return self.supplements.get(handle)

    def set_supplement(self, handle: str, value: Any) -> "Entry":
        self.supplements[handle] = value
        return self

    def has_accessor(self, handle: str) -> bool:
        return handle in ACCESSORS

    def call_accessor(self, handle: str) -> Any:
        return getattr(self, handle)
