from enum import StrEnum
from typing import Any

from pydantic import ConfigDict

from tessera.domain.blueprint.model.value import FieldDescriptor
from tessera.domain.shared.model.value import ValueObject


class Resolution(StrEnum):
    """Where the engine found a handle's value, in priority order."""

    COMPUTED_SELF = "computed_self"
    COMPUTED_ON_RECORD = "computed_on_record"
    SUPPLEMENT_ON_RECORD = "supplement_on_record"
    STORED_ON_RECORD = "stored_on_record"


class Value(ValueObject):
    """A raw field value bound to its field descriptor and owning record.

    Downstream renderers use the descriptor to decide how to present the
    value. Comparisons are made against the raw value only.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    raw: Any
    handle: str
    fieldtype: FieldDescriptor
    augmentable: Any = None

    def value(self) -> Any:
        return self.raw

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return self.raw == other.raw
        return self.raw == other

    def __hash__(self) -> int:
        try:
            return hash(self.raw)
        except TypeError:
            # Unhashable raws (lists, dicts) hash by type; equal raws share one.
            return hash(type(self.raw))

    def __str__(self) -> str:
        return "" if self.raw is None else str(self.raw)
