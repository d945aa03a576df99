from enum import StrEnum
from typing import Any

from tessera.domain.shared.error import ValidationError
from tessera.domain.shared.model.value import ValueObject


class FieldType(StrEnum):
    TEXT = "text"
    TEXTAREA = "textarea"
    MARKDOWN = "markdown"
    INTEGER = "integer"
    FLOAT = "float"
    TOGGLE = "toggle"
    DATE = "date"
    SELECT = "select"
    TAGS = "tags"
    ENTRIES = "entries"
    ASSETS = "assets"
    ARRAY = "array"


class FieldDescriptor(ValueObject):
    """A single field within a blueprint: its handle and declared type."""

    handle: str
    type: FieldType
    config: dict[str, Any] = {}  # Options understood by the field type

    def fieldtype(self) -> FieldType:
        return self.type


class Blueprint(ValueObject):
    """The schema of a record: an ordered list of field descriptors."""

    handle: str
    title: str | None = None
    fields: tuple[FieldDescriptor, ...] = ()

    def model_post_init(self, __context: object) -> None:
        handles = [f.handle for f in self.fields]
        if len(handles) != len(set(handles)):
            raise ValidationError(
                f"Duplicate field handles within blueprint '{self.handle}'", field="fields"
            )

    def field_map(self) -> dict[str, FieldDescriptor]:
        """Ordered mapping of field handle to descriptor, in declaration order."""
        return {f.handle: f for f in self.fields}

    def has_field(self, handle: str) -> bool:
        return any(f.handle == handle for f in self.fields)
