"""Unit tests for Blueprint and FieldDescriptor."""

import pytest

from tessera.domain.blueprint.model.value import Blueprint, FieldDescriptor, FieldType
from tessera.domain.shared.error import ValidationError


def _make_field(handle: str, type: FieldType = FieldType.TEXT) -> FieldDescriptor:
    return FieldDescriptor(handle=handle, type=type)


class TestBlueprint:
    def test_field_map_preserves_declaration_order(self):
        blueprint = Blueprint(
            handle="article",
            fields=(_make_field("title"), _make_field("date", FieldType.DATE), _make_field("body")),
        )

        assert list(blueprint.field_map()) == ["title", "date", "body"]
        assert blueprint.field_map()["date"].fieldtype() is FieldType.DATE

    def test_empty_blueprint(self):
        assert Blueprint(handle="default").field_map() == {}

    def test_duplicate_field_handles_are_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Blueprint(handle="broken", fields=(_make_field("title"), _make_field("title")))

        assert exc_info.value.field == "fields"

    def test_has_field(self):
        blueprint = Blueprint(handle="article", fields=(_make_field("title"),))

        assert blueprint.has_field("title")
        assert not blueprint.has_field("body")

    def test_field_type_from_string(self):
        field = FieldDescriptor(handle="tags", type="tags", config={"max_items": 3})

        assert field.type is FieldType.TAGS
        assert field.config == {"max_items": 3}
