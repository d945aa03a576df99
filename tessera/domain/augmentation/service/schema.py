from collections.abc import Mapping
from typing import Any

from tessera.domain.augmentation.port.record import HasBlueprint
from tessera.domain.augmentation.port.schema import FieldSchemaLookup
from tessera.domain.blueprint.model.value import FieldDescriptor


class BlueprintFieldLookup(FieldSchemaLookup):
    """Reads declared fields from the record's own blueprint, if it has one."""

    def fields(self, record: Any) -> Mapping[str, FieldDescriptor]:
        if isinstance(record, HasBlueprint) and (blueprint := record.blueprint) is not None:
            return blueprint.field_map()
        return {}
