from abc import abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from tessera.domain.shared.port import Port

if TYPE_CHECKING:
    from tessera.domain.blueprint.model.value import FieldDescriptor


class FieldSchemaLookup(Port, Protocol):
    """Resolves the declared fields of a record.

    Returns an ordered mapping of field handle to descriptor, or an empty
    mapping when the record has no schema.
    """

    @abstractmethod
    def fields(self, record: Any) -> "Mapping[str, FieldDescriptor]": ...
