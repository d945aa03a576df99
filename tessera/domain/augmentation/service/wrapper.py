from collections.abc import Mapping
from typing import Any

from tessera.domain.augmentation.model.value import Value
from tessera.domain.blueprint.model.value import FieldDescriptor


def wrap_value(
    raw: Any,
    handle: str,
    record: Any,
    fields: Mapping[str, FieldDescriptor],
) -> Value | Any:
    """Bind a raw value to its field descriptor.

    Undeclared handles are returned untouched.
    """
    descriptor = fields.get(handle)
    if descriptor is None:
        return raw
    return Value(raw=raw, handle=handle, fieldtype=descriptor, augmentable=record)
