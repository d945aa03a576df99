"""Augmentation engine: projects a record into contextualized values."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from tessera.domain.augmentation.model.value import Resolution
from tessera.domain.augmentation.port.record import (
    Augmentable,
    SupportsAccessors,
    SupportsSupplements,
)
from tessera.domain.augmentation.port.schema import FieldSchemaLookup
from tessera.domain.augmentation.service.schema import BlueprintFieldLookup
from tessera.domain.augmentation.service.wrapper import wrap_value
from tessera.domain.blueprint.model.value import FieldDescriptor

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Projection operations that may never double as computed accessors.
RESERVED_HANDLES = frozenset({"all", "project", "project_except", "get", "keys"})

_COMPUTED_ATTR = "__computed_handle__"


def computed(handle: str | Callable[..., Any]) -> Any:
    """Declare an engine method as the computed accessor for a handle.

    Use bare (``@computed``) to take the handle from the method name, or
    with an argument (``@computed("url-path")``) for handles that are not
    valid identifiers.
    """
    if callable(handle):
        setattr(handle, _COMPUTED_ATTR, handle.__name__)
        return handle

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        setattr(fn, _COMPUTED_ATTR, handle)
        return fn

    return decorator


def _wrap_keys(keys: str | Iterable[str] | None) -> list[str]:
    if keys is None:
        return []
    if isinstance(keys, str):
        return [keys]
    return list(keys)


class AbstractAugmented(ABC, Generic[R]):
    """Base engine over a single record.

    Subclasses list their computed keys in ``keys()`` and implement each one
    as a method decorated with ``@computed``. Values are resolved in a fixed
    order; see ``resolution()``.
    """

    __computed__: ClassVar[dict[str, str]] = {}

    def __init__(self, data: R, schema: FieldSchemaLookup | None = None) -> None:
        self.data = data
        self.schema = schema or BlueprintFieldLookup()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        registry = dict(cls.__computed__)
        for name, member in vars(cls).items():
            handle = getattr(member, _COMPUTED_ATTR, None)
            if handle is None:
                continue
            if handle in RESERVED_HANDLES:
                logger.warning(
                    "%s.%s cannot be computed accessor for reserved handle '%s'; ignored",
                    cls.__name__,
                    name,
                    handle,
                )
                continue
            registry[handle] = name
        cls.__computed__ = registry

    @abstractmethod
    def keys(self) -> list[str]:
        """Keys this engine computes in addition to the record's schema."""

    def all(self) -> dict[str, Any]:
        return self.project()

    def project(self, keys: str | Iterable[str] | None = None) -> dict[str, Any]:
        wanted = _wrap_keys(keys) or self.augmentable_keys()
        return {key: self.get(key) for key in wanted}

    def project_except(self, keys: str | Iterable[str]) -> dict[str, Any]:
        # Excluding every key yields {}, never the full projection.
        excluded = set(_wrap_keys(keys))
        return {key: self.get(key) for key in self.augmentable_keys() if key not in excluded}

    def get(self, handle: str) -> Any:
        strategy = self.resolution(handle)

        if strategy is Resolution.COMPUTED_SELF:
            return getattr(self, self.__computed__[handle])()

        if strategy is Resolution.COMPUTED_ON_RECORD:
            raw = self.data.call_accessor(handle)  # type: ignore[attr-defined]
        elif strategy is Resolution.SUPPLEMENT_ON_RECORD:
            raw = self.data.get_supplement(handle)  # type: ignore[attr-defined]
        else:
            raw = self._get_from_data(handle)

        return wrap_value(raw, handle, self.data, self.blueprint_fields())

    def resolution(self, handle: str) -> Resolution:
        """Pick the strategy that will produce the value for handle."""
        if handle in self.__computed__ and handle not in RESERVED_HANDLES:
            return Resolution.COMPUTED_SELF

        if isinstance(self.data, SupportsAccessors) and self.data.has_accessor(handle):
            return Resolution.COMPUTED_ON_RECORD

        if (
            isinstance(self.data, SupportsSupplements)
            and self.data.get_supplement(handle) is not None
        ):
            return Resolution.SUPPLEMENT_ON_RECORD

        return Resolution.STORED_ON_RECORD

    def _get_from_data(self, handle: str) -> Any:
        if not isinstance(self.data, Augmentable):
            logger.debug(
                "%s has no stored data; '%s' resolves to None", type(self.data).__name__, handle
            )
            return None
        return self.data.get(handle)

    def blueprint_fields(self) -> Mapping[str, FieldDescriptor]:
        return self.schema.fields(self.data)

    def augmentable_keys(self) -> list[str]:
        return list(dict.fromkeys([*self.blueprint_fields().keys(), *self.keys()]))
