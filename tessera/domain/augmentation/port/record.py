"""Capabilities a record may offer to the augmentation engine.

Only ``Augmentable`` is required. The optional capabilities are probed with
``isinstance`` checks, so a record opts in simply by implementing the methods.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tessera.domain.blueprint.model.value import Blueprint


@runtime_checkable
class Augmentable(Protocol):
    """Plain stored-value lookup."""

    def get(self, handle: str, default: Any = None) -> Any: ...


@runtime_checkable
class SupportsAccessors(Protocol):
    """Computed properties exposed by the record itself."""

    def has_accessor(self, handle: str) -> bool: ...

    def call_accessor(self, handle: str) -> Any: ...


@runtime_checkable
class SupportsSupplements(Protocol):
    """Derived values that take precedence over stored data."""

    def get_supplement(self, handle: str) -> Any: ...


@runtime_checkable
class HasBlueprint(Protocol):
    @property
    def blueprint(self) -> "Blueprint | None": ...
