from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

from tessera.domain.shared.port import Port

if TYPE_CHECKING:
    from tessera.domain.blueprint.model.value import Blueprint


class BlueprintRepository(Port, Protocol):
    @abstractmethod
    def find(self, handle: str) -> "Blueprint | None": ...

    @abstractmethod
    def save(self, blueprint: "Blueprint") -> None: ...
