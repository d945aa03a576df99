from tessera.domain.blueprint.model.value import Blueprint
from tessera.domain.blueprint.port.repository import BlueprintRepository


class InMemoryBlueprintRepository(BlueprintRepository):
    def __init__(self, blueprints: list[Blueprint] | None = None) -> None:
        self._blueprints: dict[str, Blueprint] = {b.handle: b for b in blueprints or []}

    def find(self, handle: str) -> Blueprint | None:
        return self._blueprints.get(handle)

    def save(self, blueprint: Blueprint) -> None:
        self._blueprints[blueprint.handle] = blueprint
