from dishka import provide

from tessera.domain.blueprint.port.repository import BlueprintRepository
from tessera.domain.collection.port.repository import CollectionRepository
from tessera.domain.shared.port.cache import CacheInvalidator
from tessera.infrastructure.cache.blink import BlinkCache
from tessera.infrastructure.persistence.repository.blueprint import InMemoryBlueprintRepository
from tessera.infrastructure.persistence.repository.collection import (
    InMemoryCollectionRepository,
)
from tessera.util.di.base import Provider
from tessera.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped stores (process lifetime)
    @provide(scope=Scope.APP)
    def get_collection_repo(self) -> CollectionRepository:
        return InMemoryCollectionRepository()

    @provide(scope=Scope.APP)
    def get_blueprint_repo(self) -> BlueprintRepository:
        return InMemoryBlueprintRepository()

    @provide(scope=Scope.APP)
    def get_cache(self) -> CacheInvalidator:
        return BlinkCache()
