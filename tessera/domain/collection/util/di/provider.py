from dishka import from_context, provide

from tessera.config import Config
from tessera.domain.collection.model.value import CollectionPolicy
from tessera.domain.collection.port.repository import CollectionRepository
from tessera.domain.collection.service.collection import CollectionService
from tessera.domain.shared.port.cache import CacheInvalidator
from tessera.util.di.base import Provider
from tessera.util.di.scope import Scope


class CollectionProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_collection_policy(self, config: Config) -> CollectionPolicy:
        return CollectionPolicy.from_config(config)

    @provide(scope=Scope.UOW)
    def get_collection_service(
        self,
        collection_repo: CollectionRepository,
        cache: CacheInvalidator,
        policy: CollectionPolicy,
    ) -> CollectionService:
        return CollectionService(collection_repo=collection_repo, cache=cache, policy=policy)
