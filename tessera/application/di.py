from dishka import Container, make_container

from tessera.config import Config
from tessera.domain.collection.util.di import CollectionProvider
from tessera.infrastructure.persistence import PersistenceProvider
from tessera.util.di.scope import Scope


def create_container(config: Config | None = None) -> Container:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_container(
        PersistenceProvider(),
        CollectionProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
