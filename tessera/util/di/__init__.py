from tessera.util.di.base import Provider
from tessera.util.di.scope import Scope

__all__ = ["Provider", "Scope"]
