"""Custom Dishka scopes for Tessera."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Tessera dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (singletons)
    - UOW: Unit of Work (one editing session or request)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
