"""Site domain model."""

from tessera.domain.site.model.value import Site, Sites

__all__ = ["Site", "Sites"]
