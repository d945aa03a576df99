"""Entry domain model."""

from tessera.domain.entry.model.aggregate import Entry

__all__ = ["Entry"]
