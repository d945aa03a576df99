"""Entry services."""

from tessera.domain.entry.service.augmented import AugmentedEntry

__all__ = ["AugmentedEntry"]
