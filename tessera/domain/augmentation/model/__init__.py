"""Augmentation domain model."""

from tessera.domain.augmentation.model.value import Resolution, Value

__all__ = ["Resolution", "Value"]
