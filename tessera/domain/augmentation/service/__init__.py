"""Augmentation services."""

from tessera.domain.augmentation.service.augmented import AbstractAugmented, computed
from tessera.domain.augmentation.service.schema import BlueprintFieldLookup
from tessera.domain.augmentation.service.wrapper import wrap_value

__all__ = ["AbstractAugmented", "BlueprintFieldLookup", "computed", "wrap_value"]
