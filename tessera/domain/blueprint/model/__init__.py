"""Blueprint domain model."""

from tessera.domain.blueprint.model.value import Blueprint, FieldDescriptor, FieldType

__all__ = ["Blueprint", "FieldDescriptor", "FieldType"]
