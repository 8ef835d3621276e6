"""Domain entity building blocks."""

from src.domain.entities.entity import Entity, EntityChange

__all__ = ["Entity", "EntityChange"]
