"""Exceptions raised by the entity services."""

from __future__ import annotations


class EntityError(Exception):
    """Base exception for entity workflows."""


class ValidationError(EntityError):
    """Raised when an input entity violates the entity shape."""

    def __init__(self, position: int, field: str = "numberValue") -> None:
        super().__init__(f"Entity at position {position} is missing required field '{field}'")
        self.position = position
        self.field = field


class StoreError(EntityError):
    """Raised when the store is unreachable or rejects an operation."""
