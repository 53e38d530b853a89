"""
Identity types and the entity base class.

An entity keeps its identity while its attributes change; two entities
are the same entity exactly when their IDs are equal. IDs are assigned by
the store, so an entity that was never saved carries the placeholder 0.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Integer identifier of one kind of entity.

    Each entity gets its own subclass, so a ``FlashcardId(42)`` never
    compares equal to (or type-checks as) a ``UserId(42)``.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_assigned(self) -> bool:
        """Whether the store has assigned this identifier yet."""
        return self.value != 0

    @classmethod
    def generate(cls) -> Self:
        """Placeholder for an entity that has not been stored yet."""
        return cls(0)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Identity-compared domain object; subclasses declare ``id: IdType``."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
