"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- FieldError: A single field-scoped validation message
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, InvariantViolationError
from .validation import FieldError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "FieldError",
    "InvariantViolationError",
    "ValueObject",
]
