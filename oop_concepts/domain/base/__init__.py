"""Base domain layer - shared kernel for all example contexts."""

from .entity import Entity
from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    RestrictedFieldError,
    ValidationError,
)
from .value_objects import ValueObject

__all__ = [
    # Entities
    "Entity",
    # Value Objects
    "ValueObject",
    # Exceptions
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConfigurationError",
    "RestrictedFieldError",
]
