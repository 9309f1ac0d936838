"""
Domain Layer - one small bounded context per illustrated concept

This domain layer is organized by context:
- base/: Shared kernel with base classes and common exceptions
- person/: Construction with initialization
- counter/: Mutable instance state
- shape/: Abstract capability and polymorphic variants
- account/: Encapsulation of a restricted field
- employee/: Immutable identity and class-level shared state
- utilities/: Static operations
- concept/: Catalog of OOP and testing vocabulary
"""

from .account import BankAccount
from .base import (
    ConfigurationError,
    DomainException,
    Entity,
    EntityNotFoundError,
    RestrictedFieldError,
    ValidationError,
    ValueObject,
)
from .concept import Concept, ConceptCategory
from .counter import Counter
from .employee import Employee
from .person import Person
from .shape import Circle, Rectangle, Shape, create_shape
from .utilities import MathUtils

__all__ = [
    # Base primitives
    "Entity",
    "ValueObject",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConfigurationError",
    "RestrictedFieldError",
    # Examples
    "Person",
    "Counter",
    "Shape",
    "Circle",
    "Rectangle",
    "create_shape",
    "BankAccount",
    "Employee",
    "MathUtils",
    # Catalog
    "Concept",
    "ConceptCategory",
]
