"""Concept catalog context."""

from .exceptions import (
    ConceptException,
    ConceptNotRunnableError,
    DuplicateConceptError,
    UnsupportedConceptError,
)
from .value_objects import Concept, ConceptCategory

__all__ = [
    "Concept",
    "ConceptCategory",
    "ConceptException",
    "ConceptNotRunnableError",
    "DuplicateConceptError",
    "UnsupportedConceptError",
]
