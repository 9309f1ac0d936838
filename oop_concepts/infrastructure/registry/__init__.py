"""Registry infrastructure."""

from .concept_registry import (
    ConceptRegistration,
    ConceptRegistry,
    get_concept_registry,
)

__all__ = ["ConceptRegistration", "ConceptRegistry", "get_concept_registry"]
