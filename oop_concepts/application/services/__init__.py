"""Application services."""

from .concept_service import ConceptApplicationService

__all__ = ["ConceptApplicationService"]
