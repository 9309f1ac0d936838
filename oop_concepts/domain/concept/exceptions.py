"""Concept catalog exceptions."""

from oop_concepts.domain.base.exceptions import DomainException, EntityNotFoundError


class ConceptException(DomainException):
    """Base exception for concept catalog errors."""


class UnsupportedConceptError(EntityNotFoundError):
    """Raised when a concept name is not registered."""

    def __init__(self, name: str):
        super().__init__("Concept", name)
        self.name = name


class DuplicateConceptError(ConceptException):
    """Raised when a concept name is registered twice."""

    def __init__(self, name: str):
        super().__init__(
            f"Concept '{name}' is already registered",
            "DUPLICATE_CONCEPT",
            {"name": name},
        )


class ConceptNotRunnableError(ConceptException):
    """Raised when running a concept that has no demo."""

    def __init__(self, name: str):
        super().__init__(
            f"Concept '{name}' has no runnable demo",
            "CONCEPT_NOT_RUNNABLE",
            {"name": name},
        )
