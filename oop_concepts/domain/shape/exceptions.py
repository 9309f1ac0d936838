"""Shape domain exceptions."""

from oop_concepts.domain.base.exceptions import DomainException, ValidationError


class ShapeException(DomainException):
    """Base exception for shape domain errors."""


class UnknownShapeError(ShapeException):
    """Raised when a shape kind has no matching variant."""

    def __init__(self, kind: str, available: list):
        super().__init__(
            f"Unknown shape kind '{kind}'. Available kinds: {', '.join(available)}",
            "UNKNOWN_SHAPE",
            {"kind": kind, "available": available},
        )
        self.kind = kind


class ShapeValidationError(ValidationError):
    """Raised when shape dimensions are invalid."""
