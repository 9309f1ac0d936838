"""Concept catalog value objects."""
from enum import Enum

from pydantic import Field, field_validator

from oop_concepts.domain.base.exceptions import ValidationError
from oop_concepts.domain.base.value_objects import ValueObject


class ConceptCategory(str, Enum):
    """Top-level grouping of catalog entries."""
    OOP = "oop"
    TESTING = "testing"

    @classmethod
    def from_str(cls, value: str) -> "ConceptCategory":
        try:
            return cls(value.lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValidationError(
                f"Invalid concept category '{value}'. Valid categories: {valid}",
                "INVALID_CATEGORY",
                {"category": value},
            ) from None


class Concept(ValueObject):
    """A vocabulary term with a short explanation."""

    name: str = Field(..., description="Unique kebab-case identifier")
    category: ConceptCategory
    title: str
    summary: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names are lowercase kebab-case."""
        if not v or v != v.strip().lower() or " " in v:
            raise ValueError(f"Concept name must be lowercase kebab-case: '{v}'")
        return v

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category.value,
            "title": self.title,
            "summary": self.summary,
        }
