"""Shape value objects - single-dispatch polymorphism over ``area``.

``Shape`` declares the capability without implementing it, so it cannot be
constructed directly. ``Circle`` and ``Rectangle`` are the concrete variants;
any of them can stand in wherever a ``Shape`` is expected.
"""
import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import ConfigDict, Field

from oop_concepts.domain.base.value_objects import ValueObject


class Shape(ValueObject, ABC):
    """Abstract base for every shape variant."""
    model_config = ConfigDict(extra="forbid")

    kind: ClassVar[str] = "shape"

    @abstractmethod
    def area(self) -> float:
        """Compute the shape's area."""

    def describe(self) -> str:
        return f"{self.__class__.__name__} area: {self.area():.2f}"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            **self.model_dump(),
            "area": self.area(),
            "description": self.describe(),
        }


class Circle(Shape):
    """Circle defined by its radius."""

    kind: ClassVar[str] = "circle"

    radius: float = Field(..., ge=0)

    def __init__(self, radius: float, **data: Any) -> None:
        super().__init__(radius=radius, **data)

    def area(self) -> float:
        return math.pi * self.radius ** 2


class Rectangle(Shape):
    """Axis-aligned rectangle defined by width and height."""

    kind: ClassVar[str] = "rectangle"

    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)

    def __init__(self, width: float, height: float, **data: Any) -> None:
        super().__init__(width=width, height=height, **data)

    def area(self) -> float:
        return self.width * self.height
