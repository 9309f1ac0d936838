"""Shape context - abstract capability and its concrete variants."""

from .exceptions import ShapeException, ShapeValidationError, UnknownShapeError
from .factory import SHAPE_TYPES, create_shape
from .value_objects import Circle, Rectangle, Shape

__all__ = [
    "Shape",
    "Circle",
    "Rectangle",
    "SHAPE_TYPES",
    "create_shape",
    "ShapeException",
    "ShapeValidationError",
    "UnknownShapeError",
]
