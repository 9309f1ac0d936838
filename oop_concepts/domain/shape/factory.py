"""Build shape variants from their kind name."""
from typing import Dict, Type

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ShapeValidationError, UnknownShapeError
from .value_objects import Circle, Rectangle, Shape

SHAPE_TYPES: Dict[str, Type[Shape]] = {
    Circle.kind: Circle,
    Rectangle.kind: Rectangle,
}


def create_shape(kind: str, **dimensions: float) -> Shape:
    """
    Create a concrete shape.

    Args:
        kind: Variant name, e.g. ``"circle"`` or ``"rectangle"``
        **dimensions: Keyword dimensions expected by the variant

    Returns:
        The constructed shape

    Raises:
        UnknownShapeError: If no variant is registered for ``kind``
        ShapeValidationError: If the dimensions are missing or invalid
    """
    shape_class = SHAPE_TYPES.get(kind.lower()) if isinstance(kind, str) else None
    if shape_class is None:
        raise UnknownShapeError(kind, sorted(SHAPE_TYPES))

    try:
        return shape_class(**dimensions)
    except (PydanticValidationError, TypeError) as e:
        raise ShapeValidationError(
            f"Invalid dimensions for {kind}: {e}",
            "INVALID_SHAPE_DIMENSIONS",
            {"kind": kind, "dimensions": dimensions},
        ) from e
