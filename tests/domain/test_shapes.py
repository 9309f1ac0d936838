import math

import pytest
from pydantic import ValidationError

from oop_concepts.domain.shape import (
    Circle,
    Rectangle,
    Shape,
    ShapeValidationError,
    UnknownShapeError,
    create_shape,
)


def test_circle_area():
    assert Circle(5).area() == pytest.approx(math.pi * 25)
    assert Circle(5).area() == pytest.approx(78.5398, abs=1e-4)


def test_rectangle_area():
    assert Rectangle(4, 5).area() == 20


def test_shape_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Shape()


def test_incomplete_variant_cannot_be_instantiated():
    class Triangle(Shape):
        base: float = 1.0

    with pytest.raises(TypeError):
        Triangle()


def test_variants_are_shapes():
    assert isinstance(Circle(1), Shape)
    assert isinstance(Rectangle(1, 2), Shape)


def test_shapes_are_interchangeable_in_a_collection():
    shapes = [Circle(5), Rectangle(4, 5)]

    areas = [shape.area() for shape in shapes]

    assert areas == [pytest.approx(math.pi * 25), 20]


def test_describe():
    assert Circle(5).describe() == "Circle area: 78.54"
    assert Rectangle(4, 5).describe() == "Rectangle area: 20.00"


def test_shapes_are_value_objects():
    assert Circle(2) == Circle(2)
    assert Rectangle(1, 2) != Rectangle(2, 1)
    with pytest.raises(ValidationError):
        Circle(2).radius = 3


@pytest.mark.parametrize("factory", [lambda: Circle(-1), lambda: Rectangle(-1, 2)])
def test_negative_dimensions_rejected(factory):
    with pytest.raises(ValidationError):
        factory()


def test_zero_dimensions_allowed():
    assert Circle(0).area() == 0
    assert Rectangle(0, 5).area() == 0


def test_to_dict():
    data = Rectangle(4, 5).to_dict()

    assert data["kind"] == "rectangle"
    assert data["width"] == 4
    assert data["height"] == 5
    assert data["area"] == 20
    assert data["description"] == "Rectangle area: 20.00"


class TestCreateShape:
    def test_create_circle(self):
        shape = create_shape("circle", radius=5)
        assert isinstance(shape, Circle)
        assert shape.radius == 5

    def test_create_rectangle_case_insensitive(self):
        shape = create_shape("Rectangle", width=4, height=5)
        assert isinstance(shape, Rectangle)
        assert shape.area() == 20

    def test_unknown_kind(self):
        with pytest.raises(UnknownShapeError) as exc_info:
            create_shape("hexagon", side=1)

        assert exc_info.value.kind == "hexagon"
        assert exc_info.value.details["available"] == ["circle", "rectangle"]

    def test_missing_dimension(self):
        with pytest.raises(ShapeValidationError):
            create_shape("rectangle", width=4)

    def test_negative_dimension(self):
        with pytest.raises(ShapeValidationError) as exc_info:
            create_shape("circle", radius=-2)

        assert exc_info.value.error_code == "INVALID_SHAPE_DIMENSIONS"

    def test_non_string_kind(self):
        with pytest.raises(UnknownShapeError) as exc_info:
            create_shape(None, radius=1)

        assert exc_info.value.kind is None

    def test_unexpected_dimension(self):
        with pytest.raises(ShapeValidationError) as exc_info:
            create_shape("circle", radius=5, width=99)

        assert exc_info.value.error_code == "INVALID_SHAPE_DIMENSIONS"
