import pytest

from pocbox.tdd.shapes import Circle, Rectangle, Shape, Triangle


def test_perimeter():
    assert Rectangle(10.5, 10.0).perimeter() == 41.0


@pytest.mark.parametrize(
    "shape, has_area",
    [
        pytest.param(Rectangle(width=5.0, height=4.5), 22.50, id="Rectangle"),
        pytest.param(Circle(radius=10), 314.1592653589793, id="Circle"),
        pytest.param(Triangle(base=12, height=6), 36.0, id="Triangle"),
    ],
)
def test_area(shape, has_area):
    assert shape.area() == has_area


def test_shape_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Shape()


def test_rectangle_area_and_perimeter_are_symmetric():
    wide = Rectangle(3.0, 2.0)
    tall = Rectangle(2.0, 3.0)
    assert wide.area() == tall.area() == 6.0
    assert wide.perimeter() == tall.perimeter() == 10.0