import pytest

from patternkit.shapes import (
    Circle,
    ColoredShape,
    Shape,
    Square,
    TransparentShape,
    main,
)


def test_circle_render():
    assert Circle(radius=10).render() == "Circle of radius 10.000000"


def test_square_render_uses_six_decimals():
    text = Square(side=2.5).render()
    assert text.startswith("Square with side ")
    assert text.endswith("2.500000")


def test_colored_shape_wraps_inner_render():
    inner = Square(side=3)
    colored = ColoredShape(inner, "Blue")
    assert colored.render() == inner.render() + " has color Blue"


def test_decorators_compose():
    inner = Circle(radius=1)
    colored = ColoredShape(inner, "Green")
    transparent = TransparentShape(colored, 50)
    text = transparent.render()
    assert text.startswith(colored.render())
    assert text.endswith(" has transparency 50.000000%")


def test_decorator_order_matters():
    base = Circle(radius=4)
    a = TransparentShape(ColoredShape(base, "Red"), 20).render()
    b = ColoredShape(TransparentShape(base, 20), "Red").render()
    assert sorted(a) == sorted(b)
    assert a != b


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == Circle(radius=10).render()
    assert lines[0] == ColoredShape(Square(side=10), "Red").render()
    assert lines[2] == lines[0] + " has transparency 10.000000%"