"""Shapes that render to text, extended through decorating wrappers."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _single(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Shape(ABC):
    """Anything that can describe itself as text."""

    @abstractmethod
    def render(self) -> str:
        """Return a text description of the shape."""


@dataclass
class Circle(Shape):
    radius: float = 0.0

    def render(self) -> str:
        return f"Circle of radius {_single(self.radius):f}"


@dataclass
class Square(Shape):
    side: float = 0.0

    def render(self) -> str:
        return f"Square with side {_single(self.side):f}"


@dataclass
class ColoredShape(Shape):
    """Adds a colour to any shape."""

    shape: Shape
    color: str

    def render(self) -> str:
        return f"{self.shape.render()} has color {self.color}"


@dataclass
class TransparentShape(Shape):
    """Adds a transparency percentage to any shape."""

    shape: Shape
    transparency: float

    def render(self) -> str:
        return f"{self.shape.render()} has transparency {_single(self.transparency):f}%"


def main(argv: list[str] | None = None) -> int:
    """Render a plain circle and a decorated square."""
    circle = Circle()
    circle.radius = 10
    colored = ColoredShape(Square(side=10), "Red")
    print(colored.render())
    print(circle.render())
    transparent = TransparentShape(colored, 10)
    print(transparent.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())