"""Open/Closed Principle example.

A class should be open for extension but closed for modification.
"""
import logging
import math
import sys
from abc import ABC, abstractmethod

from solid_principles.utils.number_format import format_number


logger = logging.getLogger(__name__)


# Violation: every new shape means another branch here.

class AreaCalculator:
    """Computes areas by dispatching on a shape name."""

    def calculate_area(self, shape: str, dimension1: float, dimension2: float = 0) -> float:
        """
        Calculate the area of a named shape.

        Args:
            shape: Shape tag ("Circle" or "Rectangle")
            dimension1: Radius for a circle, length for a rectangle
            dimension2: Width for a rectangle

        Returns:
            Area, or 0 if the shape is unknown
        """
        if shape == "Circle":
            return math.pi * dimension1 ** 2
        elif shape == "Rectangle":
            return dimension1 * dimension2
        else:
            logger.debug(f"No area formula for shape tag {shape!r}")
            print("Unknown shape!", file=sys.stderr)
            return 0


# Corrected: new shapes extend Shape, nothing else changes.

class Shape(ABC):
    """Base class for anything with an area."""

    @abstractmethod
    def calculate_area(self) -> float:
        """
        Calculate the area of the shape.

        Returns:
            Area in square units
        """
        pass


class Circle(Shape):
    def __init__(self, radius: float):
        if radius < 0:
            raise ValueError("radius must be non-negative")
        self._radius = radius

    def calculate_area(self) -> float:
        return math.pi * self._radius ** 2


class Rectangle(Shape):
    def __init__(self, length: float, width: float):
        if length < 0 or width < 0:
            raise ValueError("length and width must be non-negative")
        self._length = length
        self._width = width

    def calculate_area(self) -> float:
        return self._length * self._width


def print_area(shape: Shape) -> None:
    """
    Print the area of any shape.

    Args:
        shape: Shape instance
    """
    print(f"Area: {format_number(shape.calculate_area())}")


def violation_main() -> None:
    """Run the tag-dispatching calculator."""
    calc = AreaCalculator()
    print(f"Area of Circle: {format_number(calc.calculate_area('Circle', 5))}")
    print(f"Area of Rectangle: {format_number(calc.calculate_area('Rectangle', 5, 10))}")


def main() -> None:
    """Print the area of a circle and a rectangle through the same routine."""
    circle = Circle(5)
    rectangle = Rectangle(5, 10)

    print_area(circle)
    print_area(rectangle)


if __name__ == "__main__":
    main()
