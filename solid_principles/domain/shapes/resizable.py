"""Resizable shapes that can substitute for their common base type.

``ResizableSquare`` does not inherit from ``ResizableRectangle``: a square
that honoured ``set_width`` independently of ``set_height`` would stop being
a square, so both sit side by side under ``AreaShape`` instead.
"""

from abc import ABC, abstractmethod

from solid_principles.domain.core.common_types import Number


class AreaShape(ABC):
    """Shape exposing a read-only area."""

    @property
    @abstractmethod
    def area(self) -> Number:
        """Current area."""


class ResizableRectangle(AreaShape):
    def __init__(self, width: Number, height: Number):
        self._width = width
        self._height = height

    def set_width(self, width: Number) -> None:
        self._width = width

    def set_height(self, height: Number) -> None:
        self._height = height

    @property
    def area(self) -> Number:
        return self._width * self._height


class ResizableSquare(AreaShape):
    def __init__(self, size: Number):
        self._size = size

    def set_size(self, size: Number) -> None:
        self._size = size

    @property
    def area(self) -> Number:
        return self._size ** 2
