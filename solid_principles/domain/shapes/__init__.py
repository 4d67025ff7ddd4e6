"""Shape examples for the open-closed and Liskov substitution principles."""

from .resizable import AreaShape, ResizableRectangle, ResizableSquare
from .shape import Rectangle, Shape, Square, total_area

__all__ = [
    "Shape",
    "Square",
    "Rectangle",
    "total_area",
    "AreaShape",
    "ResizableRectangle",
    "ResizableSquare",
]
