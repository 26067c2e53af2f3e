"""Primitive drawing shapes and their colours."""

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Drawing colours, valued by their hexadecimal RGB notation."""

    BLACK = "#000000"
    RED = "#FF0000"
    GREEN = "#00FF00"
    BLUE = "#0000FF"


def color_to_hex(color):
    """Return the ``#RRGGBB`` notation of ``color``."""
    return Color(color).value


@dataclass
class Shape:
    """Attributes shared by every shape."""

    stroke_color: Color = Color.BLACK
    fill_color: Color = Color.BLACK
    stroke_width: float = 0.0


@dataclass
class Point(Shape):
    """A circle of radius ``r`` centred on ``(x, y)``."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0


@dataclass
class Line(Shape):
    """A straight segment from ``(x0, y0)`` to ``(x1, y1)``."""

    x0: float = 0.0
    y0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0


@dataclass
class Text(Shape):
    """A string placed at ``(x, y)``."""

    x: float = 0.0
    y: float = 0.0
    font_size: int = 12
    text: str = ""