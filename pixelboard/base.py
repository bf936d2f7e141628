"""Abstract drawing surface and the value types shared by its implementations."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import NamedTuple


class ColorIdx(enum.IntEnum):
    """Indices of the colours every drawing surface provides."""

    BLACK = 0
    WHITE = 1
    GREY = 2
    DARK_GREY = 3
    BRIGHT_RED = 4
    RED = 5
    DARK_RED = 6
    BRIGHT_ORANGE = 7
    ORANGE = 8
    DARK_ORANGE = 9
    BRIGHT_YELLOW = 10
    YELLOW = 11
    DARK_YELLOW = 12
    BRIGHT_GREEN = 13
    GREEN = 14
    DARK_GREEN = 15
    BRIGHT_BLUE = 16
    BLUE = 17
    DARK_BLUE = 18
    BRIGHT_PURPLE = 19
    PURPLE = 20
    DARK_PURPLE = 21


class BoundsStatus(enum.IntFlag):
    """Which coordinates of a point fall outside the drawing area."""

    OK = 0
    X_OUT = 1
    Y_OUT = 2
    BOTH_OUT = X_OUT | Y_OUT


class Point(NamedTuple):
    x: int = 0
    y: int = 0


class Size(NamedTuple):
    w: int = 0
    h: int = 0


class GraphicsBase(ABC):
    """A rectangular surface that can be drawn on with indexed colours."""

    @property
    def num_colors(self) -> int:
        return len(ColorIdx)

    @property
    @abstractmethod
    def width(self) -> int:
        """Width of the drawing area in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height of the drawing area in pixels."""

    @abstractmethod
    def is_in_bounds(self, p: Point) -> BoundsStatus:
        """Report whether a point lies inside the drawing area."""

    @abstractmethod
    def is_valid_color(self, idx: int) -> bool:
        """Report whether an index names a known colour."""

    @abstractmethod
    def color_value(self, idx: int) -> int:
        """Return the packed 0xRRGGBB value of a colour."""

    @abstractmethod
    def color_name(self, idx: int) -> str:
        """Return the name of a colour."""

    @abstractmethod
    def draw_pixel(self, p: Point, color: int) -> bool:
        """Set a single pixel."""

    @abstractmethod
    def draw_line(self, start: Point, end: Point, color: int) -> bool:
        """Draw a straight line between two points."""

    @abstractmethod
    def draw_rect(self, top_left: Point, size: Size, color: int, fill: bool) -> bool:
        """Draw a rectangle, filled or as an outline."""

    @abstractmethod
    def draw_text(self, p: Point, text: str, color: int) -> bool:
        """Draw text with its baseline starting at a point."""

    @abstractmethod
    def refresh(self) -> None:
        """Clear the surface and request a redraw."""