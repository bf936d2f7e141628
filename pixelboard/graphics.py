"""A window with a fixed colour palette and simple drawing primitives."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from pixelboard.base import BoundsStatus, ColorIdx, GraphicsBase, Point, Size  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = DEFAULT_WIDTH * 10 // 16
DEFAULT_NAME = "Graphics"

_FONT_SIZE = 16
_SWATCH_GAP = 50
_TEXT_OFFSET = 10
_BOARD_OFFSET = 200
_BOARD_CELL = 50
_BOARD_CELLS = 8

# Named colours with their 8-bit channel values.
_PALETTE = (
    (ColorIdx.BLACK, "black", (0, 0, 0)),
    (ColorIdx.WHITE, "white", (255, 255, 255)),
    (ColorIdx.GREY, "light grey", (211, 211, 211)),
    (ColorIdx.DARK_GREY, "dim grey", (105, 105, 105)),
    (ColorIdx.BRIGHT_RED, "red1", (255, 0, 0)),
    (ColorIdx.RED, "red4", (139, 0, 0)),
    (ColorIdx.DARK_RED, "red4", (139, 0, 0)),
    (ColorIdx.BRIGHT_ORANGE, "orange1", (255, 165, 0)),
    (ColorIdx.ORANGE, "orange3", (205, 133, 0)),
    (ColorIdx.DARK_ORANGE, "orange4", (139, 90, 0)),
    (ColorIdx.BRIGHT_YELLOW, "yellow1", (255, 255, 0)),
    (ColorIdx.YELLOW, "yellow4", (139, 139, 0)),
    (ColorIdx.DARK_YELLOW, "yellow4", (139, 139, 0)),
    (ColorIdx.BRIGHT_GREEN, "green1", (0, 255, 0)),
    (ColorIdx.GREEN, "green4", (0, 139, 0)),
    (ColorIdx.DARK_GREEN, "green4", (0, 139, 0)),
    (ColorIdx.BRIGHT_BLUE, "blue1", (0, 0, 255)),
    (ColorIdx.BLUE, "blue4", (0, 0, 139)),
    (ColorIdx.DARK_BLUE, "blue4", (0, 0, 139)),
    (ColorIdx.BRIGHT_PURPLE, "purple1", (155, 48, 255)),
    (ColorIdx.PURPLE, "purple3", (125, 38, 205)),
    (ColorIdx.DARK_PURPLE, "purple4", (85, 26, 139)),
)

# Adjustments applied to the 16-bit channels to set the dark shades apart.
_TUNING = {
    ColorIdx.DARK_RED: (66, 0, 0),
    ColorIdx.DARK_YELLOW: (66, 66, 0),
    ColorIdx.DARK_GREEN: (0, 66, 0),
    ColorIdx.DARK_BLUE: (0, 0, 66),
}

_BRIGHT = frozenset(
    {
        ColorIdx.WHITE,
        ColorIdx.GREY,
        ColorIdx.BRIGHT_YELLOW,
        ColorIdx.YELLOW,
        ColorIdx.BRIGHT_GREEN,
        ColorIdx.GREEN,
    }
)


def _pack(r: int, g: int, b: int) -> int:
    return (((r & 0xFF) << 16) + ((g & 0xFF) << 8) + (b & 0xFF)) & 0xFFFFFF


def _unpack(value: int) -> tuple[int, int, int]:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


@dataclass(frozen=True)
class ColorData:
    """A palette entry: its name, 16-bit channels and packed value."""

    name: str
    rgb: tuple[int, int, int]
    value: int
    bright: bool = False


class Graphics(GraphicsBase):
    """A window that draws with the indexed palette."""

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, name=DEFAULT_NAME):
        self._width = width
        self._height = height
        self._name = name
        self._background = ColorIdx.BLACK
        self._foreground = ColorIdx.WHITE
        self._snapshot: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._colors = self._init_colors()
        try:
            pygame.display.init()
            self._surface: pygame.Surface | None = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError("Unable to open the display") from exc
        pygame.display.set_caption(name)
        self._surface.fill(self._rgb(self._background))

    def _init_colors(self) -> dict[ColorIdx, ColorData]:
        colors = {}
        for idx, name, channels in _PALETTE:
            tuning = _TUNING.get(idx, (0, 0, 0))
            rgb16 = tuple((c * 257 - t) % 0x10000 for c, t in zip(channels, tuning))
            colors[idx] = ColorData(
                name=name,
                rgb=rgb16,
                value=_pack(*rgb16),
                bright=self.is_bright_color(idx),
            )
        if not colors:
            raise RuntimeError("there were color initialization errors")
        return colors

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def name(self) -> str:
        return self._name

    @property
    def surface(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("graphics has been closed")
        return self._surface

    @property
    def has_snapshot(self) -> bool:
        return self._snapshot is not None

    def is_in_bounds(self, p) -> BoundsStatus:
        status = BoundsStatus.OK
        if p[0] < 0 or p[0] > self._width:
            status |= BoundsStatus.X_OUT
        if p[1] < 0 or p[1] > self._height:
            status |= BoundsStatus.Y_OUT
        return status

    def is_valid_color(self, idx) -> bool:
        return 0 <= int(idx) < len(ColorIdx)

    def is_bright_color(self, idx) -> bool:
        return idx in _BRIGHT

    def color_value(self, idx) -> int:
        return self._colors[ColorIdx(idx)].value

    def color_name(self, idx) -> str:
        return self._colors[ColorIdx(idx)].name

    def _rgb(self, idx) -> tuple[int, int, int]:
        return _unpack(self.color_value(idx))

    def _all_in_bounds(self, *points) -> bool:
        if all(self.is_in_bounds(p) == BoundsStatus.OK for p in points):
            return True
        logger.warning("Out of bounds")
        return False

    def draw_pixel(self, p, color) -> bool:
        if not self._all_in_bounds(p):
            return False
        self.surface.set_at((p[0], p[1]), self._rgb(color))
        return True

    def draw_line(self, start, end, color) -> bool:
        if not self._all_in_bounds(start, end):
            return False
        pygame.draw.line(self.surface, self._rgb(color), tuple(start), tuple(end))
        return True

    def draw_rect(self, top_left, size, color, fill) -> bool:
        x, y = top_left
        w, h = size
        if not self._all_in_bounds(top_left, Point(x + w, y + h)):
            return False
        if fill:
            pygame.draw.rect(self.surface, self._rgb(color), pygame.Rect(x, y, w, h))
        else:
            # An outline spans one pixel past the width and height.
            pygame.draw.rect(self.surface, self._rgb(color), pygame.Rect(x, y, w + 1, h + 1), 1)
        return True

    def draw_text(self, p, text, color) -> bool:
        if not self._all_in_bounds(p):
            return False
        font = self._get_font()
        rendered = font.render(text, False, self._rgb(color))
        self.surface.blit(rendered, (p[0], p[1] - font.get_ascent()))
        return True

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font

    def refresh(self) -> None:
        self.surface.fill(self._rgb(self._background))
        pygame.event.post(pygame.event.Event(pygame.VIDEOEXPOSE))

    def _draw_swatches(self, y: int, fill: bool) -> int | None:
        """Draw one square per colour, wrapping rows; None when out of room."""
        gap = _SWATCH_GAP
        x = 0
        for idx in self._colors:
            status = self.is_in_bounds(Point(x + gap, y + gap))
            if status == BoundsStatus.X_OUT:
                y += gap
                x = 0
            elif status != BoundsStatus.OK:
                return None
            self.draw_rect(Point(x, y), Size(gap, gap), idx, fill)
            text_color = ColorIdx.BLACK if fill and self.is_bright_color(idx) else ColorIdx.WHITE
            self.draw_text(Point(x + _TEXT_OFFSET, y + _TEXT_OFFSET), str(int(idx)), text_color)
            x += gap
        return y

    def demo(self) -> None:
        """Draw the palette as filled and outlined squares, then a checkerboard."""
        y = self._draw_swatches(0, True)
        if y is None:
            return
        y = self._draw_swatches(y + _SWATCH_GAP, False)
        if y is None:
            return
        cell = Size(_BOARD_CELL, _BOARD_CELL)
        for row in range(_BOARD_CELLS):
            for col in range(_BOARD_CELLS):
                top_left = Point(col * cell.w + _BOARD_OFFSET, row * cell.h + _BOARD_OFFSET)
                self.draw_rect(top_left, cell, ColorIdx.WHITE, (row + col) % 2 == 0)

    def take_snapshot(self) -> None:
        self._snapshot = self.surface.copy()

    def drop_snapshot(self) -> None:
        self._snapshot = None

    def show_snapshot(self) -> None:
        if self._snapshot is None:
            raise RuntimeError("no snapshot to show")
        self.surface.blit(self._snapshot, (0, 0))

    def close(self) -> None:
        self._snapshot = None
        self._font = None
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, *args) -> None:
        self.close()