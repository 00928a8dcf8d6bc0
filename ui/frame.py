"""
GlyphFlow — ui/frame.py
Frames: bordered boxes with an optional fill and title.
=======================================================
Version:     0.2
Stack:       Python 3.11+ | Pydantic v2
Status:      Companion to the print driver.

Architecture notes
------------------
- Border glyphs are given as Unicode box-drawing characters and mapped
  through `glyph_of`, so the default CP437 mapper yields tileset ids.
- The COLOR border writes glyph 0 and is only visible through fg/bg.
- The fill runs first, then the border, then the title on the top row.
- The title goes through `print_line`. LEFT starts two cells in, RIGHT ends
  two cells before the right edge, CENTER centers on the frame's middle.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from engine.codepage437 import to_glyph
from engine.colors import RGBA, WHITE
from engine.text import Line
from ui.printer import LayoutConfig, TextAlign, print_line
from ui.renderer import GridBuffer


class BorderGlyphs(NamedTuple):
    left: int
    right: int
    top: int
    bottom: int
    top_left: int
    top_right: int
    bottom_left: int
    bottom_right: int


_BORDER_CHARS = {
    "single": "││──┌┐└┘",
    "double": "║║══╔╗╚╝",
}


class BorderType(str, Enum):
    COLOR = "color"
    SINGLE = "single"
    DOUBLE = "double"

    def glyphs(self, glyph_of: Callable[[str], int]) -> BorderGlyphs:
        chars = _BORDER_CHARS.get(self.value)
        if chars is None:
            return BorderGlyphs(*([0] * 8))
        return BorderGlyphs(*(glyph_of(ch) for ch in chars))


def fill_area(
    grid: GridBuffer,
    x: int,
    y: int,
    width: int,
    height: int,
    glyph: Optional[int] = None,
    fg: Optional[RGBA] = None,
    bg: Optional[RGBA] = None,
) -> None:
    """Writes every cell of the rectangle. None channels are left as they were."""
    for cy in range(y, y + height):
        for cx in range(x, x + width):
            grid.draw_cell(cx, cy, glyph, fg, bg)


class Frame(BaseModel):
    """
    A bordered box drawn onto a grid.

        Frame(border=BorderType.DOUBLE, fill_bg=RGBA(0, 0, 64), title="Log")
            .draw(renderer, 0, 0, 30, 10)
    """
    model_config = ConfigDict(frozen=True)

    border: BorderType = BorderType.SINGLE
    fg: Optional[RGBA] = None
    bg: Optional[RGBA] = None
    fill_glyph: Optional[str] = None
    fill_fg: Optional[RGBA] = None
    fill_bg: Optional[RGBA] = None
    title: Optional[str] = None
    title_fg: Optional[RGBA] = None
    title_align: TextAlign = TextAlign.CENTER
    glyph_of: Callable[[str], int] = Field(default=to_glyph)

    def with_(self, **changes) -> "Frame":
        return type(self)(**{**dict(self), **changes})

    def _has_fill(self) -> bool:
        return any(v is not None for v in (self.fill_glyph, self.fill_fg, self.fill_bg))

    def _title_anchor(self, x: int, width: int) -> int:
        if self.title_align == TextAlign.LEFT:
            return x + 2
        if self.title_align == TextAlign.RIGHT:
            return x + width - 3
        return x + width // 2

    def draw(self, grid: GridBuffer, x: int, y: int, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return

        if self._has_fill():
            glyph = None if self.fill_glyph is None else self.glyph_of(self.fill_glyph)
            fill_area(grid, x, y, width, height, glyph, self.fill_fg, self.fill_bg)

        g = self.border.glyphs(self.glyph_of)
        right = x + width - 1
        bottom = y + height - 1

        for cy in range(y, bottom + 1):
            grid.draw_cell(x, cy, g.left, self.fg, self.bg)
            grid.draw_cell(right, cy, g.right, self.fg, self.bg)
        for cx in range(x, right + 1):
            grid.draw_cell(cx, y, g.top, self.fg, self.bg)
            grid.draw_cell(cx, bottom, g.bottom, self.fg, self.bg)

        grid.draw_cell(x, y, g.top_left, self.fg, self.bg)
        grid.draw_cell(right, y, g.top_right, self.fg, self.bg)
        grid.draw_cell(x, bottom, g.bottom_left, self.fg, self.bg)
        grid.draw_cell(right, bottom, g.bottom_right, self.fg, self.bg)

        if self.title:
            config = LayoutConfig(
                align=self.title_align,
                fg=self.title_fg or WHITE,
                glyph_of=self.glyph_of,
                markup=False,
            )
            print_line(grid, Line.of(self.title), self._title_anchor(x, width), y, config)
