"""
GlyphFlow — ui/printer.py
Layout / Print Driver: writes wrapped, colored rows into a grid buffer.
======================================================================
Version:     0.2
Stack:       Python 3.11+ | Pydantic v2
Status:      Public text printing API.

Architecture notes
------------------
- LayoutConfig is immutable for one print call. Use `with_()` for variants.
- Padding cells are written with glyph 0 in the default fg/bg. They only show
  when a background is configured.
- Markup colors are resolved per code point, left to right, through
  `color_resolver`; None or unresolved names fall back to `fg`.
- Coordinates are never validated here. The grid clips.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from engine.codepage437 import to_glyph, unicode_glyph
from engine.colors import RGBA, WHITE, to_rgba
from engine.data_loader import get_layout_def, get_palette_resolver
from engine.markup import ColorStack, parse_line, parse_lines, plain_lines
from engine.text import Line
from engine.wrap import wrap_lines
from ui.renderer import GridBuffer

BLANK_GLYPH = 0


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class LayoutConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: Optional[int] = None
    align: TextAlign = TextAlign.LEFT
    fg: Optional[RGBA] = None
    bg: Optional[RGBA] = None
    glyph_of: Callable[[str], int] = Field(default=unicode_glyph)
    color_resolver: Callable[[str], Optional[RGBA]] = Field(default=to_rgba)
    markup: bool = True
    hyphenate: bool = True
    max_splits: Optional[int] = None

    def with_(self, **changes) -> "LayoutConfig":
        return type(self)(**{**dict(self), **changes})

    def resolve(self, token: Optional[str]) -> Optional[RGBA]:
        if token is None:
            return self.fg
        color = self.color_resolver(token)
        return self.fg if color is None else color


def load_layout_config(layout_id: str) -> LayoutConfig:
    """Builds a LayoutConfig from a TOML layout preset in data/layouts."""
    layout = get_layout_def(layout_id)
    resolver = get_palette_resolver(layout.palette) if layout.palette else to_rgba
    return LayoutConfig(
        width=layout.width,
        align=TextAlign(layout.align),
        fg=resolver(layout.fg) if layout.fg else None,
        bg=resolver(layout.bg) if layout.bg else None,
        glyph_of=to_glyph if layout.glyphs == "cp437" else unicode_glyph,
        color_resolver=resolver,
        markup=layout.markup,
        hyphenate=layout.hyphenate,
    )


def print_line(grid: GridBuffer, wrapped: Line, x: int, y: int, config: LayoutConfig) -> int:
    """Draws one row with alignment and padding. Returns the cells written."""
    line_len = wrapped.char_len()
    width = line_len if config.width is None else config.width
    self_len = max(0, min(width, line_len))
    spaces = max(0, width - self_len)

    if config.align == TextAlign.RIGHT:
        cx, pre, post = x - width + 1, spaces, 0
    elif config.align == TextAlign.CENTER:
        half = spaces // 2
        cx, pre, post = x - half - self_len // 2, half, spaces - half
    else:
        cx, pre, post = x, 0, spaces

    for _ in range(pre):
        grid.draw_cell(cx, y, BLANK_GLYPH, config.fg, config.bg)
        cx += 1

    drawn = 0
    for token, ch in wrapped.chars():
        if drawn >= self_len:
            break
        grid.draw_cell(cx, y, config.glyph_of(ch), config.resolve(token), config.bg)
        cx += 1
        drawn += 1

    for _ in range(post):
        grid.draw_cell(cx, y, BLANK_GLYPH, config.fg, config.bg)
        cx += 1

    return pre + drawn + post


def print_wrapped(
    grid: GridBuffer, lines: Iterable[Line], x: int, y: int, config: LayoutConfig
) -> Tuple[int, int]:
    """Draws rows top to bottom. Returns (widest row, row count)."""
    widest = 0
    height = 0
    for line in lines:
        widest = max(widest, print_line(grid, line, x, y + height, config))
        height += 1
    return widest, height


class Printer:
    """
    Public text API bound to one grid and one LayoutConfig.

        printer = colored_printer(renderer).with_(width=15, bg=RGBA(0, 64, 255))
        printer.wrap(2, 10, "Inside a #[396]call to wrap#[] ...")
    """

    def __init__(self, grid: GridBuffer, config: Optional[LayoutConfig] = None):
        self.grid = grid
        self.config = config if config is not None else LayoutConfig()

    def with_(self, **changes) -> "Printer":
        return Printer(self.grid, self.config.with_(**changes))

    def _lines(self, text: str):
        return parse_lines(text) if self.config.markup else plain_lines(text)

    def print(self, x: int, y: int, text: str) -> int:
        """Draws `text` on one row. Returns the width drawn."""
        if self.config.markup:
            line = parse_line(text, ColorStack())
        else:
            line = Line.of(text)
        return print_line(self.grid, line, x, y, self.config)

    def print_lines(self, x: int, y: int, text: str) -> Tuple[int, int]:
        """Draws each '\\n'-separated line on its own row without wrapping."""
        return print_wrapped(self.grid, self._lines(text), x, y, self.config)

    def wrap(self, x: int, y: int, text: str) -> Tuple[int, int]:
        """Word-wraps to the configured width, or to the grid's right edge."""
        limit = self.config.width
        if limit is None:
            limit = self.grid.width - x
        rows = wrap_lines(
            self._lines(text),
            limit,
            hyphenate=self.config.hyphenate,
            max_splits=self.config.max_splits,
        )
        return print_wrapped(self.grid, rows, x, y, self.config)


def plain_printer(grid: GridBuffer) -> Printer:
    """Markup off, white text, Unicode glyph ids."""
    return Printer(grid, LayoutConfig(fg=WHITE, markup=False))


def colored_printer(grid: GridBuffer) -> Printer:
    """Markup on, CP437 glyph ids, literal color text resolved with to_rgba."""
    return Printer(grid, LayoutConfig(glyph_of=to_glyph, color_resolver=to_rgba))
