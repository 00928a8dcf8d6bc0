"""
GlyphFlow — ui/renderer.py
TCOD Renderer: the grid buffer text is printed into.
====================================================
Version:     0.2
Stack:       Python 3.11+ | tcod | numpy
Status:      Grid buffer for the print driver.
"""

from __future__ import annotations
from typing import Optional, Protocol

import numpy as np
import tcod

from engine.colors import RGBA


class GridBuffer(Protocol):
    """What the print driver needs from a destination grid."""
    width: int
    height: int

    def draw_cell(
        self,
        x: int,
        y: int,
        glyph: Optional[int],
        fg: Optional[RGBA],
        bg: Optional[RGBA],
    ) -> None: ...


class Renderer:
    """
    Manages a tcod console and exposes it as a GridBuffer.
    """
    def __init__(self, width: int, height: int, title: str = "GlyphFlow"):
        self.width = width
        self.height = height
        self.title = title
        self.root_console = tcod.console.Console(width, height, order="C")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_cell(
        self,
        x: int,
        y: int,
        glyph: Optional[int],
        fg: Optional[RGBA],
        bg: Optional[RGBA],
    ) -> None:
        """Writes one cell. None leaves that channel as it was; out of bounds is ignored."""
        if not self.in_bounds(x, y):
            return
        rgba = self.root_console.rgba
        if glyph is not None:
            rgba["ch"][y, x] = glyph
        if fg is not None:
            rgba["fg"][y, x] = RGBA(*fg)
        if bg is not None:
            rgba["bg"][y, x] = RGBA(*bg)

    def get_glyph(self, x: int, y: int) -> Optional[int]:
        if not self.in_bounds(x, y):
            return None
        return int(self.root_console.ch[y, x])

    def row_text(self, x: int, y: int, width: int) -> str:
        """Reads `width` cells of row `y` back as text; glyph 0 reads as '\\0'."""
        lo = max(0, x)
        hi = min(self.width, x + width)
        if not (0 <= y < self.height) or hi <= lo:
            return ""
        row = np.asarray(self.root_console.ch[y, lo:hi])
        return "".join(chr(int(g)) for g in row)

    def clear(self) -> None:
        """Clear the console with black."""
        self.root_console.clear()

    def present(self, context: tcod.context.Context) -> None:
        """Present the current console to the screen."""
        context.present(self.root_console)
