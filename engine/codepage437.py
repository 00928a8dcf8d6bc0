"""
GlyphFlow — engine/codepage437.py
Glyph mappers: character -> glyph id used by the grid buffer.
=============================================================
Version:     0.2
Stack:       Python 3.11+ | tcod
Status:      Core.

Architecture notes
------------------
- `unicode_glyph` passes code points through unchanged.
- `to_glyph` maps through tcod's CP437 charmap. Characters outside it pass
  through as their code point, and glyph 0 reads back as a space.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from tcod.tileset import CHARMAP_CP437

GlyphMapper = Callable[[str], int]

# Glyph 0 is the blank sentinel, so it never appears as a mapping target.
_TO_GLYPH: Dict[int, int] = {
    codepoint: index for index, codepoint in enumerate(CHARMAP_CP437) if index
}


def unicode_glyph(ch: str) -> int:
    """Default mapper: the glyph id is the Unicode scalar value."""
    return ord(ch)


def to_glyph(ch: str) -> int:
    """Maps a character to its CP437 index. Unknown characters pass through as ord(ch)."""
    codepoint = ord(ch)
    return _TO_GLYPH.get(codepoint, codepoint)


def from_glyph(glyph: int) -> str:
    if glyph == 0:
        return " "
    if 0 < glyph < len(CHARMAP_CP437):
        return chr(CHARMAP_CP437[glyph])
    try:
        return chr(glyph)
    except (ValueError, OverflowError):
        return " "


def string_to_glyphs(text: str) -> List[int]:
    return [to_glyph(ch) for ch in text]
