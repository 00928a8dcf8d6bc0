"""
GlyphFlow — engine/data_loader.py
JIT Data Loaders for TOML seed data powered by Pydantic.
=========================================================
Version:     0.2
Stack:       Python 3.11+ | Pydantic v2 | tomllib
Status:      Palette and layout preset loading.
"""

import tomllib
from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from engine.colors import ColorResolver, palette_resolver

# ================================================================================
# SCHEMAS
# ================================================================================

class PaletteDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    name: str
    colors: Dict[str, List[int]] = Field(default_factory=dict)

    @field_validator("colors")
    @classmethod
    def _check_channels(cls, colors: Dict[str, List[int]]) -> Dict[str, List[int]]:
        for key, value in colors.items():
            if len(value) not in (3, 4) or not all(0 <= c <= 255 for c in value):
                raise ValueError(f"color {key!r} must be 3 or 4 channels in 0..255")
        return colors

class LayoutDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    width: Optional[int] = None
    align: Literal["left", "center", "right"] = "left"
    fg: Optional[str] = None # color text or a palette name
    bg: Optional[str] = None
    palette: Optional[str] = None # palette id used to resolve markup names
    glyphs: Literal["unicode", "cp437"] = "unicode"
    markup: bool = True
    hyphenate: bool = True

# ================================================================================
# LOADERS & CACHE (JIT)
# ================================================================================

_PALETTE_CACHE: Dict[str, PaletteDef] = {}
_LAYOUT_CACHE: Dict[str, LayoutDef] = {}


DATA_DIR = Path(__file__).parent.parent / "data"

def get_palette_def(palette_id: str) -> PaletteDef:
    """JIT loads a named-color palette from TOML."""
    if palette_id in _PALETTE_CACHE:
        return _PALETTE_CACHE[palette_id]

    path = DATA_DIR / "palettes" / f"{palette_id}.toml"
    if not path.exists():
        raise FileNotFoundError(f"Palette definition not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    palette = PaletteDef(**data)
    _PALETTE_CACHE[palette_id] = palette
    return palette

def get_palette_resolver(palette_id: str) -> ColorResolver:
    """Resolver over a palette's named colors, falling back to literal color text."""
    return palette_resolver(get_palette_def(palette_id).colors)

def get_layout_def(layout_id: str) -> LayoutDef:
    """JIT loads a layout preset from TOML."""
    if layout_id in _LAYOUT_CACHE:
        return _LAYOUT_CACHE[layout_id]

    path = DATA_DIR / "layouts" / f"{layout_id}.toml"
    if not path.exists():
        raise FileNotFoundError(f"Layout definition not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    layout = LayoutDef(**data)
    _LAYOUT_CACHE[layout_id] = layout
    return layout

def get_layout_defs() -> Dict[str, LayoutDef]:
    """Pre-loads all layout presets."""
    path = DATA_DIR / "layouts"
    if not path.exists():
        return {}

    for file in path.glob("*.toml"):
        lid = file.stem
        if lid not in _LAYOUT_CACHE:
            get_layout_def(lid)

    return _LAYOUT_CACHE
