import pytest
from pydantic import ValidationError

from engine.colors import RGBA
from engine.data_loader import (
    PaletteDef,
    get_layout_def,
    get_layout_defs,
    get_palette_def,
    get_palette_resolver,
)
from engine.codepage437 import to_glyph, unicode_glyph
from ui.printer import Printer, TextAlign, load_layout_config
from ui.renderer import Renderer

def test_load_default_palette():
    palette = get_palette_def("default")
    assert palette.id == "default"
    assert palette.colors["red"] == [255, 92, 92]

def test_palette_resolver_falls_back_to_literal_colors():
    resolve = get_palette_resolver("default")
    assert resolve("red") == RGBA(255, 92, 92)
    assert resolve("0,0,255") == RGBA(0, 0, 255)
    assert resolve("nonsense") is None

def test_missing_palette_raises():
    with pytest.raises(FileNotFoundError):
        get_palette_def("does_not_exist")

def test_palette_rejects_bad_channels():
    with pytest.raises(ValidationError):
        PaletteDef(id="bad", name="Bad", colors={"x": [1, 2]})
    with pytest.raises(ValidationError):
        PaletteDef(id="bad", name="Bad", colors={"x": [1, 2, 300]})

def test_load_layout_def():
    dialog = get_layout_def("dialog")
    assert dialog.width == 30
    assert dialog.palette == "default"
    assert dialog.glyphs == "cp437"

def test_layout_defs_preload():
    layouts = get_layout_defs()
    assert {"dialog", "caption", "plain"} <= set(layouts)

def test_missing_layout_raises():
    with pytest.raises(FileNotFoundError):
        get_layout_def("does_not_exist")

def test_load_layout_config_dialog():
    config = load_layout_config("dialog")
    assert config.width == 30
    assert config.align == TextAlign.LEFT
    assert config.fg == RGBA(255, 255, 255)
    assert config.bg == RGBA(0, 64, 255)
    assert config.glyph_of is to_glyph
    assert config.color_resolver("red") == RGBA(255, 92, 92)

def test_load_layout_config_plain():
    config = load_layout_config("plain")
    assert config.markup is False
    assert config.hyphenate is False
    assert config.fg == RGBA(255, 255, 255)
    assert config.glyph_of is unicode_glyph

def test_layout_preset_drives_printer():
    r = Renderer(width=40, height=5)
    printer = Printer(r, load_layout_config("caption"))
    assert printer.print(20, 0, "#[red]Hi#[]!") == 3
    assert r.row_text(19, 0, 3) == "Hi!"
    assert tuple(r.root_console.rgba["fg"][0, 19]) == (255, 92, 92, 255)
    assert tuple(r.root_console.rgba["fg"][0, 21]) == (255, 255, 0, 255)
