"""
GlyphFlow — engine/colors.py
Color values, markup color tokens, and the default color resolvers.
===================================================================
Version:     0.2
Stack:       Python 3.11+ | stdlib
Status:      Core.

Architecture notes
------------------
- Markup carries colors as raw text (ColorToken). Nothing is resolved until
  print time, through a resolver injected by the caller.
- RGBA is a plain tuple so it can be handed straight to tcod.
- Strict parsers raise ColorParseError. Resolvers never raise: an
  unresolvable name yields None and the printer falls back to its default fg.

Accepted color text
-------------------
  hex   "#F00", "f00f", "#00ff00", "80808080"  (leading '#' optional,
        anything after the first space is ignored)
  rgb   "0,128,255", "rgb(10,20,30)", "(255,150,200,25)", "rgba(1,2,3)"
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, NamedTuple, Optional


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @property
    def rgb(self) -> tuple:
        return (self.r, self.g, self.b)


WHITE = RGBA(255, 255, 255)
BLACK = RGBA(0, 0, 0)

# None means "inherit the caller's default foreground".
ColorToken = Optional[str]
ColorResolver = Callable[[str], Optional[RGBA]]


class ColorParseError(ValueError):
    """Raised by the strict parsers. `reason` is a short machine-readable code."""

    NON_HEX_DIGIT = "non_hex_digit"
    NON_ASCII_DIGIT = "non_ascii_digit"
    WRONG_HEX_LEN = "wrong_hex_len"
    WRONG_RGB_LEN = "wrong_rgb_len"

    def __init__(self, reason: str, text: str):
        super().__init__(f"Cannot parse color {text!r}: {reason}")
        self.reason = reason
        self.text = text


_HEX_DIGITS = set("0123456789abcdefABCDEF")


def _from_floats(r: float, g: float, b: float, a: float) -> RGBA:
    return RGBA(*(int(round(c * 255.0)) for c in (r, g, b, a)))


def parse_color_hex(text: str) -> RGBA:
    """Parses RGB, RGBA, RRGGBB or RRGGBBAA hex, with or without '#'."""
    no_hash = text[1:] if text.startswith("#") else text
    base = no_hash.split(" ", 1)[0]

    if not all(ch in _HEX_DIGITS for ch in base):
        raise ColorParseError(ColorParseError.NON_HEX_DIGIT, text)

    digits = [int(ch, 16) for ch in base]
    if len(digits) in (3, 4):
        channels = [d / 15.0 for d in digits]
    elif len(digits) in (6, 8):
        channels = [
            (digits[i] * 16 + digits[i + 1]) / 255.0
            for i in range(0, len(digits), 2)
        ]
    else:
        raise ColorParseError(ColorParseError.WRONG_HEX_LEN, text)

    if len(channels) == 3:
        channels.append(1.0)
    return _from_floats(*channels)


def parse_color_rgb(text: str) -> RGBA:
    """
    Parses comma separated R,G,B[,A] decimal components.

    The body may be wrapped as 'rgb(...)', 'rgba(...)' or '(...)'.
    """
    start = text.split("(", 1)[1] if "(" in text else text
    body = start.split(")", 1)[0]

    parts = [p.strip() for p in body.split(",")]
    if len(parts) not in (3, 4):
        raise ColorParseError(ColorParseError.WRONG_RGB_LEN, text)

    nums: List[int] = []
    for part in parts:
        if not part or not all("0" <= ch <= "9" for ch in part):
            raise ColorParseError(ColorParseError.NON_ASCII_DIGIT, text)
        value = int(part)
        if value > 255:
            raise ColorParseError(ColorParseError.NON_ASCII_DIGIT, text)
        nums.append(value)

    return RGBA(*nums)


def parse_color(name: str) -> RGBA:
    """Parses either hex or rgb(a) color text. Raises ColorParseError."""
    name = name.strip().lower()
    if not name.startswith("#") and (
        name.startswith(("(", "rgb(", "rgba(")) or "," in name
    ):
        return parse_color_rgb(name)
    return parse_color_hex(name)


def to_rgba(name: str) -> Optional[RGBA]:
    """Lenient resolver: returns None when `name` is not a parseable color."""
    try:
        return parse_color(name)
    except ColorParseError:
        return None


def palette_resolver(colors: Dict[str, Iterable[int]]) -> ColorResolver:
    """
    Builds a resolver that looks up named colors first (case-insensitive)
    and falls back to `to_rgba` for literal color text.
    """
    table = {key.lower(): RGBA(*value) for key, value in colors.items()}

    def resolve(name: str) -> Optional[RGBA]:
        found = table.get(name.strip().lower())
        if found is not None:
            return found
        return to_rgba(name)

    return resolve
