"""
GlyphFlow — engine/text.py
Span / Line model: colored runs of text as ranges over an immutable source.
===========================================================================
Version:     0.2
Stack:       Python 3.11+ | dataclasses
Status:      Core.

Architecture notes
------------------
- A Span is (source, start, end, color). Splitting a span only creates new
  ranges over the same source string; substrings are materialized at print
  time through `.text`.
- All lengths and indices are in code points (Python str indices), never
  bytes or grapheme clusters.
- Lines are never mutated. Every operation returns new Lines.
- A hyphen inserted by `hyphenate_at` is a synthetic one-character Span whose
  source is the literal "-".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from engine.colors import ColorToken

HYPHEN = "-"
BREAK_CHAR = " "


@dataclass(frozen=True)
class Span:
    """A run of text sharing one color token."""
    source: str
    start: int
    end: int
    color: ColorToken = None

    @classmethod
    def of(cls, text: str, color: ColorToken = None) -> "Span":
        return cls(text, 0, len(text), color)

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def char_len(self) -> int:
        return self.end - self.start

    def __len__(self) -> int:
        return self.end - self.start

    def find(self, ch: str, end: Optional[int] = None) -> int:
        """Index of the first `ch` within [0, end), relative to the span, or -1."""
        stop = self.end if end is None else self.start + end
        found = self.source.find(ch, self.start, min(stop, self.end))
        return -1 if found < 0 else found - self.start

    def rfind(self, ch: str, end: Optional[int] = None) -> int:
        """Index of the last `ch` within [0, end), relative to the span, or -1."""
        stop = self.end if end is None else self.start + end
        found = self.source.rfind(ch, self.start, min(stop, self.end))
        return -1 if found < 0 else found - self.start

    def slice(self, lo: int, hi: Optional[int] = None) -> "Span":
        hi = len(self) if hi is None else hi
        lo = max(0, min(lo, len(self)))
        hi = max(lo, min(hi, len(self)))
        return Span(self.source, self.start + lo, self.start + hi, self.color)

    def split_at_index(self, idx: int) -> Tuple["Line", "Line"]:
        return Line((self,)).split_at_index(idx)

    def split_omitting(self, idx: int) -> Tuple["Line", "Line"]:
        return Line((self,)).split_omitting(idx)


@dataclass(frozen=True)
class Line:
    """
    One input row as an ordered sequence of Spans.

    Concatenating the span texts reproduces the row with markup removed.
    """
    spans: Tuple[Span, ...] = ()

    @classmethod
    def of(cls, text: str, color: ColorToken = None) -> "Line":
        return cls((Span.of(text, color),) if text else ())

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    def char_len(self) -> int:
        return sum(len(span) for span in self.spans)

    def __len__(self) -> int:
        return self.char_len()

    def __bool__(self) -> bool:
        return self.char_len() > 0

    def chars(self) -> Iterator[Tuple[ColorToken, str]]:
        """Yields (color, ch) pairs left to right."""
        for span in self.spans:
            for ch in span.text:
                yield span.color, ch

    # ------------------------------------------------------------
    # Measuring
    # ------------------------------------------------------------

    def last_break_before(self, limit: int) -> Optional[int]:
        """
        Absolute index of the last break char whose index is below `limit`.

        Each span is searched only up to the remaining budget, so the scan
        stops as soon as `limit` code points have been visited.
        """
        best: Optional[int] = None
        offset = 0
        for span in self.spans:
            remaining = limit - offset
            if remaining <= 0:
                break
            found = span.rfind(BREAK_CHAR, min(len(span), remaining))
            if found >= 0:
                best = offset + found
            offset += len(span)
        return best

    def first_word(self) -> "Line":
        """Spans up to (not including) the first break char; the whole line if none."""
        out = []
        for span in self.spans:
            found = span.find(BREAK_CHAR)
            if found < 0:
                out.append(span)
                continue
            if found > 0:
                out.append(span.slice(0, found))
            return Line(tuple(out))
        return self

    # ------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------

    def _split(self, idx: int, drop: int) -> Tuple["Line", "Line"]:
        left = []
        right = []
        offset = 0
        for span in self.spans:
            span_len = len(span)
            lo, hi = offset, offset + span_len
            offset = hi
            if hi <= idx:
                left.append(span)
                continue
            if lo >= idx + drop:
                right.append(span)
                continue
            head = span.slice(0, idx - lo)
            tail = span.slice(idx + drop - lo)
            if head:
                left.append(head)
            if tail:
                right.append(tail)
        return type(self)(tuple(left)), type(self)(tuple(right))

    def split_at_index(self, idx: int) -> Tuple["Line", "Line"]:
        """Splits so the right side begins at code point `idx`."""
        return self._split(idx, 0)

    def split_omitting(self, idx: int) -> Tuple["Line", "Line"]:
        """Like split_at_index, but the code point at `idx` is dropped."""
        return self._split(idx, 1)

    def color_before(self, idx: int) -> ColorToken:
        """Color of the span that ends at or contains code point idx - 1."""
        if idx <= 0:
            return None
        offset = 0
        color: ColorToken = None
        for span in self.spans:
            color = span.color
            offset += len(span)
            if offset >= idx:
                break
        return color

    def hyphenate_at(self, idx: int) -> Tuple["Line", "Line"]:
        left, right = self.split_at_index(idx)
        hyphen = Span.of(HYPHEN, self.color_before(idx))
        return type(self)(left.spans + (hyphen,)), right


class WrappedLine(Line):
    """One output row produced by the wrap engine."""

    @classmethod
    def from_line(cls, line: Line) -> "WrappedLine":
        if isinstance(line, WrappedLine):
            return line
        return cls(line.spans)
