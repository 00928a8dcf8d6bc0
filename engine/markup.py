"""
GlyphFlow — engine/markup.py
Markup Parser: `#[color]...#[]` inline color tags -> Lines of Spans.
====================================================================
Version:     0.2
Stack:       Python 3.11+ | stdlib
Status:      Core.

Markup reference
----------------
  #[name]   push `name` onto the color stack (resolved later, at print time)
  #[]       pop the color stack (popping an empty stack is a no-op)
  #[[       literal "#["

Architecture notes
------------------
- The ColorStack is created once per `parse_lines` call and passed through
  every physical line, so an unclosed tag keeps coloring text after "\\n".
- A `#[` with no closing `]` on the same physical line is malformed input and
  raises UnterminatedTagError. It is never repaired silently.
"""

from __future__ import annotations

from typing import List, Optional

from engine.colors import ColorToken
from engine.text import Line, Span

TAG_OPEN = "#["
TAG_CLOSE = "]"


class MarkupError(ValueError):
    """Base class for malformed color markup."""


class UnterminatedTagError(MarkupError):
    def __init__(self, line: str):
        super().__init__(f"Unterminated color tag '{TAG_OPEN}' in line: {line!r}")
        self.line = line


class ColorStack:
    """Push/pop stack of color tokens; the top colors newly parsed text."""

    def __init__(self) -> None:
        self._tokens: List[str] = []

    def push(self, token: str) -> None:
        self._tokens.append(token)

    def pop(self) -> None:
        if self._tokens:
            self._tokens.pop()

    @property
    def top(self) -> ColorToken:
        return self._tokens[-1] if self._tokens else None

    def __len__(self) -> int:
        return len(self._tokens)


def parse_line(line: str, stack: ColorStack) -> Line:
    """Tokenizes one physical line (no '\\n') into colored spans."""
    spans: List[Span] = []

    def emit(start: int, end: int) -> None:
        if end > start:
            spans.append(Span(line, start, end, stack.top))

    pos = 0
    first = True
    while True:
        found = line.find(TAG_OPEN, pos)
        chunk_end = len(line) if found < 0 else found

        if first:
            emit(pos, chunk_end)
            first = False
        elif chunk_end > pos:
            if line.startswith("[", pos):
                spans.append(Span.of(TAG_OPEN, stack.top))
                emit(pos + 1, chunk_end)
            else:
                close = line.find(TAG_CLOSE, pos, chunk_end)
                if close < 0:
                    raise UnterminatedTagError(line)
                name = line[pos:close]
                if name:
                    stack.push(name)
                else:
                    stack.pop()
                emit(close + 1, chunk_end)

        if found < 0:
            break
        pos = found + len(TAG_OPEN)

    return Line(tuple(spans))


def parse_lines(text: str, stack: Optional[ColorStack] = None) -> List[Line]:
    """Splits on '\\n' and parses every physical line with one shared stack."""
    if stack is None:
        stack = ColorStack()
    return [parse_line(physical, stack) for physical in text.split("\n")]


def plain_lines(text: str) -> List[Line]:
    """Markup-free lines: each physical line becomes one uncolored span."""
    return [Line.of(physical) for physical in text.split("\n")]


def strip_markup(text: str) -> str:
    return "\n".join(line.text for line in parse_lines(text))
