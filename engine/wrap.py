"""
GlyphFlow — engine/wrap.py
Word-Wrap Engine: greedy line breaking with hyphenation on overflow.
====================================================================
Version:     0.2
Stack:       Python 3.11+ | stdlib warnings
Status:      Core.

Per physical line, while the remainder is longer than `limit`:
  1. Look for the last space with index <= limit.
  2. None found (one word wider than the row): hyphenate the first word,
     keeping min(limit - 1, word_len - 2) characters on this row.
  3. Found: split there, dropping the space (a break at index 0 emits no
     row). If at least HYPHEN_MIN_ROOM cells are left on the row and the
     next word is at least HYPHEN_MIN_WORD long, pull part of it onto this
     row behind a hyphen.

Negative widths wrap like zero: one character and a hyphen per row.

Design Variables
----------------
  MAX_SPLITS_PER_LINE   10   floor of the per-line split cap
  HYPHEN_MIN_ROOM        4   free cells needed before pulling a word in
  HYPHEN_MIN_WORD        6   shortest next word worth hyphenating

The split cap only guards against runaway loops. Each split consumes at least
one code point, so the default cap (at least the line's length) is never hit
by real input; an explicit `max_splits` can lower it. Hitting the cap emits
IterationLimitExceeded through `warnings` and returns what was produced.
"""

from __future__ import annotations

import warnings
from typing import Iterable, List, Optional

from engine.markup import parse_lines, plain_lines
from engine.text import Line, WrappedLine

MAX_SPLITS_PER_LINE: int = 10
HYPHEN_MIN_ROOM: int = 4
HYPHEN_MIN_WORD: int = 6


class IterationLimitExceeded(UserWarning):
    """The split cap was reached while wrapping one physical line."""

    def __init__(self, line: str, limit: int, max_splits: int):
        super().__init__(
            f"Wrap stopped after {max_splits} splits at width {limit}; "
            f"remaining text left unwrapped: {line!r}"
        )
        self.line = line
        self.limit = limit
        self.max_splits = max_splits


def _split_cap(line: Line, max_splits: Optional[int]) -> int:
    if max_splits is not None:
        return max_splits
    return max(MAX_SPLITS_PER_LINE, line.char_len())


def wrap_line(
    line: Line,
    limit: int,
    hyphenate: bool = True,
    max_splits: Optional[int] = None,
) -> List[WrappedLine]:
    output: List[WrappedLine] = []
    current = line
    cap = _split_cap(line, max_splits)
    splits = 0
    # negative widths wrap like zero
    fit = max(limit, 0)

    while current.char_len() > fit:
        if splits >= cap:
            warnings.warn(
                IterationLimitExceeded(current.text, limit, cap), stacklevel=3
            )
            break
        splits += 1

        break_idx = current.last_break_before(fit + 1)

        if break_idx is None:
            if hyphenate:
                word_len = current.first_word().char_len()
                keep_len = max(1, min(fit - 1, word_len - 2))
                left, right = current.hyphenate_at(keep_len)
            else:
                left, right = current.split_at_index(max(1, fit))
        else:
            left, right = current.split_omitting(break_idx)
            room = max(0, fit - left.char_len() - 1)
            if hyphenate and room >= HYPHEN_MIN_ROOM:
                next_len = right.first_word().char_len()
                if next_len >= HYPHEN_MIN_WORD:
                    keep_len = min(room, next_len - 2)
                    left, right = current.hyphenate_at(break_idx + keep_len)

        # A break at index 0 only consumes the leading space.
        if left:
            output.append(WrappedLine.from_line(left))
        current = right

    if current.char_len() > 0:
        output.append(WrappedLine.from_line(current))
    return output


def wrap_lines(
    lines: Iterable[Line],
    limit: int,
    hyphenate: bool = True,
    max_splits: Optional[int] = None,
) -> List[WrappedLine]:
    output: List[WrappedLine] = []
    for line in lines:
        output.extend(wrap_line(line, limit, hyphenate, max_splits))
    return output


def wrap(
    text: str,
    limit: int,
    markup: bool = True,
    hyphenate: bool = True,
    max_splits: Optional[int] = None,
) -> List[WrappedLine]:
    """
    Wraps `text` to rows of at most `limit` code points.

    Literal newlines always start a new row. With `markup` on, `#[..]` tags
    are parsed (and may raise UnterminatedTagError); otherwise the text is
    taken verbatim.
    """
    lines = parse_lines(text) if markup else plain_lines(text)
    return wrap_lines(lines, limit, hyphenate, max_splits)
