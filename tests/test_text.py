import random

from engine.markup import parse_lines
from engine.text import Line, Span, WrappedLine


def colored(text):
    return parse_lines(text)[0]


def texts(line):
    return [(s.color, s.text) for s in line.spans]


def test_char_len_counts_code_points():
    line = Line.of("héllo wörld ✓")
    assert line.char_len() == 13
    assert Span.of("✓✓").char_len() == 2


def test_last_break_before():
    line = Line.of("taco casa is")
    assert line.last_break_before(11) == 9
    assert line.last_break_before(9) == 4
    assert line.last_break_before(4) is None
    assert Line.of("nospaces").last_break_before(100) is None


def test_last_break_before_zero_window():
    for text in ("a b", " ab", "x"):
        assert Line.of(text).last_break_before(0) is None


def test_last_break_before_across_spans():
    line = colored("#[red]taco casa#[] is a great")
    # the space that starts the second span is at absolute index 9
    assert line.last_break_before(11) == 9
    assert line.last_break_before(10) == 9
    assert line.last_break_before(9) == 4


def test_last_break_before_matches_flat_scan():
    rng = random.Random(4242)
    alphabet = "ab  RX"
    for _ in range(300):
        raw = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 30)))
        # R opens a color, X closes one
        text = raw.replace("R", "#[red]").replace("X", "#[]")
        line = colored(text)
        flat = line.text
        limit = rng.randint(0, 35)
        expected = flat.rfind(" ", 0, max(0, min(limit, len(flat))))
        assert line.last_break_before(limit) == (None if expected < 0 else expected)


def test_first_word():
    assert Line.of("hello world").first_word().text == "hello"
    assert Line.of("single").first_word().text == "single"
    assert Line.of(" lead").first_word().text == ""
    line = colored("#[red]sup#[]er duper")
    assert texts(line.first_word()) == [("red", "sup"), (None, "er")]


def test_split_at_index_inside_span_keeps_color():
    line = colored("ab#[red]cdef#[]gh")
    left, right = line.split_at_index(4)
    assert texts(left) == [(None, "ab"), ("red", "cd")]
    assert texts(right) == [("red", "ef"), (None, "gh")]


def test_split_at_span_boundary():
    line = colored("ab#[red]cd")
    left, right = line.split_at_index(2)
    assert texts(left) == [(None, "ab")]
    assert texts(right) == [("red", "cd")]


def test_split_omitting_drops_one_code_point():
    line = colored("taco#[red] casa")
    left, right = line.split_omitting(4)
    assert left.text == "taco"
    assert texts(right) == [("red", "casa")]


def test_split_length_preserved():
    line = colored("one #[red]two three#[] four")
    n = line.char_len()
    for idx in range(n):
        left, right = line.split_at_index(idx)
        assert left.char_len() + right.char_len() == n
        assert left.text + right.text == line.text
        left, right = line.split_omitting(idx)
        assert left.char_len() + right.char_len() == n - 1


def test_span_splits():
    left, right = Span.of("abcd", "red").split_at_index(1)
    assert texts(left) == [("red", "a")]
    assert texts(right) == [("red", "bcd")]
    left, right = Span.of("ab cd").split_omitting(2)
    assert (left.text, right.text) == ("ab", "cd")


def test_hyphenate_at_inherits_preceding_color():
    line = colored("#[red]super#[]cala")
    left, right = line.hyphenate_at(3)
    assert texts(left) == [("red", "sup"), ("red", "-")]
    assert right.text == "ercala"

    left, _ = line.hyphenate_at(5)
    assert texts(left)[-1] == ("red", "-")

    left, _ = line.hyphenate_at(7)
    assert texts(left)[-1] == (None, "-")


def test_hyphenate_at_zero_uses_default_color():
    left, right = colored("#[red]word").hyphenate_at(0)
    assert texts(left) == [(None, "-")]
    assert right.text == "word"


def test_splits_do_not_copy_source():
    source = "alpha beta gamma"
    line = Line.of(source)
    left, right = line.split_omitting(5)
    assert left.spans[0].source is source
    assert right.spans[0].source is source
    assert right.spans[0].start == 6


def test_wrapped_line_type_survives_splits():
    row = WrappedLine.from_line(Line.of("ab cd"))
    left, right = row.split_at_index(2)
    assert isinstance(left, WrappedLine)
    assert isinstance(right, WrappedLine)
    assert not WrappedLine()
