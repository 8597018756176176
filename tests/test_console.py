import io
import re

import pytest

from cmdgames.console import Color, Console, CursorState

_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[A-Za-z]|\x1b\][^\x07]*\x07")


def _visible(text):
    return _ESCAPE.sub("", text)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def console(stream):
    return Console(stream)


def test_initial_state(console):
    assert console.get_color() == (Color.BLACK, Color.WHITE)
    assert console.get_xy() == (0, 0)
    assert console.get_title() == ""
    assert console.cursor is CursorState.VISIBLE_NORMAL


def test_set_color_round_trip(console):
    console.set_color(Color.HYELLOW, Color.HRED)
    assert console.get_color() == (Color.HYELLOW, Color.HRED)


def test_set_color_accepts_ints(console):
    console.set_color(1, 14)
    assert console.get_color() == (Color.BLUE, Color.HYELLOW)


def test_set_color_rejects_out_of_range(console):
    with pytest.raises(ValueError):
        console.set_color(16, 0)


def test_set_color_writes_only_escapes(console, stream):
    console.set_color(Color.RED, Color.GREEN)
    assert console.get_color() == (Color.RED, Color.GREEN)
    assert console.get_xy() == (0, 0)
    assert stream.getvalue().startswith("\x1b[")
    assert _visible(stream.getvalue()) == ""


def test_distinct_colors_give_distinct_sequences():
    outputs = set()
    for bg in Color:
        buf = io.StringIO()
        Console(buf).set_color(bg, Color.WHITE)
        outputs.add(buf.getvalue())
    assert len(outputs) == len(Color)


def test_goto_round_trip(console, stream):
    console.goto_xy(5, 7)
    assert console.get_xy() == (5, 7)
    assert stream.getvalue() == "\x1b[8;6H"


def test_goto_negative_raises(console):
    with pytest.raises(ValueError):
        console.goto_xy(-1, 0)


def test_cls_homes_cursor(console, stream):
    console.goto_xy(10, 4)
    console.cls()
    assert console.get_xy() == (0, 0)
    assert "\x1b[2J" in stream.getvalue()


def test_set_cursor_states(console, stream):
    console.set_cursor(CursorState.INVISIBLE)
    assert console.cursor is CursorState.INVISIBLE
    assert stream.getvalue().endswith("\x1b[?25l")
    console.set_cursor(CursorState.VISIBLE_FULL)
    assert console.cursor is CursorState.VISIBLE_FULL


def test_set_cursor_unknown_falls_back_to_normal(console):
    console.set_cursor(CursorState.INVISIBLE)
    console.set_cursor(42)
    assert console.cursor is CursorState.VISIBLE_NORMAL


def test_show_ch_repeats(console, stream):
    console.show_ch(2, 3, "*", Color.BLUE, Color.HWHITE, 4)
    assert _visible(stream.getvalue()) == "*" * 4
    assert console.get_xy() == (6, 3)
    assert console.get_color() == (Color.BLUE, Color.HWHITE)


def test_show_ch_requires_single_character(console):
    with pytest.raises(ValueError):
        console.show_ch(0, 0, "ab")


def test_show_str_plain(console, stream):
    console.show_str(2, 3, "hi")
    assert _visible(stream.getvalue()) == "hi"
    assert console.get_xy() == (4, 3)


def test_show_str_repeats_and_pads(console, stream):
    console.show_str(0, 0, "ab", rpt=2, max_len=7)
    assert console.get_xy() == (7, 0)
    assert _visible(stream.getvalue()) == "ab" * 2 + " " * 3


def test_show_str_truncates(console, stream):
    console.show_str(0, 0, "abc", rpt=3, max_len=4)
    assert console.get_xy() == (4, 0)
    assert _visible(stream.getvalue()) == ("abc" * 3)[:4]


def test_show_str_nonpositive_repeat_means_once(console, stream):
    console.show_str(0, 0, "xyz", rpt=0)
    assert console.get_xy() == (3, 0)
    assert _visible(stream.getvalue()) == "xyz"


@pytest.mark.parametrize("text", ["", None])
def test_show_str_empty_fills_spaces(console, stream, text):
    console.show_str(1, 1, text, max_len=5)
    assert _visible(stream.getvalue()) == " " * 5
    assert console.get_xy() == (6, 1)


def test_show_str_empty_without_length_writes_nothing(console, stream):
    console.show_str(2, 1, "")
    assert console.get_xy() == (2, 1)
    assert _visible(stream.getvalue()) == ""


def test_show_int_repeats(console, stream):
    console.show_int(0, 2, -12, rpt=3)
    assert _visible(stream.getvalue()) == str(-12) * 3
    assert console.get_xy() == (len(str(-12)) * 3, 2)


def test_title_round_trip(console, stream):
    console.set_title("Tic Tac Toe")
    assert console.get_title() == "Tic Tac Toe"
    assert "Tic Tac Toe" in stream.getvalue()
    assert _visible(stream.getvalue()) == ""