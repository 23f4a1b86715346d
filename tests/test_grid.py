import pytest

from stterm.grid import Attr, Glyph, Screen


def make_line(text, cols):
    return [Glyph(u=c) for c in text.ljust(cols)]


def test_put_and_read_text():
    screen = Screen(4, 10, 8)
    screen.put_text(1, 2, "hello")
    assert screen.line_text(1) == "  hello   "
    assert screen.dirty[1] is True


def test_put_text_clips_at_edge():
    screen = Screen(2, 5, 0)
    screen.put_text(0, 3, "abcdef")
    assert screen.line_text(0) == "   ab"


def test_line_length_ignores_trailing_blanks():
    screen = Screen(2, 10, 0)
    screen.put_text(0, 0, "abc")
    assert screen.line_length(0) == len("abc")
    assert screen.line_length(1) == 0


def test_line_length_wrapped_line_is_full_width():
    screen = Screen(2, 10, 0)
    screen.put_text(0, 0, "ab")
    screen.lines[0][-1].mode |= Attr.WRAP
    assert screen.line_length(0) == screen.cols


def test_row_out_of_range():
    screen = Screen(2, 4, 0)
    with pytest.raises(IndexError):
        screen.line_text(2)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Screen(0, 4, 0)


def test_push_history_copies_line():
    screen = Screen(2, 4, 3)
    line = make_line("abcd", 4)
    screen.push_history(line)
    line[0].u = "z"
    screen.kscroll_up(1)
    assert screen.visible_line(0)[0].u == "a"


def test_scroll_up_limited_by_history_size():
    screen = Screen(3, 4, 2)
    screen.kscroll_up(2)
    assert screen.scr == 2
    assert screen.kscroll_up(1) == 2


def test_scroll_down_clamps_at_zero():
    screen = Screen(3, 4, 5)
    screen.kscroll_up(2)
    assert screen.kscroll_down(10) == 0
    assert all(screen.dirty)


def test_negative_amount_is_relative_to_rows():
    screen = Screen(4, 4, 10)
    assert screen.kscroll_up(-1) == screen.rows - 1
    assert screen.kscroll_down(-2) == screen.rows - 1 - (screen.rows - 2)


def test_alt_screen_flag():
    screen = Screen(2, 2, 0)
    assert screen.is_alt_screen() is False
    screen.alt_screen = True
    assert screen.is_alt_screen() is True