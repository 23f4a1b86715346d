from stterm.grid import Cursor, Screen
from stterm.kbdselect import KeyboardSelect, Selection
from stterm.modes import WinMode


def make(rows=3, cols=10, cursor=(0, 0)):
    screen = Screen(rows, cols, 0)
    screen.cursor = Cursor(*cursor)
    kbd = KeyboardSelect(screen, Selection())
    return screen, kbd


def test_start_shows_move_label():
    screen, kbd = make()
    assert kbd.start() == WinMode.KBDSELECT
    assert screen.line_text(2).endswith(" MOVE ")


def test_movement_and_quantity():
    screen, kbd = make()
    kbd.start()
    kbd.handle_key("l")
    assert screen.cursor.x == 1
    kbd.handle_key("3")
    kbd.handle_key("l")
    assert screen.cursor.x == 4
    kbd.handle_key("h")
    assert screen.cursor.x == 3


def test_movement_clamps_at_edges():
    screen, kbd = make()
    kbd.start()
    kbd.handle_key("h")
    assert screen.cursor.x == 0
    kbd.handle_key("9")
    kbd.handle_key("l")
    assert screen.cursor.x == screen.cols - 1
    kbd.handle_key("j")
    kbd.handle_key("j")
    kbd.handle_key("j")
    assert screen.cursor.y == screen.bot


def test_return_restores_cursor_and_line():
    screen, kbd = make(cursor=(2, 1))
    screen.put_text(2, 0, "bottom")
    before = screen.line_text(2)
    kbd.start()
    kbd.handle_key("$")
    assert kbd.handle_key("Return") == WinMode.KBDSELECT
    assert (screen.cursor.x, screen.cursor.y) == (2, 1)
    assert screen.line_text(2) == before


def test_escape_outside_mode_does_nothing():
    _, kbd = make()
    assert kbd.handle_key("Escape") == 0


def test_selection_follows_cursor():
    screen, kbd = make()
    kbd.start()
    kbd.handle_key("s")
    assert screen.line_text(2).endswith(" SEL  ")
    kbd.handle_key("l")
    assert kbd.selection.end == Cursor(1, 0)
    assert kbd.selection.begin == Cursor(0, 0)


def test_search_backwards():
    screen, kbd = make(cursor=(9, 2))
    screen.put_text(0, 2, "hello")
    kbd.start()
    kbd.handle_key("/")
    assert screen.line_text(2)[0] == "/"
    kbd.handle_key("e", "e")
    kbd.handle_key("l", "l")
    kbd.handle_key("Return")
    screen.cursor = Cursor(9, 1)
    assert kbd.search(-1) is True
    assert (screen.cursor.x, screen.cursor.y) == (3, 0)