"""Keyboard-driven cursor movement, selection and search over the screen."""

from __future__ import annotations

from dataclasses import dataclass, replace

from stterm.grid import DEFAULT_BG, DEFAULT_FG, Attr, Cursor, Glyph
from stterm.modes import WinMode

_LABELS = (" MOVE ", " SEL  ")

# direction index: 0 left, 1 up, 2 right, 3 down
_MOVES = {
    "h": 0, "Left": 0,
    "k": 1, "Up": 1,
    "l": 2, "Right": 2,
    "j": 3, "Down": 3,
}


@dataclass
class Selection:
    """A selection from ``begin`` to ``end`` of the given type."""

    begin: Cursor | None = None
    end: Cursor | None = None
    type: int = 1
    active: bool = False

    def start(self, x, y):
        """Begin a selection at (x, y)."""
        self.begin = Cursor(x, y)
        self.end = Cursor(x, y)
        self.active = True

    def extend(self, x, y, type):
        """Move the selection end to (x, y) with the given type."""
        if self.begin is None:
            self.begin = Cursor(x, y)
        self.end = Cursor(x, y)
        self.type = type

    def clear(self):
        """Drop the selection."""
        self.begin = None
        self.end = None
        self.active = False


class KeyboardSelect:
    """Vi-like keyboard selection mode over a screen."""

    def __init__(self, screen, selection):
        self.screen = screen
        self.selection = selection
        self.saved = Cursor()
        self.target = []
        self.type = 1
        self.in_use = False
        self.sens = 0
        self.quant = 0
        self.mode = 0
        self._saved_line = None

    @property
    def _cur(self):
        return self.screen.cursor

    def _notify(self, kind, char=" ", save=False, restore=False):
        scr = self.screen
        bot = scr.bot
        if save:
            self._saved_line = [replace(g) for g in scr.lines[bot]]
        elif restore and self._saved_line is not None:
            scr.lines[bot] = [replace(g) for g in self._saved_line]
        line = scr.lines[bot]
        if kind < 2:
            start = scr.cols - len(_LABELS[kind])
            for offset, ch in enumerate(_LABELS[kind]):
                if start + offset >= 0:
                    line[start + offset] = Glyph(ch, Attr.REVERSE, DEFAULT_FG, DEFAULT_BG)
        elif kind < 5:
            if self._saved_line is not None:
                scr.lines[bot] = [replace(g) for g in self._saved_line]
        else:
            scr.lines[bot] = [Glyph(" ", Attr.REVERSE, DEFAULT_FG, DEFAULT_BG) for _ in range(scr.cols)]
            scr.lines[bot][0].u = char
        scr.dirty[bot] = True

    def _select_or_draw(self):
        cur = self._cur
        if self.mode & 1:
            self.selection.extend(cur.x, cur.y, self.type)
        else:
            self.screen.dirty[cur.y] = True

    def _cell(self, index):
        cols = self.screen.cols
        row, col = divmod(index, cols)
        if not 0 <= row < self.screen.rows:
            return None
        return self.screen.lines[row][col].u

    def _search(self, incr):
        cols = self.screen.cols
        cur = self._cur
        bound = (cols * self.saved.y + self.saved.x) * (incr > 0) + incr
        i = cols * cur.y + cur.x + incr
        while i != bound:
            if all(self._cell(i + k) == ch for k, ch in enumerate(self.target)):
                cur.y, cur.x = divmod(i, cols)
                self._select_or_draw()
                return True
            i += incr
        return False

    def search(self, direction):
        """Search for the current target; ``direction`` -1 goes back, 1 forward."""
        if not self.target:
            return False
        return self._search(direction)

    def start(self):
        """Enter the mode; return the window flag to toggle."""
        self.in_use = True
        self.saved = Cursor(self._cur.x, self._cur.y)
        self._notify(0, save=True)
        return WinMode.KBDSELECT

    def _search_input(self, key, text):
        scr = self.screen
        if key == "Return":
            self.mode ^= 2
            self._notify(self.mode, restore=True)
            return 0
        if key == "BackSpace":
            if not self.target:
                return 0
            scr.lines[scr.bot][len(self.target)].u = " "
            self.target.pop()
        elif not text:
            return 0
        elif len(self.target) == scr.cols or key == "Escape":
            return 0
        else:
            self.target.append(text[0])
            if len(self.target) < scr.cols:
                scr.lines[scr.bot][len(self.target)].u = text[0]
        if key != "BackSpace":
            self.search(self.sens)
        scr.dirty[scr.bot] = True
        return 0

    def handle_key(self, key, text=""):
        """Handle one key; return the window flag to toggle, or 0."""
        if self.mode & 2:
            return self._search_input(key, text)
        scr = self.screen
        cur = self._cur
        if key == "s":
            if self.mode & 1:
                self.selection.clear()
            else:
                self.selection.start(cur.x, cur.y)
            self.mode ^= 1
            self._notify(self.mode)
        elif key == "t":
            self.type ^= 3
            self.selection.extend(cur.x, cur.y, self.type)
            self.selection.extend(cur.x, cur.y, self.type)
        elif key in ("/", "KP_Divide", "?"):
            char = "?" if key == "?" else "/"
            self.sens = -1 if char == "/" else 1
            self.target = []
            self._notify(15, char)
            self.mode ^= 2
        elif key in ("Escape", "Return"):
            if key == "Escape":
                if not self.in_use:
                    self.quant = 0
                    return 0
                self.selection.clear()
            self._notify(4)
            cur.x, cur.y = self.saved.x, self.saved.y
            self.mode = 0
            self._select_or_draw()
            self.in_use = False
            self.quant = 0
            return WinMode.KBDSELECT
        elif key in ("n", "N"):
            self.search(-1 if key == "n" else 1)
        elif key == "BackSpace":
            cur.x = 0
            self._select_or_draw()
        elif key == "$":
            cur.x = scr.cols - 1
            self._select_or_draw()
        elif key == "Home":
            cur.x, cur.y = 0, 0
            self._select_or_draw()
        elif key == "End":
            cur.x, cur.y = self.saved.x, self.saved.y
            self._select_or_draw()
        elif key in ("Prior", "Next"):
            cur.y = 0 if key == "Prior" else self.saved.y
            self._select_or_draw()
        elif key == "!":
            cur.x = scr.cols >> 1
            self._select_or_draw()
        elif key in ("*", "KP_Multiply", "_"):
            if key != "_":
                cur.x = scr.cols >> 1
            cur.y = self.saved.y >> 1
            self._select_or_draw()
        else:
            digit = key[3:] if key.startswith("KP_") else key
            if len(digit) == 1 and digit.isdigit():
                self.quant = self.quant * 10 + int(digit)
                return 0
            if key in _MOVES:
                self._move(_MOVES[key])
        self.quant = 0
        return 0

    def _move(self, i):
        scr = self.screen
        cur = self._cur
        axis = "y" if i & 1 else "x"
        sens = 1 if i & 2 else -1
        if i < 2:
            bound = 0
        elif i == 2:
            bound = scr.cols - 1
        else:
            bound = scr.bot
        quant = self.quant or 1
        pos = getattr(cur, axis)
        if pos == bound and ((sens < 0 and bound == 0) or (sens > 0 and bound > 0)):
            return
        pos += quant * sens
        if pos < 0 or (bound > 0 and pos > bound):
            pos = bound
        setattr(cur, axis, pos)
        self._select_or_draw()


def toggle_winmode(mode, flag):
    """Return ``mode`` with ``flag`` toggled."""
    return mode ^ flag