"""Terminal screen grid with a scrollback history ring."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class Attr(enum.IntFlag):
    """Per-cell rendering attributes."""

    BOLD = 1 << 0
    FAINT = 1 << 1
    ITALIC = 1 << 2
    UNDERLINE = 1 << 3
    BLINK = 1 << 4
    REVERSE = 1 << 5
    INVISIBLE = 1 << 6
    STRUCK = 1 << 7
    WRAP = 1 << 8
    WIDE = 1 << 9
    WDUMMY = 1 << 10


DEFAULT_FG = 7
DEFAULT_BG = 0


@dataclass
class Glyph:
    """One character cell."""

    u: str = " "
    mode: Attr = Attr(0)
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG


@dataclass
class Cursor:
    """Cursor position on the screen."""

    x: int = 0
    y: int = 0


@dataclass
class Screen:
    """A grid of glyphs with a scrollback history of ``histsize`` lines."""

    rows: int
    cols: int
    histsize: int
    lines: list = field(init=False)
    hist: list = field(init=False)
    histi: int = field(init=False, default=0)
    scr: int = field(init=False, default=0)
    top: int = field(init=False, default=0)
    bot: int = field(init=False, default=0)
    cursor: Cursor = field(init=False, default_factory=Cursor)
    alt_screen: bool = field(init=False, default=False)
    dirty: list = field(init=False)

    def __init__(self, rows, cols, histsize):
        if rows < 1 or cols < 1:
            raise ValueError("screen needs at least one row and one column")
        if histsize < 0:
            raise ValueError("history size cannot be negative")
        self.rows = rows
        self.cols = cols
        self.histsize = histsize
        self.lines = [self._blank_line() for _ in range(rows)]
        self.hist = [self._blank_line() for _ in range(histsize)]
        self.histi = 0
        self.scr = 0
        self.top = 0
        self.bot = rows - 1
        self.cursor = Cursor()
        self.alt_screen = False
        self.dirty = [False] * rows

    def _blank_line(self):
        return [Glyph() for _ in range(self.cols)]

    def _check_row(self, y):
        if not 0 <= y < self.rows:
            raise IndexError(f"row {y} outside screen of {self.rows} rows")

    def _full_dirt(self):
        self.dirty = [True] * self.rows

    def put_text(self, y, x, text):
        """Write ``text`` starting at column ``x`` of row ``y``, clipped at the edge."""
        self._check_row(y)
        line = self.lines[y]
        for col, ch in enumerate(text, start=x):
            if col >= self.cols:
                break
            if col >= 0:
                line[col] = replace(line[col], u=ch)
        self.dirty[y] = True

    def line_text(self, y):
        """Return the characters of row ``y`` as a string."""
        self._check_row(y)
        return "".join(g.u for g in self.lines[y])

    def line_length(self, y):
        """Length of row ``y`` without trailing blanks, or the full width if it wraps."""
        self._check_row(y)
        line = self.lines[y]
        if line[-1].mode & Attr.WRAP:
            return self.cols
        length = self.cols
        while length > 0 and line[length - 1].u == " ":
            length -= 1
        return length

    def push_history(self, line):
        """Store a copy of ``line`` as the newest history entry."""
        if not self.histsize:
            return
        self.histi = (self.histi + 1) % self.histsize
        copied = [replace(g) for g in line][: self.cols]
        copied.extend(Glyph() for _ in range(self.cols - len(copied)))
        self.hist[self.histi] = copied

    def visible_line(self, y):
        """Return the glyphs shown on row ``y`` given the scroll offset."""
        self._check_row(y)
        if y < self.scr:
            index = (y + self.histi - self.scr + self.histsize + 1) % self.histsize
            return self.hist[index]
        return self.lines[y - self.scr]

    def kscroll_up(self, n):
        """Scroll the view back into history by ``n`` lines; return the offset."""
        if n < 0:
            n = self.rows + n
        if self.scr <= self.histsize - n:
            self.scr += n
            self._full_dirt()
        return self.scr

    def kscroll_down(self, n):
        """Scroll the view forward by ``n`` lines; return the offset."""
        if n < 0:
            n = self.rows + n
        if n > self.scr:
            n = self.scr
        if self.scr > 0:
            self.scr -= n
            self._full_dirt()
        return self.scr

    def is_alt_screen(self):
        """Whether the alternate screen is active."""
        return self.alt_screen