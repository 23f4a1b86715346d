# stterm

Building blocks for a simple X terminal emulator, written as plain Python objects
that a front end can drive and that can be tested on their own. The package has
no dependencies outside the standard library.

## Modules

- `stterm.modes`: `WinMode`, an `IntFlag` of window mode bits (`VISIBLE`,
  `FOCUSED`, `APPKEYPAD`, the mouse modes and their union `MOUSE`,
  `KBDSELECT` and others).
- `stterm.grid`: `Screen(rows, cols, histsize)`, a grid of `Glyph` cells (each
  with a character `u`, `Attr` flags and colour indices) plus a `Cursor`.
  `put_text` writes text clipped at the right edge, `line_text` and
  `line_length` read a row back, and the scrollback is kept in a ring of
  `histsize` lines: `push_history` stores a line, `kscroll_up` and
  `kscroll_down` move the view (negative counts mean "rows plus n") and
  `visible_line` returns what is shown on a row for the current offset.
  `is_alt_screen` reports whether the alternate screen is active.
- `stterm.boxdraw`: geometry for U+2500 to U+259F box-drawing, block, quadrant
  and shade characters and for U+2800 braille. `is_boxdraw` tells whether a code
  point is drawn as shapes, `box_index` gives its shape encoding (optionally
  bold), `box_rects` and `glyph_rects` return lists of `Rect`, and
  `shade_color` blends two RGB triples for the shade characters. Dashes and
  diagonals are not covered.
- `stterm.sync`: `SyncState` with `begin`, `end` and `in_sync(timeout_ms)`,
  which holds a synchronized update until it is ended or times out. The clock
  can be passed in.
- `stterm.colors`: `Color` (16 bits per channel) and `invert_color`, which
  inverts red, green and blue and keeps alpha.
- `stterm.iso14755`: `parse_codepoint` turns a hexadecimal code point line into
  a character (or `None` when it is not valid), and `prompt_codepoint` runs a
  shell command (by default a `dmenu` prompt) and parses its output.
- `stterm.copyurl`: finds URLs starting with `http://` or `https://` in screen
  lines. `find_url_first` scans upwards for the first URL on a line,
  `find_url_last` for the last one before a column; both wrap around between
  `top` and `bot` and return a `UrlMatch(row, col, url)` or `None`.
  `trim_url` and `find_last_any` are the helpers they use.
- `stterm.externalpipe`: `screen_text` renders a `Screen` as text, joining
  wrapped lines, and `external_pipe` starts a command and writes that text to
  its standard input, returning the process (or `None` if it cannot start).
- `stterm.kbdselect`: `KeyboardSelect`, a vi-like mode that moves the cursor
  (`h j k l`, arrows, counts, `Home`, `End`, `$`, ...), starts and extends a
  `Selection` (`s`, `t`), and searches the screen (`/`, `?`, `n`, `N`).
  `start` and `handle_key` return the `WinMode` flag to toggle, which
  `toggle_winmode` applies.
- `stterm.xresources`: `parse_resource_database` reads `name: value` lines,
  `resource_load` looks up `st.<name>` / `St.<name>` (or a given name and
  class) and converts it by `ResourceType`, and `config_init` fills a list of
  `ResourcePref` from resource text.
- `stterm.launch`: `open_copied` runs an opener on the clipboard text in the
  background, `cwd_of_pid` resolves a process's working directory through
  `/proc`, `new_terminal` starts a program in that directory, and `plumb` runs
  a command on a selection there and waits for it.
- `stterm.keys`, `stterm.keys_keypad`, `stterm.keys_chars`: the key table that
  maps key symbols and `Mod` masks to the escape sequences sent to the program.
  Each `Key` also carries its application-keypad and application-cursor
  conditions. `is_mapped` tells whether a key is looked up in the table,
  `keypad_entries` and `char_entries` return parts of it, `entries_for`
  returns every binding for a key (by name or code), and `all_keys` the whole
  table in lookup order.

## Example

```python
from stterm.grid import Screen
from stterm.copyurl import find_url_first

screen = Screen(rows=3, cols=40, histsize=100)
screen.put_text(1, 0, "see https://example.com/docs now")
lines = [screen.line_text(y) for y in range(3)]
match = find_url_first(lines, 0, 2, 2)
print(match)  # UrlMatch(row=1, col=4, url='https://example.com/docs')
```

## What it does not do

This is a library of parts, not a terminal. It opens no window, draws nothing
on screen (box drawing yields rectangles for a front end to paint), runs no
pseudo-terminal, parses no escape sequences from a program's output and
installs no command.

## Tests

```
pip install -e ".[test]"
pytest
```