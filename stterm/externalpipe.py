"""Piping the screen contents into an external command."""

from __future__ import annotations

import subprocess

from stterm.grid import Attr


def screen_text(screen):
    """Return the screen contents as text, joining wrapped lines."""
    parts = []
    newline = False
    for n in range(screen.rows):
        lastpos = min(screen.line_length(n) + 1, screen.cols) - 1
        if lastpos < 0:
            break
        line = screen.lines[n]
        parts.extend(g.u for g in line[: lastpos + 1])
        newline = bool(line[lastpos].mode & Attr.WRAP)
        if newline:
            continue
        parts.append("\n")
    if newline:
        parts.append("\n")
    return "".join(parts)


def external_pipe(screen, argv, stdout=None):
    """Start ``argv`` and feed it the screen text; return the process or None."""
    try:
        proc = subprocess.Popen(list(argv), stdin=subprocess.PIPE, stdout=stdout)
    except OSError:
        return None
    try:
        proc.stdin.write(screen_text(screen).encode("utf-8"))
    except BrokenPipeError:
        pass
    try:
        proc.stdin.close()
    except BrokenPipeError:
        pass
    return proc