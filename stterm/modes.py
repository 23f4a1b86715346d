"""Window mode flags shared between the terminal core and the window front end."""

from __future__ import annotations

import enum


class WinMode(enum.IntFlag):
    """Bit flags describing the state of the terminal window."""

    VISIBLE = 1 << 0
    FOCUSED = 1 << 1
    APPKEYPAD = 1 << 2
    MOUSEBTN = 1 << 3
    MOUSEMOTION = 1 << 4
    REVERSE = 1 << 5
    KBDLOCK = 1 << 6
    HIDE = 1 << 7
    APPCURSOR = 1 << 8
    MOUSESGR = 1 << 9
    EIGHTBIT = 1 << 10
    BLINK = 1 << 11
    FBLINK = 1 << 12
    FOCUS = 1 << 13
    MOUSEX10 = 1 << 14
    MOUSEMANY = 1 << 15
    BRCKTPASTE = 1 << 16
    NUMLOCK = 1 << 17
    NORMAL = 1 << 18
    KBDSELECT = 1 << 19
    MOUSE = MOUSEBTN | MOUSEMOTION | MOUSEX10 | MOUSEMANY