"""Locating the last URL shown on the screen."""

from __future__ import annotations

from dataclasses import dataclass

URLCHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789-._~:/?#@!$&'*+,;=%"
)
URLSTRINGS = ("http://", "https://")


@dataclass(frozen=True)
class UrlMatch:
    """A URL found on screen: its row, starting column and text."""

    row: int
    col: int
    url: str


def find_last_any(text, needles):
    """Return the index of the rightmost position where any needle starts, or None."""
    for pos in range(len(text) - 1, -1, -1):
        if any(text.startswith(needle, pos) for needle in needles):
            return pos
    return None


def trim_url(text):
    """Cut ``text`` at the first character that cannot be part of a URL."""
    for pos, ch in enumerate(text):
        if ch not in URLCHARS:
            return text[:pos]
    return text


def _wrap_up(row, top, bot):
    row -= 1
    return bot if row < top else row


def find_url_first(lines, top, bot, start_row):
    """Scan upwards from ``start_row`` for the first URL on a line."""
    row = min(max(start_row, top), bot)
    first = row
    while True:
        text = lines[row]
        pos = text.find("http://")
        if pos == -1:
            pos = text.find("https://")
        if pos != -1:
            return UrlMatch(row, pos, trim_url(text[pos:]))
        row = _wrap_up(row, top, bot)
        if row == first:
            return None


def find_url_last(lines, top, bot, start_row, colend):
    """Scan upwards from ``start_row`` for the last URL before column ``colend``."""
    row = min(max(start_row, top), bot)
    width = max((len(line) for line in lines), default=0)
    colend = min(max(colend, 0), width)
    for _ in range(bot + 2):
        text = lines[row][:colend]
        pos = find_last_any(text, URLSTRINGS)
        if pos is not None:
            return UrlMatch(row, pos, trim_url(text[pos:]))
        row = _wrap_up(row, top, bot)
        colend = width
    return None