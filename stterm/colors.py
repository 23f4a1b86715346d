"""Colour values and inversion."""

from __future__ import annotations

from dataclasses import dataclass

_MAX = 0xFFFF


@dataclass(frozen=True)
class Color:
    """A 16-bit-per-channel colour."""

    red: int
    green: int
    blue: int
    alpha: int = _MAX


def invert_color(color):
    """Return ``color`` with its RGB channels inverted and alpha kept."""
    return Color(
        red=~color.red & _MAX,
        green=~color.green & _MAX,
        blue=~color.blue & _MAX,
        alpha=color.alpha,
    )