"""Escape sequences sent for modified character keys, and the whole key table."""

from __future__ import annotations

from stterm.keys import BASE_KEYS, KEYSYMS, MOD_PARAM, SPECIAL_KEYS, Key, Mod
from stterm.keys_keypad import KEYPAD_KEYS

S, C, A = Mod.SHIFT, Mod.CONTROL, Mod.MOD1

_FULL = (5, 6, 3, 7, 8, 4)

# Punctuation keys and their codes, in table order, with the modifier
# parameters each one is bound for.
_PUNCTUATION = (
    ("ampersand", 38, _FULL),
    ("apostrophe", 39, _FULL),
    ("asciicircum", 94, _FULL),
    ("asciitilde", 126, _FULL),
    ("asterisk", 42, _FULL),
    ("at", 64, _FULL),
    ("backslash", 92, _FULL),
    ("bar", 124, _FULL),
    ("braceleft", 123, _FULL),
    ("braceright", 125, _FULL),
    ("bracketleft", 91, _FULL),
    ("bracketright", 93, _FULL),
    ("colon", 58, _FULL),
    ("comma", 44, _FULL),
    ("dollar", 36, _FULL),
    ("equal", 61, _FULL),
    ("exclam", 33, _FULL),
    ("grave", 96, _FULL),
    ("greater", 62, _FULL),
    ("less", 60, _FULL),
    ("minus", 45, _FULL),
    ("numbersign", 35, _FULL),
    ("parenleft", 40, _FULL),
    ("parenright", 41, _FULL),
    ("percent", 37, _FULL),
    ("period", 46, (5, 6, 7, 8, 4)),
    ("plus", 43, _FULL),
    ("question", 63, _FULL),
    ("quotedbl", 34, _FULL),
    ("semicolon", 59, _FULL),
    ("slash", 47, (6, 3, 7, 8, 4)),
    ("underscore", 95, _FULL),
)


def _csi_u(name, code, params):
    return [Key(name, MOD_PARAM[p], f"\033[{code};{p}u") for p in params]


def _char_keys():
    keys = []
    keys += _csi_u("i", 105, (5, 7))
    keys += _csi_u("m", 109, (5, 7))
    keys += _csi_u("space", 32, (6, 3, 7, 8, 4, 2))
    keys += _csi_u("0", 48, (5,))
    for letter in "ABCDEFGHI":
        keys += _csi_u(letter, ord(letter), (6,))
    keys += _csi_u("I", 73, (8,))
    # J and K carry each other's codes in the table.
    keys += _csi_u("J", 75, (6,))
    keys += _csi_u("K", 74, (6,))
    keys += _csi_u("L", 76, (6,))
    keys += _csi_u("M", 77, (6, 8))
    for letter in "NOPQRSTUVWXYZ":
        keys += _csi_u(letter, ord(letter), (6,))
    keys += _csi_u("Z", 90, (6,))
    keys += _csi_u("0", 48, (7,))
    for digit in "123456789":
        keys += _csi_u(digit, ord(digit), (5, 7))
    for name, code, params in _PUNCTUATION:
        keys += _csi_u(name, code, params)
    return tuple(keys)


CHAR_KEYS = _char_keys()
"""Modified printable-character bindings in the CSI u encoding, in table order."""

KEY_TABLE = BASE_KEYS + KEYPAD_KEYS + SPECIAL_KEYS + CHAR_KEYS


def _code(keysym):
    if isinstance(keysym, str):
        try:
            return KEYSYMS[keysym]
        except KeyError:
            raise ValueError(f"unknown keysym name {keysym!r}") from None
    return int(keysym)


def char_entries(keysym):
    """Return the character-key bindings for ``keysym`` (code or name), in table order."""
    code = _code(keysym)
    return tuple(key for key in CHAR_KEYS if key.keysym == code)


def all_keys():
    """Return the complete key table in lookup order."""
    return KEY_TABLE


def entries_for(keysym):
    """Return every binding in the table for ``keysym`` (code or name), in order."""
    code = _code(keysym)
    return tuple(key for key in KEY_TABLE if key.keysym == code)