"""Key symbols, modifier masks and the escape sequences sent for special keys."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

_PUNCTUATION = {
    "space": 0x20, "exclam": 0x21, "quotedbl": 0x22, "numbersign": 0x23,
    "dollar": 0x24, "percent": 0x25, "ampersand": 0x26, "apostrophe": 0x27,
    "parenleft": 0x28, "parenright": 0x29, "asterisk": 0x2A, "plus": 0x2B,
    "comma": 0x2C, "minus": 0x2D, "period": 0x2E, "slash": 0x2F,
    "colon": 0x3A, "semicolon": 0x3B, "less": 0x3C, "equal": 0x3D,
    "greater": 0x3E, "question": 0x3F, "at": 0x40, "bracketleft": 0x5B,
    "backslash": 0x5C, "bracketright": 0x5D, "asciicircum": 0x5E,
    "underscore": 0x5F, "grave": 0x60, "braceleft": 0x7B, "bar": 0x7C,
    "braceright": 0x7D, "asciitilde": 0x7E,
}

_SPECIAL = {
    "BackSpace": 0xFF08, "Tab": 0xFF09, "Return": 0xFF0D, "Pause": 0xFF13,
    "Scroll_Lock": 0xFF14, "Escape": 0xFF1B, "Home": 0xFF50, "Left": 0xFF51,
    "Up": 0xFF52, "Right": 0xFF53, "Down": 0xFF54, "Prior": 0xFF55,
    "Next": 0xFF56, "End": 0xFF57, "Print": 0xFF61, "Insert": 0xFF63,
    "Menu": 0xFF67, "Delete": 0xFFFF, "ISO_Left_Tab": 0xFE20,
    "KP_Enter": 0xFF8D, "KP_Home": 0xFF95, "KP_Left": 0xFF96, "KP_Up": 0xFF97,
    "KP_Right": 0xFF98, "KP_Down": 0xFF99, "KP_Prior": 0xFF9A,
    "KP_Next": 0xFF9B, "KP_End": 0xFF9C, "KP_Begin": 0xFF9D,
    "KP_Insert": 0xFF9E, "KP_Delete": 0xFF9F, "KP_Multiply": 0xFFAA,
    "KP_Add": 0xFFAB, "KP_Subtract": 0xFFAD, "KP_Decimal": 0xFFAE,
    "KP_Divide": 0xFFAF,
}

KEYSYMS: dict[str, int] = {}
KEYSYMS.update(_PUNCTUATION)
KEYSYMS.update({ch: ord(ch) for ch in string.ascii_letters + string.digits})
KEYSYMS.update(_SPECIAL)
KEYSYMS.update({f"KP_{n}": 0xFFB0 + n for n in range(10)})
KEYSYMS.update({f"F{n}": 0xFFBE + n - 1 for n in range(1, 36)})

_FUNCTION_KEY_RANGE = range(0xFD00, 0x10000)


class Mod(enum.IntFlag):
    """Modifier masks as reported in a key event's state."""

    NONE = 0
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7
    ANY = 0xFFFFFFFF


def _keysym(value):
    if isinstance(value, str):
        try:
            return KEYSYMS[value]
        except KeyError:
            raise ValueError(f"unknown keysym name {value!r}") from None
    return int(value)


@dataclass(frozen=True)
class Key:
    """A key binding: keysym and modifiers, the string sent, and mode conditions.

    ``appkey`` and ``appcursor`` are 0 (any mode), -1 (only when the mode is
    off) or +1 (only when it is on); ``appkey`` 2 also excludes num lock.
    """

    keysym: int
    mask: Mod
    string: str
    appkey: int = 0
    appcursor: int = 0

    def __post_init__(self):
        object.__setattr__(self, "keysym", _keysym(self.keysym))
        object.__setattr__(self, "mask", Mod(self.mask))
        if self.appkey not in (-1, 0, 1, 2):
            raise ValueError(f"appkey must be -1, 0, 1 or 2, not {self.appkey}")
        if self.appcursor not in (-1, 0, 1):
            raise ValueError(f"appcursor must be -1, 0 or 1, not {self.appcursor}")


MAPPED_KEYS = frozenset(
    _keysym(name)
    for name in (
        ["space", "m", "i"]
        + list(string.ascii_uppercase)
        + list(string.digits)
        + [
            "exclam", "quotedbl", "numbersign", "dollar", "percent",
            "ampersand", "apostrophe", "parenleft", "parenright", "asterisk",
            "plus", "comma", "minus", "period", "slash", "colon", "semicolon",
            "less", "equal", "greater", "question", "at", "bracketleft",
            "backslash", "bracketright", "asciicircum", "underscore", "grave",
            "braceleft", "bar", "braceright", "asciitilde",
        ]
    )
)


def is_mapped(keysym):
    """Whether ``keysym`` (code or name) is looked up in the key table."""
    code = _keysym(keysym)
    return code in _FUNCTION_KEY_RANGE or code in MAPPED_KEYS


S, C, A = Mod.SHIFT, Mod.CONTROL, Mod.MOD1
NO, ANY = Mod.NONE, Mod.ANY

# xterm-style modifier parameter to mask
MOD_PARAM = {
    2: S, 3: A, 4: S | A, 5: C, 6: S | C, 7: C | A, 8: S | C | A,
}

_CSI_U_ORDER = (5, 6, 3, 7, 8, 4, 2)


def _csi_u(name, code, params=_CSI_U_ORDER):
    return [Key(name, MOD_PARAM[p], f"\033[{code};{p}u") for p in params]


def _base_keys():
    keys = [
        Key("KP_Home", S, "\033[2J", 0, -1),
        Key("KP_Home", S, "\033[1;2H", 0, 1),
        Key("KP_Prior", S, "\033[5;2~"),
        Key("KP_End", C, "\033[J", -1),
        Key("KP_End", C, "\033[1;5F", 1),
        Key("KP_End", S, "\033[K", -1),
        Key("KP_End", S, "\033[1;2F", 1),
        Key("KP_Next", S, "\033[6;2~"),
        Key("KP_Insert", S, "\033[2;2~", 1),
        Key("KP_Insert", S, "\033[4l", -1),
        Key("KP_Insert", C, "\033[L", -1),
        Key("KP_Insert", C, "\033[2;5~", 1),
        Key("KP_Delete", C, "\033[M", -1),
        Key("KP_Delete", C, "\033[3;5~", 1),
        Key("KP_Delete", S, "\033[2K", -1),
        Key("KP_Delete", S, "\033[3;2~", 1),
    ]
    for name, letter in (("Up", "A"), ("Down", "B"), ("Left", "D"), ("Right", "C")):
        keys.extend(Key(name, MOD_PARAM[p], f"\033[1;{p}{letter}") for p in range(2, 9))
        keys.append(Key(name, ANY, f"\033[{letter}", 0, -1))
        keys.append(Key(name, ANY, f"\033O{letter}", 0, 1))
    keys += [
        Key("ISO_Left_Tab", S, "\033[Z"),
        Key("Return", A, "\033\r"),
        Key("Return", NO, "\r"),
        Key("Insert", S, "\033[4l", -1),
        Key("Insert", S, "\033[2;2~", 1),
        Key("Insert", C, "\033[L", -1),
        Key("Insert", C, "\033[2;5~", 1),
        Key("Delete", C, "\033[M", -1),
        Key("Delete", C, "\033[3;5~", 1),
        Key("Delete", S, "\033[2K", -1),
        Key("Delete", S, "\033[3;2~", 1),
        Key("BackSpace", NO, "\x7f"),
        Key("BackSpace", A, "\033\x7f"),
        Key("Home", S, "\033[2J", 0, -1),
        Key("Home", S, "\033[1;2H", 0, 1),
        Key("End", C, "\033[J", -1),
        Key("End", C, "\033[1;5F", 1),
        Key("End", S, "\033[K", -1),
        Key("End", S, "\033[1;2F", 1),
        Key("Prior", C, "\033[5;5~"),
        Key("Prior", S, "\033[5;2~"),
        Key("Next", C, "\033[6;5~"),
        Key("Next", S, "\033[6;2~"),
    ]
    for n, letter in zip(range(1, 5), "PQRS"):
        keys.append(Key(f"F{n}", NO, f"\033O{letter}"))
        mods = [(S, 2), (C, 5), (Mod.MOD4, 6), (A, 3)]
        if n < 4:
            mods.append((Mod.MOD3, 4))
        keys.extend(Key(f"F{n}", m, f"\033[1;{p}{letter}") for m, p in mods)
    codes = (15, 17, 18, 19, 20, 21, 23, 24)
    for n, code in zip(range(5, 13), codes):
        keys.append(Key(f"F{n}", NO, f"\033[{code}~"))
        keys.extend(
            Key(f"F{n}", m, f"\033[{code};{p}~")
            for m, p in ((S, 2), (C, 5), (Mod.MOD4, 6), (A, 3))
        )
    for offset, param, count in ((12, 2, 12), (24, 5, 11)):
        for i in range(count):
            n = offset + 1 + i
            if i < 4:
                seq = f"\033[1;{param}{'PQRS'[i]}"
            else:
                seq = f"\033[{codes[i - 4]};{param}~"
            keys.append(Key(f"F{n}", NO, seq))
    return tuple(keys)


def _special_keys():
    five = (6, 3, 7, 8, 4)
    keys = []
    keys += _csi_u("BackSpace", 127)
    keys += [
        Key("Tab", C, "\033[9;5u"),
        Key("Tab", S | C, "\033[1;5Z"),
        Key("Tab", A, "\033[1;3Z"),
        Key("Tab", A | C, "\033[1;7Z"),
        Key("Tab", A | C | S, "\033[1;8Z"),
        Key("Tab", A | S, "\033[1;4Z"),
    ]
    keys += _csi_u("Return", 13)
    keys += _csi_u("Pause", 18)
    keys += _csi_u("Scroll_Lock", 20)
    keys += _csi_u("Escape", 27)
    keys += [Key("Home", NO, "\033[H", 0, -1), Key("Home", NO, "\033[1~", 0, 1)]
    keys += _csi_u("Home", 80, five)
    keys += [Key("End", NO, "\033[4~")] + _csi_u("End", 87, five)
    keys += [Key("Prior", NO, "\033[5~")] + _csi_u("Prior", 85, five)
    keys += [Key("Next", NO, "\033[6~")] + _csi_u("Next", 86, five)
    keys += _csi_u("Print", 97)
    keys += [Key("Insert", NO, "\033[4h", -1), Key("Insert", NO, "\033[2~", 1)]
    keys += _csi_u("Insert", 99, five)
    keys += _csi_u("Menu", 103)
    keys += [Key("Delete", NO, "\033[P", -1), Key("Delete", NO, "\033[3~", 1)]
    keys += _csi_u("Delete", 255, five)
    return tuple(keys)


BASE_KEYS = _base_keys()
"""Cursor, editing and function keys, in table order."""

SPECIAL_KEYS = _special_keys()
"""Modified editing and control keys in the CSI u encoding, in table order."""