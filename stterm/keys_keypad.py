"""Escape sequences sent for numeric keypad keys."""

from __future__ import annotations

from stterm.keys import KEYSYMS, MOD_PARAM, Key, Mod

NO = Mod.NONE

_FULL = (5, 6, 3, 7, 8, 4, 2)
_NO_SHIFT = (5, 6, 3, 7, 8, 4)
_FIVE = (6, 3, 7, 8, 4)


def _csi_u(name, code, params=_FULL):
    return [Key(name, MOD_PARAM[p], f"\033[{code};{p}u") for p in params]


def _keypad_keys():
    keys = []
    keys += [
        Key("KP_Home", NO, "\033[H", 0, -1),
        Key("KP_Home", NO, "\033[1~", 0, 1),
    ]
    keys += _csi_u("KP_Home", 149)
    for name, letter, app, code in (
        ("KP_Up", "A", "x", 151),
        ("KP_Down", "B", "r", 153),
        ("KP_Left", "D", "t", 150),
        ("KP_Right", "C", "v", 152),
    ):
        keys += [
            Key(name, NO, f"\033O{app}", 1, 0),
            Key(name, NO, f"\033[{letter}", 0, -1),
            Key(name, NO, f"\033O{letter}", 0, 1),
        ]
        keys += _csi_u(name, code)
    keys += [Key("KP_Prior", NO, "\033[5~")] + _csi_u("KP_Prior", 154, _NO_SHIFT)
    keys += [Key("KP_Begin", NO, "\033[E")] + _csi_u("KP_Begin", 157)
    keys += [Key("KP_End", NO, "\033[4~")] + _csi_u("KP_End", 156, _FIVE)
    keys += [Key("KP_Next", NO, "\033[6~")] + _csi_u("KP_Next", 155, _NO_SHIFT)
    keys += [
        Key("KP_Insert", NO, "\033[4h", -1),
        Key("KP_Insert", NO, "\033[2~", 1),
    ]
    keys += _csi_u("KP_Insert", 158, _FIVE)
    keys += [
        Key("KP_Delete", NO, "\033[P", -1),
        Key("KP_Delete", NO, "\033[3~", 1),
    ]
    keys += _csi_u("KP_Delete", 159, _FIVE)
    keys += [Key("KP_Multiply", NO, "\033Oj", 2)] + _csi_u("KP_Multiply", 170)
    keys += [Key("KP_Add", NO, "\033Ok", 2)] + _csi_u("KP_Add", 171)
    keys += [
        Key("KP_Enter", NO, "\033OM", 2),
        Key("KP_Enter", NO, "\r", -1),
        Key("KP_Enter", NO, "\r\n", -1),
    ]
    keys += _csi_u("KP_Enter", 141)
    keys += [Key("KP_Subtract", NO, "\033Om", 2)] + _csi_u("KP_Subtract", 173)
    keys += [Key("KP_Decimal", NO, "\033On", 2)] + _csi_u("KP_Decimal", 174)
    keys += [Key("KP_Divide", NO, "\033Oo", 2)] + _csi_u("KP_Divide", 175)
    keys += [Key("KP_0", NO, "\033Op", 2)] + _csi_u("KP_0", 176)
    # The modified bindings following KP_1 are registered on KP_0 in the table.
    keys += [Key("KP_1", NO, "\033Oq", 2)] + _csi_u("KP_0", 177)
    for digit, app, code in (
        (2, "r", 178), (3, "s", 179), (4, "t", 180), (5, "u", 181),
        (6, "v", 182), (7, "w", 183), (8, "x", 184), (9, "y", 185),
    ):
        name = f"KP_{digit}"
        keys += [Key(name, NO, f"\033O{app}", 2)] + _csi_u(name, code)
    return tuple(keys)


KEYPAD_KEYS = _keypad_keys()
"""Keypad bindings in the CSI u compatible encoding, in table order."""


def _code(keysym):
    if isinstance(keysym, str):
        try:
            return KEYSYMS[keysym]
        except KeyError:
            raise ValueError(f"unknown keysym name {keysym!r}") from None
    return int(keysym)


def keypad_entries(keysym):
    """Return the keypad bindings for ``keysym`` (code or name), in table order."""
    code = _code(keysym)
    return tuple(key for key in KEYPAD_KEYS if key.keysym == code)