import pytest

from stterm.keys import (
    BASE_KEYS,
    KEYSYMS,
    MAPPED_KEYS,
    SPECIAL_KEYS,
    Key,
    Mod,
    is_mapped,
)


def _find(table, name, mask, appkey=None, appcursor=None):
    code = KEYSYMS[name]
    return [
        k.string
        for k in table
        if k.keysym == code
        and k.mask == mask
        and (appkey is None or k.appkey == appkey)
        and (appcursor is None or k.appcursor == appcursor)
    ]


def test_uppercase_letters_are_mapped_lowercase_mostly_not():
    assert is_mapped("A")
    assert is_mapped(ord("Z"))
    assert is_mapped("i")
    assert is_mapped("m")
    assert not is_mapped("a")


def test_function_keysyms_are_mapped():
    assert is_mapped("F1")
    assert is_mapped("Up")
    assert is_mapped(0xFD00)
    assert not is_mapped(0xFCFF)


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        is_mapped("NoSuchKey")


def test_mapped_keys_contains_punctuation_and_digits():
    assert is_mapped("asciitilde")
    assert all(is_mapped(d) for d in "0123456789")
    assert KEYSYMS["asciitilde"] in MAPPED_KEYS
    assert all(KEYSYMS[d] in MAPPED_KEYS for d in "0123456789")


def test_arrow_sequences_depend_on_appcursor():
    assert Key("Up", Mod.ANY, "\033[A", appcursor=-1) in BASE_KEYS
    assert Key("Up", Mod.ANY, "\033OA", appcursor=1) in BASE_KEYS
    assert _find(BASE_KEYS, "Up", Mod.ANY, appcursor=-1) == ["\033[A"]
    assert _find(BASE_KEYS, "Up", Mod.ANY, appcursor=1) == ["\033OA"]
    assert _find(BASE_KEYS, "Right", Mod.SHIFT | Mod.CONTROL | Mod.MOD1) == ["\033[1;8C"]
    assert _find(BASE_KEYS, "Left", Mod.CONTROL) == ["\033[1;5D"]


def test_each_arrow_has_nine_entries():
    for name in ("Up", "Down", "Left", "Right"):
        assert is_mapped(name)
        assert sum(k.keysym == KEYSYMS[name] for k in BASE_KEYS) == 9


def test_function_keys():
    assert Key("F1", Mod.NONE, "\033OP") in BASE_KEYS
    assert is_mapped("F35")
    assert _find(BASE_KEYS, "F1", Mod.NONE) == ["\033OP"]
    assert _find(BASE_KEYS, "F3", Mod.MOD3) == ["\033[1;4R"]
    assert _find(BASE_KEYS, "F4", Mod.MOD3) == []
    assert _find(BASE_KEYS, "F12", Mod.MOD1) == ["\033[24;3~"]
    assert _find(BASE_KEYS, "F13", Mod.NONE) == ["\033[1;2P"]
    assert _find(BASE_KEYS, "F35", Mod.NONE) == ["\033[23;5~"]


def test_backspace_and_return():
    assert Key("BackSpace", Mod.NONE, "\x7f") in BASE_KEYS
    assert Key("Return", Mod.MOD1, "\033\r") in BASE_KEYS
    assert _find(BASE_KEYS, "BackSpace", Mod.NONE) == ["\x7f"]
    assert _find(BASE_KEYS, "BackSpace", Mod.MOD1) == ["\033\x7f"]
    assert _find(BASE_KEYS, "Return", Mod.MOD1) == ["\033\r"]


def test_special_keys_csi_u():
    assert Key("Escape", Mod.SHIFT, "\033[27;2u") in SPECIAL_KEYS
    assert Key("Delete", Mod.NONE, "\033[3~", appkey=1) in SPECIAL_KEYS
    assert _find(SPECIAL_KEYS, "Tab", Mod.CONTROL | Mod.SHIFT) == ["\033[1;5Z"]
    assert _find(SPECIAL_KEYS, "Escape", Mod.SHIFT) == ["\033[27;2u"]
    assert _find(SPECIAL_KEYS, "Delete", Mod.NONE, appkey=1) == ["\033[3~"]
    assert _find(SPECIAL_KEYS, "Home", Mod.CONTROL) == []


def test_special_keys_follow_modifier_order():
    assert Key("BackSpace", Mod.SHIFT, "\033[127;2u") in SPECIAL_KEYS
    backspace = [k for k in SPECIAL_KEYS if k.keysym == KEYSYMS["BackSpace"]]
    params = [int(k.string.split(";")[1][:-1]) for k in backspace]
    assert params == [5, 6, 3, 7, 8, 4, 2]


def test_key_accepts_names_and_validates():
    key = Key("Up", Mod.SHIFT, "x")
    assert key.keysym == KEYSYMS["Up"]
    with pytest.raises(ValueError):
        Key("Up", Mod.SHIFT, "x", appkey=3)
    with pytest.raises(ValueError):
        Key("Up", Mod.SHIFT, "x", appcursor=2)


def test_key_is_frozen():
    key = Key("Up", Mod.SHIFT, "x")
    with pytest.raises(AttributeError):
        key.string = "y"
    assert key.string == "x"
    assert key.mask == Mod.SHIFT


def test_mod_any_covers_all_masks():
    assert Mod(int(Mod.ANY)) & Mod.MOD5 == Mod.MOD5
    assert Mod(0) == Mod.NONE