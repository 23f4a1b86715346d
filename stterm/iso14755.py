"""Entering a character by its hexadecimal codepoint via an external prompt."""

from __future__ import annotations

import string
import subprocess

ISO14755CMD = 'dmenu -w "$WINDOWID" -p codepoint: </dev/null'

_READ_LIMIT = 8
_ULONG_MAX = 2**64 - 1
_UTF_MAX = 0x10FFFF
_UTF_INVALID = 0xFFFD
_SPACE = " \t\n\v\f\r"


def _strtoul16(text):
    """Parse like strtoul with base 16; return (value, unparsed rest)."""
    i, n = 0, len(text)
    while i < n and text[i] in _SPACE:
        i += 1
    negative = False
    if i < n and text[i] in "+-":
        negative = text[i] == "-"
        i += 1
    if text[i:i + 2].lower() == "0x" and i + 2 < n and text[i + 2] in string.hexdigits:
        i += 2
    start = i
    while i < n and text[i] in string.hexdigits:
        i += 1
    if i == start:
        return 0, text
    value = int(text[start:i], 16)
    if value > _ULONG_MAX:
        value = _ULONG_MAX
    elif negative:
        value = -value % (_ULONG_MAX + 1)
    return value, text[i:]


def parse_codepoint(text):
    """Return the character named by the first line of ``text``, or None if invalid."""
    line = text[:_READ_LIMIT]
    newline = line.find("\n")
    if newline != -1:
        line = line[:newline + 1]
    if not line or line.startswith("-") or len(line) > 7:
        return None
    value, rest = _strtoul16(line)
    if value == _ULONG_MAX or (rest and rest[0] != "\n"):
        return None
    if value > _UTF_MAX or 0xD800 <= value <= 0xDFFF:
        value = _UTF_INVALID
    return chr(value)


def prompt_codepoint(command=ISO14755CMD):
    """Run ``command`` in a shell and return the character it names, or None."""
    try:
        result = subprocess.run(
            command, shell=True, stdout=subprocess.PIPE, text=True, check=False
        )
    except OSError:
        return None
    return parse_codepoint(result.stdout)