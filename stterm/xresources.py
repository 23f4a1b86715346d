"""Loading preferences from an X resource database string."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any

_INT_RE = re.compile(r"\s*([+-]?)(\d*)")
_FLOAT_RE = re.compile(r"\s*[+-]?(\d+\.?\d*([eE][+-]?\d+)?|\.\d+([eE][+-]?\d+)?|inf(inity)?|nan)", re.I)


class ResourceType(enum.IntEnum):
    """How a resource value is converted."""

    STRING = 0
    INTEGER = 1
    FLOAT = 2


@dataclass
class ResourcePref:
    """A named preference, its type and its current value."""

    name: str
    type: ResourceType
    value: Any = None


def parse_resource_database(text):
    """Parse ``name: value`` lines into a dict; ``!`` starts a comment line."""
    db = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("!") or ":" not in line:
            continue
        key, _, value = line.partition(":")
        db[key.strip()] = value.strip()
    return db


def _to_int(text):
    m = _INT_RE.match(text)
    if not m.group(2):
        return 0
    value = int(m.group(2))
    return -value if m.group(1) == "-" else value


def _to_float(text):
    m = _FLOAT_RE.match(text)
    return float(m.group(0)) if m else 0.0


def resource_load(db, name, rtype, opt_name=None, opt_class=None):
    """Look up ``name`` and convert it, or return None when absent."""
    fullname = f"{opt_name or 'st'}.{name}"
    fullclass = f"{opt_class or 'St'}.{name}"
    for key in (fullname, fullclass, f"*{name}", f"*.{name}"):
        if key in db:
            value = db[key]
            break
    else:
        return None
    rtype = ResourceType(rtype)
    if rtype is ResourceType.INTEGER:
        return _to_int(value)
    if rtype is ResourceType.FLOAT:
        return _to_float(value)
    return value


def config_init(db_text, prefs, opt_name=None, opt_class=None):
    """Fill ``prefs`` from ``db_text``; entries not present keep their value."""
    if not db_text:
        return prefs
    db = parse_resource_database(db_text)
    for pref in prefs:
        value = resource_load(db, pref.name, pref.type, opt_name, opt_class)
        if value is not None:
            pref.value = value
    return prefs