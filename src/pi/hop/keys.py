"""Keyboard input parsing for label entry and mode bindings.

Understands plain characters, control bytes, ESC-prefixed alt keys, the
common legacy CSI/SS3 sequences, and kitty keyboard protocol ``CSI u``
sequences. Key identifiers use the ``"ctrl+shift+alt+name"`` form.
"""

from __future__ import annotations

import re

KeyId = str

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

# Caps lock and num lock bits, ignored when matching.
LOCK_MASK = 64 + 128

_NAMED_CODEPOINTS: dict[int, str] = {
    27: "escape",
    9: "tab",
    13: "enter",
    32: "space",
    127: "backspace",
    57414: "enter",
}

_CSI_FINAL_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}

# CSI u: \x1b[<codepoint>(:<shifted>(:<base>))?(;<modifier>(:<event>))?u
_KITTY_CSI_U_RE = re.compile(
    r"^\x1b\[(\d+)(?::\d*)?(?::\d+)?(?:;(\d+)(?::(\d+))?)?u$"
)
# \x1b[<n>;<modifier>(:<event>)?~  and  \x1b[<n>~
_TILDE_RE = re.compile(r"^\x1b\[(\d+)(?:;(\d+)(?::(\d+))?)?~$")
# \x1b[1;<modifier>(:<event>)?<final>,  \x1b[<final>,  \x1bO<final>
_CSI_FINAL_RE = re.compile(r"^\x1b(?:\[(?:1;(\d+)(?::(\d+))?)?|O)([ABCDHFPQRS])$")


def _prefix(modifier: int) -> str:
    mod = (modifier - 1) & ~LOCK_MASK
    prefix = ""
    if mod & MODIFIERS["ctrl"]:
        prefix += "ctrl+"
    if mod & MODIFIERS["shift"]:
        prefix += "shift+"
    if mod & MODIFIERS["alt"]:
        prefix += "alt+"
    return prefix


def is_key_release(data: str) -> bool:
    """Kitty reports releases with event type 3; those are not keystrokes."""
    for regex in (_KITTY_CSI_U_RE, _TILDE_RE):
        m = regex.match(data)
        if m and m.group(3) == "3":
            return True
    m = _CSI_FINAL_RE.match(data)
    return bool(m and m.group(2) == "3")


def parse_key(data: str) -> KeyId | None:  # noqa: C901
    """Parse raw terminal input and return its key identifier, or ``None``.

    Plain printable characters come back unchanged (``"a"``, ``"A"``,
    ``"é"``); everything else is named (``"ctrl+a"``, ``"escape"``, ``"up"``).
    """
    if not data:
        return None

    m = _KITTY_CSI_U_RE.match(data)
    if m:
        codepoint = int(m.group(1))
        prefix = _prefix(int(m.group(2) or 1))
        name = _NAMED_CODEPOINTS.get(codepoint)
        if name is not None:
            return prefix + name
        ch = chr(codepoint)
        if ch.isprintable():
            return prefix + (ch.lower() if prefix else ch)
        return None

    m = _TILDE_RE.match(data)
    if m:
        name = _TILDE_KEYS.get(int(m.group(1)))
        if name is None:
            return None
        return _prefix(int(m.group(2) or 1)) + name

    m = _CSI_FINAL_RE.match(data)
    if m:
        return _prefix(int(m.group(1) or 1)) + _CSI_FINAL_KEYS[m.group(3)]

    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"
    if data == "\x00":
        return "ctrl+space"
    if data == "\x1b[Z":
        return "shift+tab"

    # Ctrl + letter (0x01 - 0x1a)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # Alt + key (ESC prefix)
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key(data[1])
        if inner is None:
            return None
        if len(inner) == 1 and inner.isupper():
            return "shift+alt+" + inner.lower()
        if inner.startswith("ctrl+"):
            return "ctrl+alt+" + inner[len("ctrl+"):]
        return "alt+" + inner

    if len(data) == 1 and data.isprintable():
        return data

    return None


def normalize_key_id(key_id: KeyId) -> KeyId:
    """Put modifiers of *key_id* in canonical ``ctrl+shift+alt+`` order."""
    if len(key_id) == 1:
        return key_id
    parts = key_id.split("+")
    # "ctrl++" binds the plus key itself
    if key_id.endswith("++"):
        parts = parts[:-2] + ["+"]
    *mods, name = parts
    mods = [m.lower() for m in mods]
    unknown = set(mods) - set(MODIFIERS)
    if unknown:
        raise ValueError(f"unknown modifier(s) in key id {key_id!r}: {sorted(unknown)}")
    ordered = [m for m in ("ctrl", "shift", "alt") if m in mods]
    if ordered and len(name) == 1:
        name = name.lower()
    return "+".join(ordered + [name])


def matches_key(data: str, key_id: KeyId) -> bool:
    """Check whether raw input *data* is the key named by *key_id*."""
    parsed = parse_key(data)
    return parsed is not None and parsed == normalize_key_id(key_id)


def plain_char(data: str) -> str | None:
    """Return the character typed by *data* when it carries no modifiers."""
    key = parse_key(data)
    if key is None or key == "space":
        return None
    if len(key) == 1:
        return key
    return None
