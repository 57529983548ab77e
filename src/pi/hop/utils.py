"""Terminal width helpers: ANSI stripping and per-character column widths.

Layout in this package is addressed by character (code point), so widths
are measured per character for positioning, and per grapheme cluster when
measuring a finished rendered line.
"""

from __future__ import annotations

import re

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# ANSI stripping
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

RESET = "\x1b[0m"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    return _STRIP_RE.sub("", text)


# ---------------------------------------------------------------------------
# Widths
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def char_width(ch: str, tab_width: int = 4, column: int = 0) -> int:
    """Return the number of terminal columns *ch* occupies at *column*.

    Tabs advance to the next multiple of *tab_width*. Control characters and
    combining marks take no columns.
    """
    if ch == "\t":
        return tab_width - (column % tab_width) if tab_width > 0 else 0
    cp = ord(ch)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    return max(_wcwidth.wcwidth(ch), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of an already rendered *text*.

    ANSI escape sequences are ignored. Non-ASCII input is measured by
    grapheme cluster and cached.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += max(_wcwidth.wcswidth(g), 0)

    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[stripped] = total
    return total


def truncate_to_width(text: str, max_width: int) -> str:
    """Return the longest prefix of plain *text* that fits in *max_width* columns.

    The text is cut at grapheme boundaries, so a wide or combined cluster is
    never split.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = visible_width(g)
        if cols + w > max_width:
            break
        result.append(g)
        cols += w
    return "".join(result)


def is_line_terminator(ch: str | None) -> bool:
    return ch == "\n"
