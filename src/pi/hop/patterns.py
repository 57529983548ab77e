"""Search patterns and the match locator."""

from __future__ import annotations

import functools
import re

from pi.hop.errors import PatternError
from pi.hop.text import Point, Span, Text

# Runs of anything but whitespace.
WORD_PATTERN = r"[^\n\s]+"

# A non-blank line: one non-space character, then the rest of the line.
# Blank and single-character lines do not match.
LINE_PATTERN = r"[^\n\s][^\n]+"


@functools.lru_cache(maxsize=64)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile *pattern*, raising :class:`PatternError` if it is malformed."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc


def locate_matches(text: Text, pattern: str, start: Point, end: Point) -> list[Span]:
    """Return the matches of *pattern* in ``[start, end)`` in document order."""
    return list(text.search_fwd(compile_pattern(pattern), start, end))
