"""In-memory text buffer with byte and character addressing.

Positions are :class:`Point` values carrying the UTF-8 byte offset, the
character (code point) offset and the line index of the same location.
Tags are keyed by byte offset; regex search and cursor movement work in
characters.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from typing import Iterator

from pi.hop.tags import TagStore


@dataclass(frozen=True, order=True)
class Point:
    """A location in a :class:`Text`."""

    byte: int
    char: int
    line: int


Span = tuple[Point, Point]


class Text:
    """Immutable content plus a mutable :class:`TagStore`."""

    def __init__(self, content: str = "") -> None:
        self._content = content
        self._byte_offsets: list[int] = [0]
        for ch in content:
            self._byte_offsets.append(self._byte_offsets[-1] + len(ch.encode("utf-8")))
        self._line_starts: list[int] = [0]
        self._line_starts.extend(m.end() for m in re.finditer("\n", content))
        self.tags = TagStore()

    def __str__(self) -> str:
        return self._content

    @property
    def len_chars(self) -> int:
        return len(self._content)

    @property
    def len_bytes(self) -> int:
        return self._byte_offsets[-1]

    @property
    def len_lines(self) -> int:
        return len(self._line_starts)

    # -- Addressing ---------------------------------------------------------

    def point_at_char(self, char: int) -> Point:
        """Return the point at character offset *char* (clamped to the text)."""
        char = min(max(char, 0), len(self._content))
        line = bisect.bisect_right(self._line_starts, char) - 1
        return Point(self._byte_offsets[char], char, line)

    def point_at_byte(self, byte: int) -> Point:
        """Return the point at *byte*, which must fall on a character boundary."""
        char = bisect.bisect_left(self._byte_offsets, byte)
        if char >= len(self._byte_offsets) or self._byte_offsets[char] != byte:
            raise ValueError(f"byte {byte} is not on a character boundary")
        return self.point_at_char(char)

    def point_at_line(self, line: int) -> Point:
        """Return the point at the start of *line* (clamped to the last line)."""
        line = min(max(line, 0), len(self._line_starts) - 1)
        return self.point_at_char(self._line_starts[line])

    def line_end(self, line: int) -> Point:
        """Return the point just after the last character of *line*, newline included."""
        if line + 1 < len(self._line_starts):
            return self.point_at_char(self._line_starts[line + 1])
        return self.point_at_char(len(self._content))

    def line(self, line: int) -> str:
        """Return the content of *line* without its line terminator."""
        start = self._line_starts[line]
        return self._content[start : self.line_end(line).char].rstrip("\n")

    def char_at(self, point: Point) -> str | None:
        """Return the character at *point*, or ``None`` at the end of the text."""
        if point.char >= len(self._content):
            return None
        return self._content[point.char]

    def chars_fwd(self, point: Point) -> Iterator[tuple[Point, str]]:
        """Yield ``(point, char)`` pairs from *point* to the end of the text."""
        for char in range(point.char, len(self._content)):
            yield self.point_at_char(char), self._content[char]

    def slice(self, start: Point, end: Point) -> str:
        return self._content[start.char : end.char]

    # -- Search -------------------------------------------------------------

    def search_fwd(
        self, pattern: re.Pattern[str], start: Point, end: Point
    ) -> Iterator[Span]:
        """Yield the non-empty, non-overlapping matches of *pattern* in ``[start, end)``."""
        for m in pattern.finditer(self._content, start.char, end.char):
            if m.end() > m.start():
                yield self.point_at_char(m.start()), self.point_at_char(m.end())
