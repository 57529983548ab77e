"""Label overlays: a ghost with the label glyphs plus a conceal span.

Both tags of a label start at the match's first byte, so retracting the
tags at that byte takes the pair off together.
"""

from __future__ import annotations

from pi.hop.forms import CHAR1_FORM, CHAR2_FORM, CLOAK_FORM, ONE_CHAR_FORM
from pi.hop.tags import Conceal, Ghost, Marker, Tagger
from pi.hop.text import Point, Span, Text
from pi.hop.utils import is_line_terminator

LABEL_PRIORITY = 102
BACKDROP_PRIORITY = 101


def conceal_end(text: Text, match: Span, label: str) -> int:
    """Return the byte where the span hidden under *label* ends.

    The span covers as many characters as the label has glyphs, except that
    a one-character match right before a line terminator hides only itself.
    """
    p0, p1 = match
    if p1.char == p0.char + 1 and is_line_terminator(text.char_at(p1)):
        return p1.byte

    end = p0.byte
    for taken, (point, ch) in enumerate(text.chars_fwd(p0)):
        if taken == len(label):
            return point.byte
        end = point.byte + len(ch.encode("utf-8"))
    return end


def label_ghost(label: str) -> Ghost:
    if len(label) == 1:
        return Ghost(((ONE_CHAR_FORM, label),), LABEL_PRIORITY)
    return Ghost(((CHAR1_FORM, label[0]), (CHAR2_FORM, label[1])), LABEL_PRIORITY)


class OverlayManager:
    """Owns the label and backdrop tag channels of one session."""

    def __init__(self, text: Text, label_tagger: Tagger, backdrop_tagger: Tagger) -> None:
        self._text = text
        self.label_tagger = label_tagger
        self.backdrop_tagger = backdrop_tagger

    def install_backdrop(self, start: Point, end: Point) -> None:
        self._text.tags.insert_tag(
            self.backdrop_tagger,
            (start.byte, end.byte),
            Marker(CLOAK_FORM, BACKDROP_PRIORITY),
        )

    def install(self, label: str, match: Span) -> None:
        p0 = match[0]
        tags = self._text.tags
        tags.insert_tag(self.label_tagger, p0.byte, label_ghost(label))
        tags.insert_tag(self.label_tagger, (p0.byte, conceal_end(self._text, match, label)), Conceal())

    def retract(self, match: Span) -> int:
        return self._text.tags.remove_tags(self.label_tagger, match[0].byte)

    def clear(self) -> int:
        """Remove every tag of both channels; safe to call repeatedly."""
        return self._text.tags.remove_tags([self.label_tagger, self.backdrop_tagger])
