"""Document handle: a text, its tags and its selections."""

from __future__ import annotations

from dataclasses import dataclass, field

from pi.hop.text import Point, Span, Text
from pi.hop.viewport import PrintOptions


@dataclass
class Selection:
    """A caret, optionally extended from an anchor."""

    caret: Point
    anchor: Point | None = None

    @property
    def range(self) -> Span:
        if self.anchor is None:
            return self.caret, self.caret
        return min(self.anchor, self.caret), max(self.anchor, self.caret)


@dataclass
class Selections:
    """The primary selection plus any extra cursors."""

    primary: Selection
    extras: list[Selection] = field(default_factory=list)

    def __len__(self) -> int:
        return 1 + len(self.extras)

    def remove_extras(self) -> None:
        self.extras.clear()

    def move_primary_to(self, start: Point, end: Point) -> None:
        """Select ``[start, end)``, caret at the end."""
        self.primary = Selection(caret=end, anchor=start)


class Document:
    """What a mode operates on while it is active."""

    def __init__(self, content: str = "", print_options: PrintOptions | None = None) -> None:
        self.text = Text(content)
        self.print_options = print_options or PrintOptions()
        self.selections = Selections(Selection(caret=self.text.point_at_char(0)))

    @property
    def tags(self):
        return self.text.tags
