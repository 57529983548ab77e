"""Tag store: annotations attached to a text without changing its content.

Every tag belongs to a :class:`Tagger`, an opaque channel id, so that one
feature can remove all of its own tags without touching anyone else's.
Tags are addressed in UTF-8 bytes.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

_tagger_ids = itertools.count(1)


@dataclass(frozen=True)
class Tagger:
    """Opaque identifier for a tag channel."""

    id: int
    name: str = ""

    @classmethod
    def new(cls, name: str = "") -> Tagger:
        return cls(next(_tagger_ids), name)


# ---------------------------------------------------------------------------
# Tag kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ghost:
    """Text displayed at a point, styled per segment.

    ``segments`` is a sequence of ``(form_name, text)`` pairs.
    """

    segments: tuple[tuple[str, str], ...]
    priority: int = 0

    @property
    def text(self) -> str:
        return "".join(text for _, text in self.segments)


@dataclass(frozen=True)
class Conceal:
    """Hide the original text of a span."""


@dataclass(frozen=True)
class Marker:
    """Apply a form to a span of original text."""

    form: str
    priority: int = 0


Tag = Union[Ghost, Conceal, Marker]


@dataclass(frozen=True)
class TagEntry:
    tagger: Tagger
    start: int
    end: int
    tag: Tag


# ---------------------------------------------------------------------------
# TagStore
# ---------------------------------------------------------------------------


class TagStore:
    """Holds tag entries in insertion order."""

    def __init__(self) -> None:
        self._entries: list[TagEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def insert_tag(self, tagger: Tagger, at: int | tuple[int, int], tag: Tag) -> None:
        """Attach *tag* at byte *at*, or over the byte span ``(start, end)``."""
        start, end = (at, at) if isinstance(at, int) else at
        if end < start:
            raise ValueError(f"tag span ends before it starts: {start}..{end}")
        self._entries.append(TagEntry(tagger, start, end, tag))

    def remove_tags(
        self, taggers: Tagger | Iterable[Tagger], at: int | None = None
    ) -> int:
        """Remove the tags of *taggers* starting at byte *at*, or all of them.

        Tags that share a starting byte go together, so removing the ghost
        of a label also removes its conceal span. Removing tags that are not
        there is a no-op. Returns the number of tags removed.
        """
        ids = {taggers.id} if isinstance(taggers, Tagger) else {t.id for t in taggers}
        kept = [
            e for e in self._entries
            if e.tagger.id not in ids or (at is not None and e.start != at)
        ]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def count(self, tagger: Tagger | None = None) -> int:
        if tagger is None:
            return len(self._entries)
        return sum(1 for e in self._entries if e.tagger.id == tagger.id)

    def entries(self, tagger: Tagger | None = None) -> Iterator[TagEntry]:
        for e in self._entries:
            if tagger is None or e.tagger.id == tagger.id:
                yield e

    def ghosts_at(self, byte: int) -> list[Ghost]:
        """Ghosts anchored at *byte*, highest priority first."""
        ghosts = [
            e.tag for e in self._entries
            if isinstance(e.tag, Ghost) and e.start == byte
        ]
        return sorted(ghosts, key=lambda g: -g.priority)

    def is_concealed(self, byte: int) -> bool:
        return any(
            isinstance(e.tag, Conceal) and e.start <= byte < e.end
            for e in self._entries
        )

    def marker_at(self, byte: int) -> Marker | None:
        """The highest-priority marker covering *byte*."""
        best: Marker | None = None
        for e in self._entries:
            if isinstance(e.tag, Marker) and e.start <= byte < e.end:
                if best is None or e.tag.priority > best.priority:
                    best = e.tag
        return best
