"""The hop mode: label every visible match and jump to the one typed.

Entering the mode draws a backdrop over the visible area and a label over
each match. Each keystroke narrows the candidates to those whose label
starts with what was typed, retracting the rest. Typing a whole label
selects its match. At most two keystrokes are read.
"""

from __future__ import annotations

import enum
import logging

from pi.hop.errors import LabelCapacityError, PatternError
from pi.hop.keys import plain_char
from pi.hop.labels import LETTERS, generate_labels
from pi.hop.modes import ModeManager
from pi.hop.overlay import OverlayManager
from pi.hop.patterns import LINE_PATTERN, WORD_PATTERN, locate_matches
from pi.hop.tags import Tagger
from pi.hop.text import Span
from pi.hop.viewport import visible_range

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid label input"


class HopState(enum.Enum):
    IDLE = "idle"
    AWAITING = "awaiting"
    RESOLVED = "resolved"
    ABORTED = "aborted"


class Hopper:
    """One hop session. Create a fresh instance for every entry."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.label_tagger = Tagger.new("hop")
        self.backdrop_tagger = Tagger.new("hop.cloak")
        self.points: list[Span] = []
        self.labels: list[str] = []
        self.seq = ""
        self.state = HopState.IDLE
        self.resolved: Span | None = None
        self._candidates: dict[str, Span] = {}
        self._overlays: OverlayManager | None = None

    @classmethod
    def word(cls) -> Hopper:
        """Hop to any run of non-whitespace characters."""
        return cls(WORD_PATTERN)

    @classmethod
    def line(cls) -> Hopper:
        """Hop to any line with at least two characters, skipping indentation."""
        return cls(LINE_PATTERN)

    @classmethod
    def with_regex(cls, pattern: str) -> Hopper:
        return cls(pattern)

    def __repr__(self) -> str:
        return f"Hopper(pattern={self.pattern!r}, state={self.state.value}, seq={self.seq!r})"

    @property
    def candidates(self) -> dict[str, Span]:
        """Labels still reachable from the typed sequence, with their matches."""
        return dict(self._candidates)

    # -- Lifecycle ----------------------------------------------------------

    def on_enter(self, host: ModeManager) -> None:
        doc = host.document
        text = doc.text
        overlays = self._overlays = OverlayManager(text, self.label_tagger, self.backdrop_tagger)

        start, end = visible_range(host.area, text, doc.print_options)
        overlays.install_backdrop(start, end)

        try:
            self.points = locate_matches(text, self.pattern, start, end)
        except PatternError:
            overlays.clear()
            self.state = HopState.ABORTED
            raise

        try:
            self.labels = self._label_points()
        except LabelCapacityError as err:
            logger.exception("aborting hop session")
            host.report_error(str(err))
            self._finish(host, HopState.ABORTED)
            return

        for label, match in zip(self.labels, self.points):
            overlays.install(label, match)

        self._candidates = dict(zip(self.labels, self.points))
        self.seq = ""
        self.state = HopState.AWAITING
        logger.debug(
            "hop entered: %d matches in chars %d..%d", len(self.points), start.char, end.char
        )

    def send_key(self, host: ModeManager, data: str) -> None:
        if self.state is not HopState.AWAITING:
            return

        char = plain_char(data)
        if char is None or not char.isalpha():
            host.report_error(INVALID_INPUT_MESSAGE)
            self._finish(host, HopState.ABORTED)
            return

        self.seq += char
        host.document.selections.remove_extras()

        overlays = self._overlays
        if overlays is None:
            return

        for label, match in list(self._candidates.items()):
            if label == self.seq:
                host.document.selections.move_primary_to(*match)
                self.resolved = match
                logger.debug("hop resolved %r to chars %d..%d", label, match[0].char, match[1].char)
                self._finish(host, HopState.RESOLVED)
                return
            if label.startswith(self.seq):
                continue
            overlays.retract(match)
            del self._candidates[label]

        if len(self.seq) == 2 or char not in LETTERS or not self._candidates:
            self._finish(host, HopState.ABORTED)

    def before_exit(self, host: ModeManager) -> None:
        if self._overlays is not None:
            self._overlays.clear()
        self._candidates.clear()
        if self.state is HopState.AWAITING:
            self.state = HopState.ABORTED
        logger.debug("hop exited: %s", self.state.value)

    def _finish(self, host: ModeManager, state: HopState) -> None:
        self.state = state
        if host.active is self:
            host.exit_current_mode()
        else:
            self.before_exit(host)

    def _label_points(self) -> list[str]:
        labels = generate_labels(len(self.points))
        if len(labels) < len(self.points):
            raise LabelCapacityError(len(self.points), len(labels))
        return labels
