"""Exception types raised by the hop engine."""

from __future__ import annotations


class HopError(Exception):
    """Base class for hop errors."""


class PatternError(HopError, ValueError):
    """A search pattern failed to compile.

    This is a configuration error: mode entry is aborted and the error is
    propagated to whoever requested the mode.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid hop pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class LabelCapacityError(HopError):
    """Fewer labels were generated than there are matches to label."""

    def __init__(self, matches: int, labels: int) -> None:
        super().__init__(
            f"{matches} matches on screen but only {labels} labels available"
        )
        self.matches = matches
        self.labels = labels
