"""Keystroke label generation.

Labels are positional: match ``i`` always receives ``generate_labels(n)[i]``.
The first ``double`` letters are reserved as first characters of two-letter
labels and never appear as one-letter labels, so the result is prefix-free.
"""

from __future__ import annotations

import math

LETTERS = "abcdefghijklmnopqrstuvwxyz"

# Every two-letter combination is in use once ``double`` reaches 26.
MAX_LABELS = len(LETTERS) * len(LETTERS)


def double_count(n: int) -> int:
    """Number of letters reserved as two-letter prefixes for *n* matches.

    Each reserved letter trades one one-letter label for 26 two-letter
    ones, so the smallest count covering *n* is ``ceil((n - 26) / 25)``.
    """
    size = len(LETTERS)
    if n <= size:
        return 0
    return min(math.ceil((n - size) / (size - 1)), size)


def generate_labels(n: int) -> list[str]:
    """Return at least *n* prefix-free labels, one-letter labels first.

    For ``n > MAX_LABELS`` only ``MAX_LABELS`` labels come back; callers
    must check the length rather than assume coverage.
    """
    if n < 0:
        raise ValueError(f"label count must be non-negative, got {n}")

    double = double_count(n)

    labels = list(LETTERS[double:])
    labels.extend(c1 + c2 for c1 in LETTERS[:double] for c2 in LETTERS)
    return labels


def is_prefix_free(labels: list[str]) -> bool:
    """Check that labels are distinct and none is a prefix of another."""
    ordered = sorted(labels)
    return not any(b.startswith(a) for a, b in zip(ordered, ordered[1:]))
