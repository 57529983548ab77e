"""Tests for pi.hop.labels -- prefix-free label generation."""

from __future__ import annotations

import pytest

from pi.hop.labels import (
    LETTERS,
    MAX_LABELS,
    double_count,
    generate_labels,
    is_prefix_free,
)


# ---------------------------------------------------------------------------
# Coverage and shape
# ---------------------------------------------------------------------------


class TestGenerateLabelsCoverage:
    """generate_labels(n) yields enough distinct, prefix-free labels."""

    def test_at_least_n_labels_up_to_capacity(self) -> None:
        short = [n for n in range(MAX_LABELS + 1) if len(generate_labels(n)) < n]
        assert short == []

    @pytest.mark.parametrize("n", [77, 102, 103, 127, 128, 650])
    def test_crowded_screens_fully_labelled(self, n: int) -> None:
        assert len(generate_labels(n)) >= n

    @pytest.mark.parametrize("n", [0, 1, 26, 27, 52, 200, 676])
    def test_labels_are_distinct(self, n: int) -> None:
        labels = generate_labels(n)
        assert len(set(labels)) == len(labels)

    @pytest.mark.parametrize("n", range(0, 700, 13))
    def test_labels_are_prefix_free(self, n: int) -> None:
        assert is_prefix_free(generate_labels(n))

    def test_labels_only_use_alphabet(self) -> None:
        for label in generate_labels(300):
            assert 1 <= len(label) <= 2
            assert all(c in LETTERS for c in label)

    def test_deterministic(self) -> None:
        assert generate_labels(80) == generate_labels(80)

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            generate_labels(-1)


# ---------------------------------------------------------------------------
# Exact layouts
# ---------------------------------------------------------------------------


class TestGenerateLabelsLayout:
    def test_zero_matches_gives_full_alphabet(self) -> None:
        assert generate_labels(0) == list(LETTERS)

    def test_26_matches_all_single_letters(self) -> None:
        labels = generate_labels(26)
        assert labels == list(LETTERS)
        assert all(len(label) == 1 for label in labels)

    def test_27_matches(self) -> None:
        labels = generate_labels(27)
        assert labels[:25] == list(LETTERS[1:])
        assert labels[25:] == ["a" + c for c in LETTERS]
        assert labels[0] == "b"
        assert labels[24] == "z"
        assert labels[25] == "aa"
        assert len(labels) == 51

    def test_30_matches_first_two_letter_label_at_index_25(self) -> None:
        labels = generate_labels(30)
        assert labels[0] == "b"
        assert labels[25] == "aa"
        assert labels[29] == "ae"

    def test_52_matches_reserves_two_prefixes(self) -> None:
        labels = generate_labels(52)
        assert labels[0] == "c"
        assert "a" not in labels and "b" not in labels
        assert labels[24] == "aa"
        assert labels[-1] == "bz"

    def test_one_letter_block_precedes_two_letter_block(self) -> None:
        labels = generate_labels(100)
        lengths = [len(label) for label in labels]
        assert lengths == sorted(lengths)

    def test_capacity_tops_out(self) -> None:
        assert len(generate_labels(MAX_LABELS)) == MAX_LABELS
        assert len(generate_labels(MAX_LABELS + 1)) < MAX_LABELS + 1


class TestIsPrefixFree:
    def test_detects_prefix(self) -> None:
        assert not is_prefix_free(["a", "ab"])

    def test_detects_duplicates(self) -> None:
        assert not is_prefix_free(["b", "b"])

    def test_accepts_disjoint(self) -> None:
        assert is_prefix_free(["b", "aa", "ab"])


class TestDoubleCount:
    """The fewest letters are reserved as two-letter prefixes."""

    @pytest.mark.parametrize(
        "n, expected",
        [(0, 0), (26, 0), (27, 1), (51, 1), (52, 2), (76, 2), (77, 3), (676, 26), (1000, 26)],
    )
    def test_values(self, n: int, expected: int) -> None:
        assert double_count(n) == expected

    def test_77_matches_keeps_most_single_letters(self) -> None:
        labels = generate_labels(77)
        assert labels[0] == "d"
        assert sum(1 for label in labels if len(label) == 1) == 23
