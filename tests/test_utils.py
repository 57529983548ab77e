"""Tests for pi.hop.utils -- width measurement."""

from __future__ import annotations

from pi.hop.utils import char_width, strip_ansi, truncate_to_width, visible_width


class TestCharWidth:
    def test_ascii(self) -> None:
        assert char_width("a") == 1

    def test_wide(self) -> None:
        assert char_width("日") == 2

    def test_control(self) -> None:
        assert char_width("\x07") == 0

    def test_tab_advances_to_stop(self) -> None:
        assert char_width("\t", tab_width=4, column=0) == 4
        assert char_width("\t", tab_width=4, column=3) == 1


class TestVisibleWidth:
    def test_empty(self) -> None:
        assert visible_width("") == 0

    def test_ignores_ansi(self) -> None:
        assert visible_width("\x1b[31mred\x1b[0m") == 3

    def test_wide_characters(self) -> None:
        assert visible_width("日本") == 4

    def test_strip_ansi(self) -> None:
        assert strip_ansi("\x1b[1;36ma\x1b[0mb") == "ab"


class TestTruncateToWidth:
    def test_fits_unchanged(self) -> None:
        assert truncate_to_width("ab", 2) == "ab"

    def test_cuts_ascii(self) -> None:
        assert truncate_to_width("abc", 2) == "ab"

    def test_non_positive_width(self) -> None:
        assert truncate_to_width("ab", 0) == ""

    def test_wide_char_not_split(self) -> None:
        assert truncate_to_width("a中", 2) == "a"

    def test_combining_cluster_kept_whole(self) -> None:
        assert truncate_to_width("éx", 1) == "é"
