"""Tests for pi.hop.render -- drawing rows with label overlays."""

from __future__ import annotations

from pi.hop.document import Document
from pi.hop.forms import CLOAK_FORM, HOP_FORM, Form, FormRegistry, plain_forms
from pi.hop.modes import ModeManager
from pi.hop.overlay import OverlayManager
from pi.hop.tags import Tagger
from pi.hop.render import render_area
from pi.hop.session import Hopper
from pi.hop.utils import strip_ansi, visible_width
from pi.hop.viewport import Area


def _hop(content: str, rows: int = 5, columns: int = 40) -> ModeManager:
    host = ModeManager(Document(content), Area(rows=rows, columns=columns))
    host.enter_mode(Hopper.word())
    return host


class TestRenderPlain:
    def test_no_tags_renders_text(self) -> None:
        doc = Document("foo bar\nbaz")
        assert render_area(doc, Area(rows=5, columns=40), plain_forms()) == ["foo bar", "baz"]

    def test_labels_replace_leading_characters(self) -> None:
        host = _hop("foo bar baz")
        assert render_area(host.document, host.area, plain_forms()) == ["aoo bar caz"]

    def test_two_letter_labels(self) -> None:
        host = _hop(" ".join(f"w{i}" for i in range(30)), rows=10, columns=200)
        (line,) = render_area(host.document, host.area, plain_forms())
        words = line.split(" ")
        assert words[0] == "b0"
        assert words[25] == "aa5"
        assert words[29] == "ae9"

    def test_narrowing_restores_eliminated_text(self) -> None:
        host = _hop(" ".join(f"w{i}" for i in range(30)), rows=10, columns=200)
        host.send_key("a")
        words = render_area(host.document, host.area, plain_forms())[0].split(" ")
        assert words[0] == "w0"
        assert words[25] == "aa5"

    def test_exit_restores_original(self) -> None:
        host = _hop("foo bar baz")
        host.send_key("b")
        assert render_area(host.document, host.area, FormRegistry()) == ["foo bar baz"]

    def test_tabs_expand(self) -> None:
        doc = Document("\tx")
        assert render_area(doc, Area(rows=1, columns=40), plain_forms()) == ["    x"]


class TestRenderStyled:
    def test_labels_and_backdrop_styled(self) -> None:
        forms = FormRegistry({})
        forms.set(HOP_FORM, Form(fg="red"))
        forms.set(CLOAK_FORM, Form(dim=True))
        host = _hop("foo bar")
        (line,) = render_area(host.document, host.area, forms)
        assert "\x1b[31ma\x1b[0m" in line
        assert "\x1b[2moo \x1b[0m" in line
        assert strip_ansi(line) == "aoo bar"
        assert visible_width(line) == 7


class TestRenderClipping:
    def _labelled(self, content: str, label: str, start: int, end: int) -> Document:
        doc = Document(content)
        text = doc.text
        overlays = OverlayManager(text, Tagger.new("labels"), Tagger.new("backdrop"))
        overlays.install(label, (text.point_at_char(start), text.point_at_char(end)))
        return doc

    def test_two_letter_ghost_before_newline_is_clipped(self) -> None:
        doc = self._labelled("xyz\nq", "ab", 2, 3)
        lines = render_area(doc, Area(rows=5, columns=3), plain_forms())
        assert lines == ["xya", "q"]
        assert all(visible_width(line) <= 3 for line in lines)

    def test_styled_ghost_clipped_to_width(self) -> None:
        forms = FormRegistry({})
        forms.set(HOP_FORM, Form(fg="red"))
        doc = self._labelled("xyz\n", "ab", 2, 3)
        (line, *_) = render_area(doc, Area(rows=5, columns=3), forms)
        assert strip_ansi(line) == "xya"
        assert visible_width(line) == 3

    def test_fitting_row_untouched(self) -> None:
        doc = self._labelled("xyz\n", "ab", 2, 3)
        (line, *_) = render_area(doc, Area(rows=5, columns=4), plain_forms())
        assert line == "xyab"
