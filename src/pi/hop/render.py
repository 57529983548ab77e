"""Draw the visible rows of a document with its tags applied."""

from __future__ import annotations

from pi.hop.document import Document
from pi.hop.forms import FormRegistry
from pi.hop.utils import char_width, truncate_to_width, visible_width
from pi.hop.viewport import Area, layout_rows


def render_area(doc: Document, area: Area, forms: FormRegistry) -> list[str]:
    """Return one string per visible row, none wider than ``area.columns``.

    Ghosts are drawn before the character they are anchored to, concealed
    characters are skipped, and the remaining characters take the form of
    the highest-priority marker covering them. A ghost can be wider than the
    text it conceals, so each row is clipped at the right edge.
    """
    text = doc.text
    tags = text.tags
    tab_width = doc.print_options.tab_width
    lines: list[str] = []

    for row in layout_rows(text, area, doc.print_options):
        out: list[str] = []
        run: list[str] = []
        run_form: str | None = None
        column = 0
        full = False

        def flush() -> None:
            if run:
                chunk = "".join(run)
                out.append(forms.style(run_form)(chunk) if run_form else chunk)
                run.clear()

        for point, ch in text.chars_fwd(row.start):
            if point.char >= row.end.char or full:
                break
            for ghost in tags.ghosts_at(point.byte):
                flush()
                for form, glyphs in ghost.segments:
                    room = area.columns - column
                    clipped = truncate_to_width(glyphs, room)
                    if clipped:
                        out.append(forms.style(form)(clipped))
                        column += visible_width(clipped)
                    if clipped != glyphs:
                        full = True
                        break
                if full:
                    break
            if full or tags.is_concealed(point.byte):
                continue
            marker = tags.marker_at(point.byte)
            form = marker.form if marker is not None else None
            if form != run_form:
                flush()
                run_form = form
            w = char_width(ch, tab_width, column)
            if column + w > area.columns:
                break
            run.append(" " * w if ch == "\t" else ch)
            column += w
        flush()
        lines.append("".join(out))

    return lines
