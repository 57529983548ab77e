"""Mapping between the rendered rows of an area and positions in a text."""

from __future__ import annotations

from dataclasses import dataclass

from pi.hop.text import Point, Text
from pi.hop.utils import char_width


@dataclass
class Area:
    """The region of the screen a document is drawn into."""

    rows: int
    columns: int
    top_line: int = 0
    left_col: int = 0


@dataclass
class PrintOptions:
    wrap_lines: bool = True
    tab_width: int = 4


@dataclass
class VisualRow:
    """One screen row: the characters of ``line`` in ``[start, end)``."""

    line: int
    start: Point
    end: Point


def _line_rows(text: Text, line: int, area: Area, opts: PrintOptions) -> list[VisualRow]:
    line_start = text.point_at_line(line)
    content = text.line(line)
    base = line_start.char

    if not opts.wrap_lines:
        first = last = None
        column = 0
        for i, ch in enumerate(content):
            w = char_width(ch, opts.tab_width, column)
            if first is None and column >= area.left_col:
                first = i
            if column + w > area.left_col + area.columns:
                last = i
                break
            column += w
        if first is None:
            first = len(content)
        if last is None:
            last = len(content)
        return [VisualRow(line, text.point_at_char(base + first), text.point_at_char(base + last))]

    rows: list[VisualRow] = []
    row_start = 0
    column = 0
    for i, ch in enumerate(content):
        w = char_width(ch, opts.tab_width, column)
        if column + w > area.columns and i > row_start:
            rows.append(VisualRow(line, text.point_at_char(base + row_start), text.point_at_char(base + i)))
            row_start = i
            column = 0
            w = char_width(ch, opts.tab_width, column)
        column += w
    rows.append(VisualRow(line, text.point_at_char(base + row_start), text.point_at_char(base + len(content))))
    return rows


def layout_rows(text: Text, area: Area, opts: PrintOptions) -> list[VisualRow]:
    """Return the rows shown in *area*, at most ``area.rows`` of them."""
    rows: list[VisualRow] = []
    line = min(max(area.top_line, 0), text.len_lines - 1)
    while len(rows) < area.rows and line < text.len_lines:
        rows.extend(_line_rows(text, line, area, opts))
        line += 1
    return rows[: max(area.rows, 0)]


def visible_range(area: Area, text: Text, opts: PrintOptions) -> tuple[Point, Point]:
    """Return the first and one-past-last positions drawn in *area*."""
    rows = layout_rows(text, area, opts)
    if not rows:
        start = text.point_at_line(area.top_line)
        return start, start
    return rows[0].start, rows[-1].end
