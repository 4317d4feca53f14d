#!/usr/bin/env python3
# File: gridtui/view.py
# Responsibilities:
#   - Compose/draw one full frame: size gate → title → table
#   - Project the cursor into per-cell highlight layers (never mutates it)
# Notes:
#   - Pure rendering: colours come in as TableColors, pair IDs from the PairRegistry.
#   - Every frame is recomputed from scratch; nothing is kept between calls.

from __future__ import annotations

from .layout import (
    Rect, Length, Percentage,
    center, calculate_layout, column_widths,
    fill_rect, draw_text, safe_addnstr,
)
from .theme import Style, compose, zebra_style

MIN_WIDTH = 30
MIN_HEIGHT = 10
TOO_SMALL = f"Terminal size too small.\nMinimum size is {MIN_WIDTH}x{MIN_HEIGHT}."

TITLE = "You VS Bot"
TITLE_HEIGHT = 1
TABLE_WIDTH = 30
ROW_HEIGHT = 3
COLUMN_SPACING = 1
# Gutter for the selection marker; reserved on every row so columns never shift.
HIGHLIGHT_SYMBOL = "▶"


# ----- Highlight projection -----
def highlight_layers(cursor, row: int, column: int) -> tuple[str, ...]:
    """Layers a cell carries for the current cursor, in merge order."""
    in_row = row == cursor.row
    in_column = column == cursor.column
    layers = []
    if in_row:
        layers.append("row")
    if in_column:
        layers.append("column")
    if in_row and in_column:
        layers.append("cell")
    return tuple(layers)

def row_style(colors, cursor, row: int) -> Style:
    return compose(zebra_style(colors, row), ("row",) if row == cursor.row else (), colors)

def cell_style(colors, cursor, row: int, column: int) -> Style:
    return compose(zebra_style(colors, row), highlight_layers(cursor, row, column), colors)


# ----- Frame -----
def draw_frame(stdscr, cursor, items, colors, pairs) -> bool:
    """
    Draw the whole screen for the current state.
    Returns True when the grid was drawn, False when the too-small notice was shown instead.
    """
    stdscr.erase()
    h, w = stdscr.getmaxyx()
    area = Rect(0, 0, w, h)

    if w < MIN_WIDTH or h < MIN_HEIGHT:
        render_too_small(stdscr, area, colors, pairs)
        return False

    title_area, table_area = calculate_layout(
        area, TITLE_HEIGHT, len(items) * ROW_HEIGHT, TABLE_WIDTH,
    )
    render_title(stdscr, title_area, colors, pairs)
    render_table(stdscr, table_area, cursor, items, colors, pairs)
    return True

def render_too_small(stdscr, area: Rect, colors, pairs) -> None:
    box = center(area, Percentage(100), Length(2))
    attr = pairs.attr(Style(fg=colors.warning_fg))
    draw_text(stdscr, box, TOO_SMALL, attr, centered=True, wrap=True)

def render_title(stdscr, area: Rect, colors, pairs) -> None:
    draw_text(stdscr, area, TITLE, pairs.attr(Style(fg=colors.title_fg)), centered=True)

def render_table(stdscr, area: Rect, cursor, items, colors, pairs) -> None:
    fill_rect(stdscr, area, pairs.attr(Style(fg=colors.row_fg, bg=colors.buffer_bg)))

    gutter = len(HIGHLIGHT_SYMBOL)
    body = Rect(area.x + gutter, area.y, max(0, area.width - gutter), area.height)
    n_columns = max((len(values) for values in items), default=0)
    columns = column_widths(body.width, n_columns, COLUMN_SPACING)

    for r, values in enumerate(items):
        y = area.y + r * ROW_HEIGHT
        if y >= area.bottom:
            break
        band = Rect(area.x, y, area.width, min(ROW_HEIGHT, area.bottom - y))
        fill_rect(stdscr, band, pairs.attr(row_style(colors, cursor, r)))

        if r == cursor.row and gutter:
            safe_addnstr(stdscr, y + min(1, band.height - 1), area.x, HIGHLIGHT_SYMBOL, gutter,
                         pairs.attr(row_style(colors, cursor, r)))

        for c, (offset, width) in enumerate(columns):
            cell = Rect(body.x + offset, y, width, band.height)
            attr = pairs.attr(cell_style(colors, cursor, r, c))
            fill_rect(stdscr, cell, attr)
            value = values[c] if c < len(values) else ""
            # Content sits on the middle line of the three-line cell.
            draw_text(stdscr, cell, value, attr, centered=True, top=1)


__all__ = [
    "MIN_WIDTH", "MIN_HEIGHT", "TOO_SMALL", "TITLE", "TABLE_WIDTH", "ROW_HEIGHT",
    "HIGHLIGHT_SYMBOL",
    "highlight_layers", "row_style", "cell_style",
    "draw_frame", "render_too_small", "render_title", "render_table",
]
