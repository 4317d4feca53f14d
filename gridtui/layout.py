#!/usr/bin/env python3
# File: gridtui/layout.py
# Purpose: geometry + drawing primitives (DRAW ONLY).
# Notes: rectangles are (x, y, width, height) in character cells; nothing here
#        knows about the grid, the cursor or the palette.

from __future__ import annotations

import curses
import textwrap
from dataclasses import dataclass
from typing import NamedTuple

# --------- Geometry -------------------

@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


class Length(NamedTuple):
    """Fixed size, shrunk to fit the parent."""
    cells: int

    def resolve(self, total: int) -> int:
        return max(0, min(self.cells, total))


class Percentage(NamedTuple):
    """Share of the parent, rounded down."""
    percent: int

    def resolve(self, total: int) -> int:
        return max(0, min(total, total * self.percent // 100))


def center(area: Rect, horizontal, vertical) -> Rect:
    """Centered sub-rectangle of *area* sized by two constraints."""
    w = horizontal.resolve(area.width)
    h = vertical.resolve(area.height)
    return Rect(
        area.x + (area.width - w) // 2,
        area.y + (area.height - h) // 2,
        w,
        h,
    )

def stack_centered(area: Rect, heights: list[int]) -> list[Rect]:
    """
    Stack full-width rows of at most *heights* lines, the whole block centered vertically.
    Rows that do not fit are shrunk from the bottom of the stack.
    """
    remaining = max(0, area.height)
    sizes = []
    for h in heights:
        take = max(0, min(h, remaining))
        sizes.append(take)
        remaining -= take
    y = area.y + remaining // 2
    out = []
    for h in sizes:
        out.append(Rect(area.x, y, area.width, h))
        y += h
    return out

def calculate_layout(area: Rect, title_height: int, body_height: int, width: int) -> tuple[Rect, Rect]:
    """Title stacked above the body, both pinned to *width* and centered as a unit."""
    title_row, body_row = stack_centered(area, [title_height, body_height])
    return (
        center(title_row, Length(width), Length(title_height)),
        center(body_row, Length(width), Length(body_height)),
    )

def column_widths(total: int, count: int, spacing: int = 1) -> list[tuple[int, int]]:
    """
    Equal-share columns: each gets floor(100/count)% of *total*.
    Returns (offset, width) pairs; columns are separated by *spacing* blank cells.
    """
    if count <= 0:
        return []
    share = Percentage(100 // count).resolve(total)
    out = []
    x = 0
    for _ in range(count):
        w = max(0, min(share, total - x))
        out.append((x, w))
        x += w + spacing
    return out

# --------- Text helpers -------------------

def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap each line of *text* to *width*, trimming surrounding blanks."""
    if width <= 0:
        return []
    lines: list[str] = []
    for raw in (text or "").split("\n"):
        lines.extend(textwrap.wrap(raw.strip(), width) or [""])
    return lines

def clip(text: str, width: int) -> str:
    return (text or "")[: max(0, width)]

# --------- Drawing -------------------

def safe_addnstr(stdscr, y: int, x: int, text: str, n: int | None = None, attr: int | None = None) -> None:
    if y < 0 or x < 0 or not text:
        return
    n2 = len(text) if n is None else max(0, n)
    a = 0 if attr is None else attr  # ← normalize for curses
    try:
        stdscr.addnstr(y, x, text, n2, a)
    except curses.error:
        # Writing the last cell of the window advances the cursor off-screen; curses
        # reports that as an error even though the text was drawn.
        pass

def fill_rect(stdscr, rect: Rect, attr: int = 0) -> None:
    if rect.is_empty():
        return
    blank = " " * rect.width
    for y in range(rect.y, rect.bottom):
        safe_addnstr(stdscr, y, rect.x, blank, rect.width, attr)

def draw_text(
    stdscr,
    rect: Rect,
    text: str,
    attr: int = 0,
    *,
    centered: bool = False,
    wrap: bool = False,
    top: int = 0,
) -> list[str]:
    """
    Draw *text* inside *rect*, one line per row starting *top* rows down.
    Lines are clipped to the rectangle. Returns the lines actually drawn.
    """
    if rect.is_empty():
        return []
    lines = wrap_text(text, rect.width) if wrap else (text or "").split("\n")
    drawn = []
    for i, line in enumerate(lines[: max(0, rect.height - top)]):
        s = clip(line, rect.width)
        x = rect.x + (max(0, (rect.width - len(s)) // 2) if centered else 0)
        safe_addnstr(stdscr, rect.y + top + i, x, s, len(s), attr)
        drawn.append(s)
    return drawn


__all__ = [
    # geometry
    "Rect", "Length", "Percentage", "center", "stack_centered",
    "calculate_layout", "column_widths",
    # text
    "wrap_text", "clip",
    # drawing
    "safe_addnstr", "fill_rect", "draw_text",
]
