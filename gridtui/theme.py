#!/usr/bin/env python3
# File: gridtui/theme.py
# Purpose: centralize all *visual* concerns (palettes, styles, highlight layers, pair IDs)
# SRP Slices:
#   [CONFIG]  Data-only: colour names, shades, named palette presets (no curses calls)
#   [ENGINE]  Resolution: palette name + terminal colour tier → TableColors (ints)
#   [STYLE]   Style values and the ordered highlight layers (pure functions)
#   [PALETTE] Pair Registry: owns curses pair IDs & init_pair mapping
#   [WIRING]  Composition: one public init_theme()

from __future__ import annotations

import curses
import logging
from dataclasses import dataclass, replace
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)

# ════════════════════════════════════════════════════════════════════════════
# [CONFIG] Data (no curses, no side-effects)
# ════════════════════════════════════════════════════════════════════════════

# Stable color indices (ncurses 8-color baseline, plus bright black for 16-color terminals)
COLOR_BY_NAME = {
    "black":        getattr(curses, "COLOR_BLACK",   0),
    "red":          getattr(curses, "COLOR_RED",     1),
    "green":        getattr(curses, "COLOR_GREEN",   2),
    "yellow":       getattr(curses, "COLOR_YELLOW",  3),
    "blue":         getattr(curses, "COLOR_BLUE",    4),
    "magenta":      getattr(curses, "COLOR_MAGENTA", 5),
    "cyan":         getattr(curses, "COLOR_CYAN",    6),
    "white":        getattr(curses, "COLOR_WHITE",   7),
    "bright_black": 8,
}


class Shade(NamedTuple):
    """One logical colour at every terminal tier."""
    basic: str                 # 8-color name
    bright: str | None         # 16-color override (None = same as basic)
    xterm: int                 # 256-color index (nearest Tailwind shade)


# Slate neutrals shared by every palette
SLATE_950 = Shade("black", None, 234)
SLATE_900 = Shade("black", "bright_black", 236)
SLATE_200 = Shade("white", None, 254)
WARNING   = Shade("red", None, 196)

# Accent shades per palette: accent = Tailwind 400, strong = Tailwind 600
PALETTE_PRESETS = {
    "blue": {
        "accent": Shade("cyan", None, 75),
        "strong": Shade("blue", None, 26),
    },
    "emerald": {
        "accent": Shade("green", None, 78),
        "strong": Shade("cyan", None, 35),
    },
    "indigo": {
        "accent": Shade("magenta", None, 105),
        "strong": Shade("blue", None, 62),
    },
    "red": {
        "accent": Shade("red", None, 203),
        "strong": Shade("magenta", None, 160),
    },
}

DEFAULT_PALETTE = "blue"

# ════════════════════════════════════════════════════════════════════════════
# [ENGINE] Resolution (names + tier → ints) (no curses pairs here)
# ════════════════════════════════════════════════════════════════════════════

def available_palettes() -> list[str]:
    return sorted(PALETTE_PRESETS.keys())

def color_tier(colors: int | None = None) -> int:
    """Bucket the terminal's colour count into 256, 16 or 8."""
    if colors is None:
        colors = getattr(curses, "COLORS", 0) or 0
    if colors >= 256:
        return 256
    if colors >= 16:
        return 16
    return 8

def resolve_shade(shade: Shade, tier: int) -> int:
    if tier >= 256:
        return shade.xterm
    if tier >= 16 and shade.bright:
        return COLOR_BY_NAME[shade.bright]
    return COLOR_BY_NAME[shade.basic]


@dataclass(frozen=True)
class TableColors:
    """Numeric colours for one frame of the grid. Built once at startup, never mutated."""
    name: str
    tier: int
    buffer_bg: int
    row_fg: int
    selected_row_fg: int
    selected_column_fg: int
    selected_cell_fg: int
    normal_row_bg: int
    alt_row_bg: int
    title_fg: int
    warning_fg: int
    mono: bool = False           # no colour pairs: highlights must show through attributes

    @classmethod
    def from_palette(cls, name: str = DEFAULT_PALETTE, tier: int = 8, mono: bool = False) -> "TableColors":
        if name not in PALETTE_PRESETS:
            raise KeyError(f"unknown palette {name!r}; expected one of {available_palettes()}")
        preset = PALETTE_PRESETS[name]
        return cls(
            name=name,
            tier=tier,
            buffer_bg=resolve_shade(SLATE_950, tier),
            row_fg=resolve_shade(SLATE_200, tier),
            selected_row_fg=resolve_shade(preset["accent"], tier),
            selected_column_fg=resolve_shade(preset["accent"], tier),
            selected_cell_fg=resolve_shade(preset["strong"], tier),
            normal_row_bg=resolve_shade(SLATE_950, tier),
            alt_row_bg=resolve_shade(SLATE_900, tier),
            title_fg=resolve_shade(SLATE_200, tier),
            warning_fg=resolve_shade(WARNING, tier),
            mono=mono,
        )

# ════════════════════════════════════════════════════════════════════════════
# [STYLE] Style values + highlight layers (pure; base → row → column → cell)
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Style:
    fg: int = -1
    bg: int = -1
    reverse: bool = False
    bold: bool = False
    underline: bool = False


Layer = Callable[[Style, TableColors], Style]

def row_highlight(style: Style, colors: TableColors) -> Style:
    return replace(style, reverse=True, fg=colors.selected_row_fg)

def column_highlight(style: Style, colors: TableColors) -> Style:
    # Without colour pairs the fg change is invisible; mono terminals get an underline too.
    return replace(style, fg=colors.selected_column_fg, underline=style.underline or colors.mono)

def cell_highlight(style: Style, colors: TableColors) -> Style:
    return replace(style, reverse=True, bold=True, fg=colors.selected_cell_fg)

# Merge order matters: later layers win on fg, flags accumulate.
LAYERS: dict[str, Layer] = {
    "row":    row_highlight,
    "column": column_highlight,
    "cell":   cell_highlight,
}
LAYER_ORDER = ("row", "column", "cell")

def zebra_style(colors: TableColors, row_index: int) -> Style:
    """Static row banding: even rows on the normal background, odd rows on the alt one."""
    bg = colors.normal_row_bg if row_index % 2 == 0 else colors.alt_row_bg
    return Style(fg=colors.row_fg, bg=bg)

def compose(base: Style, layers, colors: TableColors) -> Style:
    """Apply the named layers to *base* in LAYER_ORDER, left to right."""
    wanted = set(layers)
    style = base
    for name in LAYER_ORDER:
        if name in wanted:
            style = LAYERS[name](style, colors)
    return style

# ════════════════════════════════════════════════════════════════════════════
# [PALETTE] Curses Pair Registry (pair IDs allocated on first use)
# ════════════════════════════════════════════════════════════════════════════

class PairRegistry:
    """Maps (fg, bg) to curses pair IDs, calling init_pair once per combination."""

    def __init__(self, enabled: bool = True, limit: int | None = None):
        self.enabled = enabled
        self.limit = limit if limit is not None else (getattr(curses, "COLOR_PAIRS", 64) or 64)
        self._pairs: dict[tuple[int, int], int] = {}

    def pair_for(self, fg: int, bg: int) -> int:
        if not self.enabled:
            return 0
        key = (fg, bg)
        pid = self._pairs.get(key)
        if pid is None:
            pid = len(self._pairs) + 1
            if pid >= self.limit:
                # Out of pairs: fall back to the terminal default rather than recycling.
                return 0
            curses.init_pair(pid, fg, bg)
            self._pairs[key] = pid
        return pid

    def attr(self, style: Style) -> int:
        a = curses.color_pair(self.pair_for(style.fg, style.bg))
        if style.reverse:
            a |= curses.A_REVERSE
        if style.bold:
            a |= curses.A_BOLD
        if style.underline:
            a |= curses.A_UNDERLINE
        return a

# ════════════════════════════════════════════════════════════════════════════
# [WIRING] Composition (single public entry point)
# ════════════════════════════════════════════════════════════════════════════

def init_theme(palette: str = DEFAULT_PALETTE) -> tuple[TableColors, PairRegistry]:
    """
    Public: initialize curses colours and build the palette for *palette*.
    NOTE: Must be called after curses is initialized (see gridtui.terminal).
    """
    if not curses.has_colors():
        logger.info("terminal has no colour support; using attributes only")
        return TableColors.from_palette(palette, 8, mono=True), PairRegistry(enabled=False)

    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        pass

    tier = color_tier()
    logger.info("palette=%s colour tier=%d", palette, tier)
    return TableColors.from_palette(palette, tier), PairRegistry()


__all__ = [
    # config
    "COLOR_BY_NAME", "PALETTE_PRESETS", "DEFAULT_PALETTE", "Shade",
    # engine
    "available_palettes", "color_tier", "resolve_shade", "TableColors",
    # style
    "Style", "row_highlight", "column_highlight", "cell_highlight",
    "LAYERS", "LAYER_ORDER", "zebra_style", "compose",
    # pairs + wiring
    "PairRegistry", "init_theme",
]
