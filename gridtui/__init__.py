"""
gridtui package: a 3x3 grid in the terminal with a wrap-around row/column cursor.

Modules:
- app: application object, key mapping and the draw/read loop
- selection: the cursor and its wrap-around moves
- view: per-frame rendering (size gate, title, highlighted table)
- layout: geometry and drawing primitives
- theme: palettes, styles, highlight layers, curses pair registry
- events: structured key events from curses input
- terminal: acquire/restore the terminal
- config: environment-driven settings
- log: logger wiring
"""

__all__ = [
    "app",
    "selection",
    "view",
    "layout",
    "theme",
    "events",
    "terminal",
    "config",
    "log",
]
