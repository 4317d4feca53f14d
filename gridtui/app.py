#!/usr/bin/env python3
# File: gridtui/app.py
# Description: the application object, key → move mapping, and the draw/read loop.

from __future__ import annotations

import curses
import logging
import sys

from .config import load_settings
from .events import KeyEvent, read_event
from .log import setup_logger
from .selection import Cursor
from .terminal import Terminal, TerminalError
from .theme import init_theme
from .view import draw_frame

logger = logging.getLogger(__name__)

DEFAULT_ITEMS = (
    ("1", "2", "3"),
    ("4", "5", "6"),
    ("7", "8", "9"),
)

# Actions
QUIT = "quit"
NEXT_ROW = "next_row"
PREVIOUS_ROW = "previous_row"
NEXT_COLUMN = "next_column"
PREVIOUS_COLUMN = "previous_column"


def action_for(event) -> str | None:
    """First match wins; anything unmapped (or not a key press) is None."""
    if not isinstance(event, KeyEvent) or event.kind != "press":
        return None
    code = event.code
    if code in ("q", "esc") or (event.ctrl and code == "c"):
        return QUIT
    if code in ("s", "down"):
        return NEXT_ROW
    if code in ("w", "up"):
        return PREVIOUS_ROW
    if code in ("d", "right"):
        return NEXT_COLUMN
    if code in ("a", "left"):
        return PREVIOUS_COLUMN
    return None


class App:
    """Holds the grid, the cursor and the palette; nothing else is long-lived."""

    def __init__(self, colors, pairs, items=DEFAULT_ITEMS):
        if not items or not items[0]:
            raise ValueError("grid needs at least one row and one column")
        width = len(items[0])
        if any(len(row) != width for row in items):
            raise ValueError("every grid row must have the same number of cells")
        self.items = items
        self.cursor = Cursor(len(items), width)
        self.colors = colors
        self.pairs = pairs
        self._fits: bool | None = None

    @property
    def selected_value(self) -> str:
        return self.items[self.cursor.row][self.cursor.column]

    def handle_event(self, event) -> bool:
        """Apply one event. Returns False when the app should stop."""
        action = action_for(event)
        if action == QUIT:
            logger.info("quit requested (%s)", getattr(event, "code", event))
            return False
        if action == NEXT_ROW:
            self.cursor.advance_row()
        elif action == PREVIOUS_ROW:
            self.cursor.retreat_row()
        elif action == NEXT_COLUMN:
            self.cursor.advance_column()
        elif action == PREVIOUS_COLUMN:
            self.cursor.retreat_column()
        return True

    def draw(self, stdscr) -> None:
        fits = draw_frame(stdscr, self.cursor, self.items, self.colors, self.pairs)
        if fits != self._fits:
            h, w = stdscr.getmaxyx()
            logger.debug("terminal %dx%d: %s", w, h, "grid" if fits else "too small")
            self._fits = fits
        stdscr.refresh()

    def run(self, stdscr, read=read_event) -> int:
        """Draw, block for one event, update; repeat until a quit key."""
        try:
            while True:
                self.draw(stdscr)
                if not self.handle_event(read(stdscr)):
                    return 0
        except KeyboardInterrupt:
            # Only reachable if raw mode was lost; treat like Ctrl+C.
            logger.info("interrupted")
            return 0


def main() -> int:
    settings = load_settings()
    try:
        setup_logger(settings.log_file, settings.log_level)
    except OSError as exc:
        print(f"gridtui: cannot open log file: {exc}", file=sys.stderr)
        return 1
    logger.info("starting (palette=%s)", settings.palette)

    try:
        with Terminal() as stdscr:
            colors, pairs = init_theme(settings.palette)
            return App(colors, pairs).run(stdscr)
    except TerminalError as exc:
        logger.error("%s", exc)
        print(f"gridtui: {exc}", file=sys.stderr)
        return 1
    except (curses.error, OSError) as exc:
        logger.exception("fatal terminal I/O error")
        print(f"gridtui: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
