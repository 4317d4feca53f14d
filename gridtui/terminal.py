#!/usr/bin/env python3
# File: gridtui/terminal.py
# Purpose: own the terminal for the life of the app (enter curses, always give it back).
# Notes:
#   - Use as a context manager; restore() runs on every exit path, errors included.
#   - restore() is idempotent: only the first call touches the terminal.

from __future__ import annotations

import curses
import logging
import os

logger = logging.getLogger(__name__)

# Escape would otherwise wait a full second for a possible escape sequence.
os.environ.setdefault("ESCDELAY", "25")


class TerminalError(RuntimeError):
    """The terminal could not be put into curses mode."""


class Terminal:
    def __init__(self):
        self.stdscr = None
        self._restored = False

    @property
    def active(self) -> bool:
        return self.stdscr is not None and not self._restored

    def init(self):
        """Enter curses mode and return the screen window."""
        try:
            self.stdscr = curses.initscr()
            curses.noecho()
            curses.raw()
            self.stdscr.keypad(True)
            self.stdscr.nodelay(False)
            self.stdscr.timeout(-1)
            try:
                curses.curs_set(0)
            except curses.error:
                # Some terminals cannot hide the cursor; not fatal.
                pass
        except curses.error as exc:
            self.restore()
            raise TerminalError(f"cannot initialise terminal: {exc}") from exc
        logger.debug("terminal acquired")
        return self.stdscr

    def restore(self) -> None:
        if self._restored or self.stdscr is None:
            self._restored = True
            return
        self._restored = True
        try:
            self.stdscr.keypad(False)
            curses.noraw()
            curses.echo()
        except curses.error:
            pass
        finally:
            curses.endwin()
        logger.debug("terminal restored")

    def __enter__(self):
        return self.init()

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False


__all__ = ["Terminal", "TerminalError"]
