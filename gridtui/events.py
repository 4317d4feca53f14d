#!/usr/bin/env python3
# File: gridtui/events.py
# Purpose: turn raw curses input into structured events (one blocking read per call).
# Notes:
#   - curses only reports key presses; every KeyEvent has kind="press".
#   - Read failures are not caught here; they are fatal to the caller.

from __future__ import annotations

import curses
from dataclasses import dataclass, replace

ESC = "\x1b"

NAMED_KEYS = {
    curses.KEY_UP:        "up",
    curses.KEY_DOWN:      "down",
    curses.KEY_LEFT:      "left",
    curses.KEY_RIGHT:     "right",
    curses.KEY_ENTER:     "enter",
    curses.KEY_BACKSPACE: "backspace",
}

# Control characters that have their own meaning rather than Ctrl+<letter>
CONTROL_NAMES = {
    "\t":   "tab",
    "\n":   "enter",
    "\r":   "enter",
    "\x08": "backspace",
    "\x7f": "backspace",
    ESC:    "esc",
}


@dataclass(frozen=True)
class KeyEvent:
    code: str
    ctrl: bool = False
    alt: bool = False
    kind: str = "press"


@dataclass(frozen=True)
class ResizeEvent:
    pass


def translate(raw) -> KeyEvent | ResizeEvent:
    """Map one get_wch() result (str or int) to an event."""
    if isinstance(raw, int):
        if raw == curses.KEY_RESIZE:
            return ResizeEvent()
        name = NAMED_KEYS.get(raw)
        return KeyEvent(name if name else f"key:{raw}")

    if raw in CONTROL_NAMES:
        return KeyEvent(CONTROL_NAMES[raw])
    if len(raw) == 1 and 1 <= ord(raw) <= 26:
        # Raw mode delivers Ctrl+<letter> as \x01..\x1a
        return KeyEvent(chr(ord(raw) + ord("a") - 1), ctrl=True)
    return KeyEvent(raw)

def _pending(stdscr):
    """Next already-queued input, or None if nothing is waiting."""
    stdscr.nodelay(True)
    try:
        return stdscr.get_wch()
    except curses.error:
        return None
    finally:
        stdscr.nodelay(False)

def read_event(stdscr) -> KeyEvent | ResizeEvent:
    """Block until the next input arrives and return it as an event."""
    raw = stdscr.get_wch()
    if raw == ESC:
        # Terminals send Alt+<key> as ESC immediately followed by the key.
        follow = _pending(stdscr)
        if follow is not None:
            event = translate(follow)
            if isinstance(event, KeyEvent):
                return replace(event, alt=True)
            return event
    return translate(raw)


__all__ = ["ESC", "KeyEvent", "ResizeEvent", "translate", "read_event"]
