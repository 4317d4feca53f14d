# Ensure the project root is on sys.path so tests can "import gridtui" without install.
import curses
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeScreen:
    """Stand-in for a curses window: fixed size, records text, scripted input."""

    def __init__(self, width=80, height=24, keys=()):
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.calls = []
        self.frames = 0
        self.refreshes = 0
        self.keypad_calls = []
        self.no_delay = False

    def getmaxyx(self):
        return (self.height, self.width)

    def addnstr(self, y, x, text, n, attr=0):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error("addnstr() returned ERR")
        self.calls.append((y, x, text[:n], attr))

    def erase(self):
        self.calls.clear()
        self.frames += 1

    def refresh(self):
        self.refreshes += 1

    def get_wch(self):
        # None in the script marks a gap: nothing queued for a non-blocking read.
        if self.keys and self.keys[0] is None:
            self.keys.pop(0)
            if self.no_delay:
                raise curses.error("no input")
        if not self.keys:
            if self.no_delay:
                raise curses.error("no input")
            raise AssertionError("no scripted input left")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def keypad(self, flag):
        self.keypad_calls.append(flag)

    def nodelay(self, flag):
        self.no_delay = flag

    def timeout(self, delay):
        pass

    # ----- assertions helpers -----
    def texts(self):
        """Non-blank strings drawn this frame, top to bottom."""
        return [t for y, x, t, a in sorted(self.calls, key=lambda c: (c[0], c[1])) if t.strip()]

    def find(self, text):
        return [(y, x, a) for y, x, t, a in self.calls if t == text]


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def fake_curses(monkeypatch):
    """Colour calls that would otherwise need a real terminal."""
    pairs = {}

    def init_pair(pid, fg, bg):
        pairs[pid] = (fg, bg)

    monkeypatch.setattr(curses, "color_pair", lambda n: n << 8)
    monkeypatch.setattr(curses, "init_pair", init_pair)
    monkeypatch.setattr(curses, "COLOR_PAIRS", 256, raising=False)
    monkeypatch.setattr(curses, "COLORS", 256, raising=False)
    return pairs


@pytest.fixture
def colors():
    from gridtui.theme import TableColors
    return TableColors.from_palette("blue", 256)


@pytest.fixture
def pairs(fake_curses):
    from gridtui.theme import PairRegistry
    return PairRegistry(limit=256)
