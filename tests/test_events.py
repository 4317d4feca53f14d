# tests/test_events.py
import curses

import pytest

from gridtui.events import KeyEvent, ResizeEvent, translate, read_event
from conftest import FakeScreen


@pytest.mark.parametrize("raw,expected", [
    (curses.KEY_UP,    KeyEvent("up")),
    (curses.KEY_DOWN,  KeyEvent("down")),
    (curses.KEY_LEFT,  KeyEvent("left")),
    (curses.KEY_RIGHT, KeyEvent("right")),
    ("q",              KeyEvent("q")),
    ("W",              KeyEvent("W")),
    ("\x1b",           KeyEvent("esc")),
    ("\x03",           KeyEvent("c", ctrl=True)),
    ("\x13",           KeyEvent("s", ctrl=True)),
    ("\n",             KeyEvent("enter")),
    ("\x7f",           KeyEvent("backspace")),
])
def test_translate(raw, expected):
    assert translate(raw) == expected


def test_resize_is_not_a_key_event():
    assert translate(curses.KEY_RESIZE) == ResizeEvent()


def test_unknown_function_key_keeps_its_code():
    assert translate(curses.KEY_F1) == KeyEvent(f"key:{curses.KEY_F1}")


def test_every_key_event_is_a_press():
    assert translate("x").kind == "press"


def test_read_event_blocks_on_get_wch():
    screen = FakeScreen(keys=[curses.KEY_DOWN, "d"])
    assert read_event(screen) == KeyEvent("down")
    assert read_event(screen) == KeyEvent("d")


def test_read_failure_propagates():
    screen = FakeScreen(keys=[curses.error("no input")])
    with pytest.raises(curses.error):
        read_event(screen)


def test_escape_followed_by_key_is_alt():
    screen = FakeScreen(keys=["\x1b", "s"])
    assert read_event(screen) == KeyEvent("s", alt=True)
    assert screen.no_delay is False


def test_escape_followed_by_arrow_is_alt_arrow():
    screen = FakeScreen(keys=["\x1b", curses.KEY_UP])
    assert read_event(screen) == KeyEvent("up", alt=True)


def test_lone_escape_stays_escape():
    screen = FakeScreen(keys=["\x1b", None, "s"])
    assert read_event(screen) == KeyEvent("esc")
    assert screen.no_delay is False
    assert read_event(screen) == KeyEvent("s")


def test_escape_with_nothing_queued():
    screen = FakeScreen(keys=["\x1b"])
    assert read_event(screen) == KeyEvent("esc")
