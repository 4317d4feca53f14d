# tests/test_theme.py
import curses

import pytest

from gridtui import theme
from gridtui.theme import (
    PairRegistry, Style, TableColors,
    compose, zebra_style, color_tier, resolve_shade,
)


def test_available_palettes():
    assert theme.available_palettes() == ["blue", "emerald", "indigo", "red"]


@pytest.mark.parametrize("count,tier", [(0, 8), (8, 8), (16, 16), (88, 16), (256, 256), (16777216, 256)])
def test_color_tier_buckets(count, tier):
    assert color_tier(count) == tier


def test_alt_row_uses_bright_black_only_on_16_colours():
    assert resolve_shade(theme.SLATE_900, 8) == curses.COLOR_BLACK
    assert resolve_shade(theme.SLATE_900, 16) == 8
    assert resolve_shade(theme.SLATE_900, 256) == 236


def test_from_palette_256_uses_tailwind_indices():
    c = TableColors.from_palette("indigo", 256)
    assert c.selected_row_fg == 105
    assert c.selected_column_fg == 105
    assert c.selected_cell_fg == 62
    assert c.normal_row_bg != c.alt_row_bg


def test_unknown_palette_is_rejected():
    with pytest.raises(KeyError):
        TableColors.from_palette("mauve")


def test_zebra_alternates_by_parity(colors):
    assert zebra_style(colors, 0).bg == colors.normal_row_bg
    assert zebra_style(colors, 1).bg == colors.alt_row_bg
    assert zebra_style(colors, 2).bg == colors.normal_row_bg
    assert zebra_style(colors, 1).fg == colors.row_fg


def test_layers_merge_in_fixed_order(colors):
    base = zebra_style(colors, 0)
    # Passing layers out of order must not change the result.
    assert compose(base, ("cell", "row", "column"), colors) == compose(base, ("row", "column", "cell"), colors)


def test_layer_results_are_distinct(colors):
    base = zebra_style(colors, 1)
    row_only = compose(base, ("row",), colors)
    column_only = compose(base, ("column",), colors)
    all_three = compose(base, ("row", "column", "cell"), colors)

    assert row_only == Style(fg=colors.selected_row_fg, bg=base.bg, reverse=True)
    assert column_only == Style(fg=colors.selected_column_fg, bg=base.bg)
    assert all_three == Style(fg=colors.selected_cell_fg, bg=base.bg, reverse=True, bold=True)
    assert len({base, row_only, column_only, all_three}) == 4


def test_compose_leaves_base_untouched(colors):
    base = zebra_style(colors, 0)
    compose(base, ("row", "column", "cell"), colors)
    assert base == Style(fg=colors.row_fg, bg=colors.normal_row_bg)


def test_pair_registry_allocates_once_per_combination(fake_curses):
    reg = PairRegistry(limit=16)
    a = reg.pair_for(1, 2)
    b = reg.pair_for(1, 2)
    c = reg.pair_for(2, 1)
    assert a == b == 1
    assert c == 2
    assert fake_curses == {1: (1, 2), 2: (2, 1)}


def test_pair_registry_falls_back_when_full(fake_curses):
    reg = PairRegistry(limit=2)
    assert reg.pair_for(1, 2) == 1
    assert reg.pair_for(3, 4) == 0


def test_attr_adds_reverse_and_bold(fake_curses):
    reg = PairRegistry(limit=16)
    attr = reg.attr(Style(fg=1, bg=2, reverse=True, bold=True))
    assert attr & curses.A_REVERSE
    assert attr & curses.A_BOLD
    assert attr & ~(curses.A_REVERSE | curses.A_BOLD) == 1 << 8


def test_disabled_registry_never_inits_pairs(fake_curses):
    reg = PairRegistry(enabled=False)
    assert reg.attr(Style(fg=3, bg=4)) == 0
    assert fake_curses == {}


def test_init_theme_without_colour_support(monkeypatch, fake_curses):
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    colors, reg = theme.init_theme("red")
    assert colors.name == "red"
    assert colors.tier == 8
    assert reg.enabled is False


def test_init_theme_with_colours(monkeypatch, fake_curses):
    monkeypatch.setattr(curses, "has_colors", lambda: True)
    monkeypatch.setattr(curses, "start_color", lambda: None)
    monkeypatch.setattr(curses, "use_default_colors", lambda: None)
    colors, reg = theme.init_theme("emerald")
    assert colors.tier == 256
    assert colors.selected_cell_fg == 35
    assert reg.enabled is True


def test_init_theme_without_colours_marks_palette_mono(monkeypatch, fake_curses):
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    colors, _ = theme.init_theme()
    assert colors.mono is True


def test_column_layer_underlines_only_in_mono():
    colour = TableColors.from_palette("blue", 256)
    mono = TableColors.from_palette("blue", 8, mono=True)
    assert compose(zebra_style(colour, 0), ("column",), colour).underline is False
    assert compose(zebra_style(mono, 0), ("column",), mono).underline is True


def test_attr_adds_underline(fake_curses):
    reg = PairRegistry(enabled=False)
    assert reg.attr(Style(underline=True)) == curses.A_UNDERLINE
