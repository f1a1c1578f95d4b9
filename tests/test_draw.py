"""Tests for draw.py: bar colors, overlay text and off-screen drawing."""

from unittest.mock import MagicMock

import pygame
import pytest

from sortviz.draw import (
    ACTIVE_COLOR, BACKGROUND_COLOR, SORTED_COLOR, bar_color, draw_bars,
    overlay_lines, value_to_color,
)
from sortviz.sorters import RunStats


class TestColors:
    def test_sorted_wins_over_highlight(self):
        assert bar_color(1, 5, 10, (1, 2), [False, True, False]) == SORTED_COLOR

    def test_highlight_wins_over_rainbow(self):
        assert bar_color(2, 5, 10, (1, 2), [False, True, False]) == ACTIVE_COLOR

    def test_plain_bar_is_rainbow(self):
        assert bar_color(0, 5, 10, (1, 2), [False, False, False]) == value_to_color(5, 10)
        assert bar_color(0, 5, 10, None, None) == value_to_color(5, 10)

    def test_low_values_warm_high_values_cool(self):
        r, g, b = value_to_color(1, 100)
        assert r > b
        r, g, b = value_to_color(100, 100)
        assert b > g

    def test_color_does_not_depend_on_call_history(self):
        first = [bar_color(i, i + 1, 8, (2, 3), [i > 5 for i in range(8)]) for i in range(8)]
        for v in range(1, 50):
            value_to_color(v, 49)
        again = [bar_color(i, i + 1, 8, (2, 3), [i > 5 for i in range(8)]) for i in reversed(range(8))]
        assert first == list(reversed(again))


class TestOverlay:
    def test_lines(self):
        lines = overlay_lines("bubble", 100, 10)
        assert lines == [
            "Algorithm: Bubble Sort",
            "Time Complexity: O(n^2)",
            "Space Complexity: O(1)",
            "Array Size: 100",
            "Delay: 10ms",
        ]

    def test_stats_and_status(self):
        st = RunStats()
        st.comparisons, st.swaps = 6, 2
        lines = overlay_lines("selection", 4, 0, st, "[SORTED]")
        assert lines[0] == "Algorithm: Selection Sort  [SORTED]"
        assert lines[-1] == "Comparisons: 6   Swaps: 2"


class TestDrawBars:
    def test_paints_bars_bottom_up(self):
        screen = pygame.Surface((40, 40))
        draw_bars(screen, [1, 2, 3, 4], (2, 3), [True, False, False, False])
        # first bar is sorted, bars 2 and 3 are compared
        assert tuple(screen.get_at((4, 38)))[:3] == SORTED_COLOR
        assert tuple(screen.get_at((24, 38)))[:3] == ACTIVE_COLOR
        assert tuple(screen.get_at((34, 2)))[:3] == ACTIVE_COLOR
        # value 1 of 4 only fills the bottom quarter
        assert tuple(screen.get_at((4, 5)))[:3] == BACKGROUND_COLOR

    def test_overlay_is_blitted(self):
        screen = pygame.Surface((100, 100))
        font = MagicMock()
        font.render.return_value = pygame.Surface((5, 5))
        draw_bars(screen, [2, 1], None, [False, False], ["a", "b"], font)
        assert [c.args[0] for c in font.render.call_args_list] == ["a", "b"]

    def test_empty_array(self):
        screen = pygame.Surface((10, 10))
        draw_bars(screen, [], None, [])
        assert tuple(screen.get_at((5, 5)))[:3] == BACKGROUND_COLOR

    @pytest.mark.parametrize("size, n", [((320, 200), 3), ((320, 200), 7), ((101, 77), 13)])
    def test_fractional_bars_reach_bottom_row(self, size, n):
        screen = pygame.Surface(size)
        w, h = size
        draw_bars(screen, list(range(1, n + 1)), None, [True] * n)
        for i in range(n):
            x = int((i + 0.5) * w / n)
            assert tuple(screen.get_at((x, h - 1)))[:3] == SORTED_COLOR

    def test_columns_leave_one_pixel_gap(self):
        screen = pygame.Surface((30, 10))
        draw_bars(screen, [3, 3, 3], None, [True] * 3)
        row = [tuple(screen.get_at((x, 9)))[:3] for x in range(30)]
        assert row.count(BACKGROUND_COLOR) == 3
        assert row[9] == row[19] == row[29] == BACKGROUND_COLOR

    @pytest.mark.parametrize("n", [1, 500])
    def test_any_size_fits(self, n):
        screen = pygame.Surface((100, 60))
        draw_bars(screen, list(range(1, n + 1)), None, [False] * n)
