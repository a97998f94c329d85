"""Tests for the two-transition scroll window.

Checks that the window holds still while the cursor stays inside it, that
it recenters when the cursor leaves, and that it never overflows the height
or the content.
"""

from __future__ import annotations

import random
import unittest

from treeglide.tree_pane.window import ScrollWindow, WindowState, WindowTransition


class ScrollWindowTests(unittest.TestCase):
    def test_initial_window_starts_at_top(self) -> None:
        window = ScrollWindow()
        state = window.update(0, 2, total_lines=50, height=10)

        self.assertEqual(state, WindowState(0, 10))
        self.assertIs(window.last_transition, WindowTransition.KEEP)

    def test_cursor_inside_window_keeps_it(self) -> None:
        window = ScrollWindow()
        window.update(0, 2, total_lines=50, height=10)
        state = window.update(6, 9, total_lines=50, height=10)

        self.assertEqual(state, WindowState(0, 10))
        self.assertIs(window.last_transition, WindowTransition.KEEP)

    def test_cursor_below_window_recenters_to_top(self) -> None:
        window = ScrollWindow()
        window.update(0, 2, total_lines=50, height=10)
        state = window.update(9, 11, total_lines=50, height=10)

        self.assertEqual(state, WindowState(9, 19))
        self.assertIs(window.last_transition, WindowTransition.RECENTER)

    def test_cursor_above_window_recenters(self) -> None:
        window = ScrollWindow()
        window.update(30, 32, total_lines=50, height=10)
        state = window.update(12, 14, total_lines=50, height=10)

        self.assertEqual(state, WindowState(12, 22))

    def test_recenter_near_tail_keeps_window_full(self) -> None:
        window = ScrollWindow()
        state = window.update(45, 47, total_lines=50, height=10)

        self.assertEqual(state, WindowState(40, 50))

    def test_window_shrinks_with_content(self) -> None:
        window = ScrollWindow()
        window.update(30, 32, total_lines=50, height=10)
        state = window.update(30, 32, total_lines=35, height=10)

        self.assertEqual(state, WindowState(25, 35))
        self.assertIs(window.last_transition, WindowTransition.KEEP)

    def test_short_content_is_shown_whole(self) -> None:
        window = ScrollWindow()
        state = window.update(3, 4, total_lines=6, height=10)
        self.assertEqual(state, WindowState(0, 6))

    def test_growing_height_extends_window(self) -> None:
        window = ScrollWindow()
        window.update(12, 13, total_lines=50, height=5)
        state = window.update(12, 13, total_lines=50, height=8)

        self.assertEqual(state, WindowState(12, 20))

    def test_span_taller_than_height_shows_its_head(self) -> None:
        window = ScrollWindow()
        state = window.update(20, 30, total_lines=50, height=4)

        self.assertEqual(state, WindowState(20, 24))
        again = window.update(20, 30, total_lines=50, height=4)
        self.assertEqual(again, state)
        self.assertIs(window.last_transition, WindowTransition.KEEP)

    def test_non_positive_height_is_treated_as_one_line(self) -> None:
        window = ScrollWindow()
        state = window.update(7, 9, total_lines=20, height=0)
        self.assertEqual(state, WindowState(7, 8))

    def test_reset_forgets_position(self) -> None:
        window = ScrollWindow()
        window.update(30, 32, total_lines=50, height=10)
        window.reset()

        self.assertEqual(window.state, WindowState(0, 0))
        self.assertIsNone(window.last_transition)

    def test_random_spans_stay_visible_without_overflow(self) -> None:
        rng = random.Random(1234)
        window = ScrollWindow()
        for _ in range(2000):
            total = rng.randint(1, 120)
            height = rng.randint(1, 40)
            start = rng.randint(0, total - 1)
            end = rng.randint(start + 1, min(total, start + 6))
            state = window.update(start, end, total, height)

            self.assertLessEqual(0, state.start)
            self.assertLessEqual(state.start, start)
            self.assertLessEqual(state.end, total)
            self.assertLessEqual(state.size, height)
            if end - start <= height:
                self.assertLessEqual(end, state.end)
            else:
                self.assertEqual(state.end, start + height)


if __name__ == "__main__":
    unittest.main()
