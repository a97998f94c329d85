"""Tests for greedy description wrapping.

Pins the strict ``len(line) + len(word) < width`` packing rule and the
degenerate-width and empty-text behavior.
"""

from __future__ import annotations

import random
import unittest

from treeglide.render.wrap import wrap_words


class WrapWordsTests(unittest.TestCase):
    def test_strict_packing_rule(self) -> None:
        self.assertEqual(wrap_words("one two three", 7), ["one two", "three"])

    def test_line_never_exceeds_width_when_words_fit(self) -> None:
        lines = wrap_words("aa bb cc dd ee ff", 5)
        self.assertEqual(lines, ["aa bb", "cc dd", "ee ff"])

    def test_word_equal_to_width_starts_its_own_line(self) -> None:
        self.assertEqual(wrap_words("abcde x", 5), ["abcde", "x"])

    def test_overlong_word_is_not_split(self) -> None:
        self.assertEqual(wrap_words("a extraordinary b", 4), ["a", "extraordinary", "b"])

    def test_empty_and_blank_text_yield_no_lines(self) -> None:
        self.assertEqual(wrap_words("", 10), [])
        self.assertEqual(wrap_words("   \t ", 10), [])

    def test_non_positive_width_returns_single_line(self) -> None:
        self.assertEqual(wrap_words("one  two\tthree", 0), ["one two three"])
        self.assertEqual(wrap_words("one two", -3), ["one two"])
        self.assertEqual(wrap_words("", -3), [])

    def test_wide_characters_count_two_columns(self) -> None:
        self.assertEqual(wrap_words("界界 ab", 5), ["界界", "ab"])

    def test_joined_lines_reproduce_word_sequence(self) -> None:
        rng = random.Random(7)
        for _ in range(200):
            words = ["x" * rng.randint(1, 8) for _ in range(rng.randint(0, 20))]
            text = " ".join(words)
            width = rng.randint(8, 30)
            lines = wrap_words(text, width)
            self.assertEqual(" ".join(lines).split(), words)
            for line in lines:
                self.assertLessEqual(len(line), width)


if __name__ == "__main__":
    unittest.main()
