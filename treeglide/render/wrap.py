"""Greedy word wrap for node descriptions."""

from __future__ import annotations

from .ansi import display_width


def wrap_words(text: str, width: int) -> list[str]:
    """Pack whitespace-separated words into lines of at most ``width`` columns.

    A word joins the current line while ``len(line) + len(word) < width``;
    the separating space is what makes the comparison strict. Words are never
    split, so a word wider than ``width`` sits alone on its own line. Text
    without words yields no lines, and a non-positive ``width`` returns the
    words on a single line.
    """
    words = text.split()
    if not words:
        return []
    if width <= 0:
        return [" ".join(words)]

    lines: list[str] = []
    current: list[str] = []
    current_width = 0
    for word in words:
        word_width = display_width(word)
        if not current:
            current = [word]
            current_width = word_width
        elif current_width + word_width < width:
            current.append(word)
            current_width += 1 + word_width
        else:
            lines.append(" ".join(current))
            current = [word]
            current_width = word_width
    lines.append(" ".join(current))
    return lines
