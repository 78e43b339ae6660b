"""Rotate a string by swapping each character with the one m places ahead."""

from __future__ import annotations


def rotate(text: str, m: int) -> str:
    """Swap text[i] with text[i + m] for each i in turn, left to right.

    When the length is a multiple of m this is a left rotation by m.
    """
    if m < 0:
        raise ValueError("shift must not be negative")
    if m >= len(text):
        raise ValueError("shift must be shorter than the text")
    chars = list(text)
    for i in range(len(chars) - m):
        chars[i], chars[i + m] = chars[i + m], chars[i]
    return "".join(chars)