"""Number and string palindromes: digit reversal, palindrome tests, Manacher's algorithm."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

_HIGHLIGHT_START = "\033[33m"
_HIGHLIGHT_END = "\033[0m"
_UINT32_MASK = 0xFFFFFFFF
_DEFAULT_NUMBER = 616


def parse_int(text: str) -> int:
    """Parse an optionally negative decimal, dropping any fractional part."""
    if not text:
        raise ValueError("cannot parse an empty string")
    negative = text.startswith("-")
    body = text[1:] if negative else text
    whole = body.split(".", 1)[0]
    if whole and not whole.isdigit():
        raise ValueError(f"not a decimal number: {text!r}")
    value = sum(int(digit) * 10**power for power, digit in enumerate(reversed(whole)))
    return -value if negative else value


def reverse_digits(num: int) -> int:
    """Reverse the decimal digits of a non-negative integer."""
    if num < 0:
        raise ValueError("number must not be negative")
    rev = 0
    while num:
        num, digit = divmod(num, 10)
        rev = rev * 10 + digit
    return rev


def is_palindrome(x: int) -> bool:
    """Whether a non-negative integer reads the same in both directions."""
    if x < 0:
        return False
    div = 1
    while x // div >= 10:
        div *= 10
    while x:
        if x // div != x % 10:
            return False
        x = (x % div) // 10
        div //= 100
    return True


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring, the leftmost one on ties (Manacher)."""
    if not s:
        return ""
    t = "^#" + "#".join(s) + "#$"
    radii = [0] * len(t)
    center = right = 0
    for i in range(1, len(t) - 1):
        radius = min(right - i, radii[2 * center - i]) if right > i else 0
        while t[i + 1 + radius] == t[i - 1 - radius]:
            radius += 1
        radii[i] = radius
        if i + radius > right:
            center, right = i, i + radius
    max_len = max(radii)
    center_index = radii.index(max_len)
    start = (center_index - 1 - max_len) // 2
    return s[start:start + max_len]


def highlight_longest(s: str) -> str:
    """Wrap the first longest palindrome of s in terminal colour codes."""
    found = longest_palindrome(s)
    pos = s.find(found)
    return s[:pos] + _HIGHLIGHT_START + found + _HIGHLIGHT_END + s[pos + len(found):]


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _as_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="palindrome", description="Number palindromes, or the longest palindrome in a file."
    )
    parser.add_argument("number", nargs="?", help="number to examine (default 616)")
    parser.add_argument("--text", metavar="FILE", help="highlight the longest palindrome in the first word of FILE")
    args = parser.parse_args(argv)

    if args.text is not None:
        try:
            with open(args.text, encoding="utf-8") as handle:
                words = handle.read().split()
        except OSError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
        print(highlight_longest(words[0] if words else ""))
        return 0

    if args.number is None:
        value = _DEFAULT_NUMBER
        parsed = value
    else:
        try:
            parsed = parse_int(args.number)
        except ValueError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
        value = _atoi(args.number)
    print(parsed)
    print(value)
    print(_as_int32(reverse_digits(value & _UINT32_MASK) & _UINT32_MASK))
    print(int(is_palindrome(value)))
    return 0


if __name__ == "__main__":
    sys.exit(main())