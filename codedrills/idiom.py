"""Chain four-character idioms: find one that starts where the given one ends."""

from __future__ import annotations

import random
import sys
from collections import defaultdict
from collections.abc import Iterable, Sequence

WORD_LENGTH = 4
DEFAULT_DICTIONARY = "dict.txt"
DEFAULT_WORD = "好好学习"


def load_dictionary(words: Iterable[str]) -> dict[str, list[str]]:
    """Group words of at least four characters by their first character."""
    dictionary: dict[str, list[str]] = defaultdict(list)
    for word in words:
        if len(word) >= WORD_LENGTH:
            dictionary[word[0]].append(word)
    return dict(dictionary)


def _chain_key(word: str) -> str:
    if len(word) < WORD_LENGTH:
        raise ValueError(f"an idiom needs at least {WORD_LENGTH} characters")
    return word[WORD_LENGTH - 1:2 * WORD_LENGTH - 1]


def next_idiom(
    word: str,
    dictionary: dict[str, list[str]],
    rng: random.Random | None = None,
) -> str | None:
    """Pick at random a word that starts with the last character of word, or None."""
    candidates = dictionary.get(_chain_key(word))
    if not candidates:
        return None
    return (rng or random).choice(candidates)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or len(args[0]) < WORD_LENGTH:
        print(f"Usage: idiom {DEFAULT_WORD} [DICTIONARY]")
        return 1
    word = args[0]
    path = args[1] if len(args) > 1 else DEFAULT_DICTIONARY
    try:
        with open(path, encoding="utf-8") as handle:
            dictionary = load_dictionary(handle.read().split())
    except OSError:
        dictionary = {}
    print(_chain_key(word))
    found = next_idiom(word, dictionary)
    if found is not None:
        print(found)
    return 0


if __name__ == "__main__":
    sys.exit(main())