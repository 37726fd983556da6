"""Count how often each word appears in a text."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from pathlib import Path

from adtkit.rb_dictionary import RedBlackDictionary

DELIMITERS = " \t\\\"',<.>/?;:[{]}|`~!@#$%^&*()-_=+0123456789"
_WORD_PATTERN = re.compile("[^" + "".join(re.escape(c) for c in DELIMITERS) + "]+")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def tokenize(line: str) -> list[str]:
    """Split a line on punctuation, whitespace and digits; lower-case each word."""
    return [word.translate(_ASCII_LOWER) for word in _WORD_PATTERN.findall(line)]


def word_frequencies(lines: Iterable[str]) -> RedBlackDictionary:
    """Return a dictionary mapping each word to its number of occurrences."""
    counts = RedBlackDictionary()
    for line in lines:
        for word in tokenize(line):
            if word in counts:
                counts.set_value(word, counts.get_value(word) + 1)
            else:
                counts.set_value(word, 1)
    return counts


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def main(argv: list[str] | None = None) -> int:
    """Read an input file and write its word counts to an output file."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: word_frequency <input file> <output file>", file=sys.stderr)
        return 1
    source, target = args
    try:
        lines = _read_lines(source)
    except OSError:
        print(f"Unable to open file {source} for reading", file=sys.stderr)
        return 1
    report = f"{word_frequencies(lines)}\n"
    try:
        Path(target).write_text(report, encoding="utf-8")
    except OSError:
        print(f"Unable to open file {target} for writing", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())