"""Report the lines of a file in sorted order and in tree pre-order."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from adtkit.dictionary import Dictionary
from adtkit.rb_dictionary import RedBlackDictionary


def _read_lines(path: str) -> list[str]:
    """Return the lines of a file split on newlines, without line terminators."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def order_report(
    lines: Iterable[str],
    factory: Callable[[], Dictionary] = RedBlackDictionary,
) -> str:
    """Map each line to its 1-based line number and describe the result.

    The report is the in-order listing of ``key : value`` pairs, a blank
    line, then the keys in pre-order, then another blank line. A line that
    repeats keeps the number of its last occurrence.
    """
    table = factory()
    for number, line in enumerate(lines, start=1):
        table.set_value(line, number)
    return f"{table}\n{table.pre_string()}\n"


def main(argv: list[str] | None = None) -> int:
    """Read an input file and write its order report to an output file."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: order <input file> <output file>", file=sys.stderr)
        return 1
    source, target = args
    try:
        lines = _read_lines(source)
    except OSError:
        print(f"Unable to open file {source} for reading", file=sys.stderr)
        return 1
    report = order_report(lines)
    try:
        Path(target).write_text(report, encoding="utf-8")
    except OSError:
        print(f"Unable to open file {target} for writing", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())