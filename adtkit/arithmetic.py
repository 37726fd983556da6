"""Run a fixed battery of big-integer operations on two numbers."""

from __future__ import annotations

import sys
from pathlib import Path

from adtkit.biginteger import BigInteger


def arithmetic_report(first: str, second: str) -> str:
    """Return the report for A=first and B=second, each value followed by a blank line."""
    a = BigInteger(first)
    b = BigInteger(second)
    three = BigInteger("3")
    two = BigInteger("2")
    nine = BigInteger("9")
    sixteen = BigInteger("16")
    values = [
        a,
        b,
        a + b,
        a - b,
        a - a,
        a * three - b * two,
        a * b,
        a * a,
        b * b,
        a * a * a * a * nine + b * b * b * b * b * sixteen,
    ]
    return "".join(f"{value}\n\n" for value in values)


def main(argv: list[str] | None = None) -> int:
    """Read two numbers from an input file and write the report to an output file."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        return 0
    source, target = args
    tokens = Path(source).read_text().split()
    first, second = (tokens + ["", ""])[:2]
    try:
        report = arithmetic_report(first, second)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    Path(target).write_text(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())