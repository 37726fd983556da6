"""Count perfect shuffles needed to restore a deck to its original order."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def perfect_shuffle(items: Sequence[T]) -> list[T]:
    """Split the deck in half and interleave, starting with the back half.

    For an odd size the back half holds the extra card.
    """
    half = len(items) // 2
    left = list(items[:half])
    right = list(items[half:])
    result: list[T] = [None] * len(items)  # type: ignore[list-item]
    result[0::2] = right
    result[1::2] = left
    return result


def shuffle_count(size: int) -> int:
    """Return how many shuffles bring a deck of the given size back to order."""
    if size < 0:
        raise ValueError("deck size must not be negative")
    original = list(range(size))
    deck = perfect_shuffle(original)
    count = 1
    while deck != original:
        deck = perfect_shuffle(deck)
        count += 1
    return count


def shuffle_table(limit: int) -> Iterator[tuple[int, int]]:
    """Yield (size, shuffle count) for every deck size from 1 to limit."""
    for size in range(1, limit + 1):
        yield size, shuffle_count(size)


def main(argv: list[str] | None = None) -> int:
    """Print the shuffle-count table up to the deck size given as the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: shuffle <max deck size>", file=sys.stderr)
        return 1
    try:
        limit = int(args[0])
    except ValueError:
        print(f"invalid deck size: {args[0]}", file=sys.stderr)
        return 1
    print("deck size       shuffle count")
    print("------------------------------")
    for size, count in shuffle_table(limit):
        print(f" {size:<16d}{count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())