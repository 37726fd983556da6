"""Cursor lists, big integers, ordered dictionaries and command-line tools built on them."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "biginteger",
    "cursor_list",
    "dictionary",
    "order",
    "rb_dictionary",
    "shuffle",
    "word_frequency",
]