# adtkit

Classic abstract data types with a cursor-style interface, plus a handful of
command-line tools built on top of them. Pure Python, no dependencies.

## Data types

### `adtkit.cursor_list.CursorList`

A sequence of integers with a cursor that sits between elements, at a position
from 0 (before the first element) to `len(lst)` (after the last).

- Inspect: `front()`, `back()`, `position()`, `peek_next()`, `peek_prev()`,
  `len()`, iteration, `str()` (e.g. `(1, 2, 3)`), `==`.
- Move: `move_front()`, `move_back()`, `move_next()`, `move_prev()` (the last
  two return the element passed over).
- Edit: `insert_after(x)`, `insert_before(x)`, `set_after(x)`, `set_before(x)`,
  `erase_after()`, `erase_before()`, `clear()`.
- Other: `find_next(x)` / `find_prev(x)` (return the new cursor position or
  -1), `cleanup()` (drop repeats, keeping the first occurrence and the cursor's
  place among kept elements), `concat(other)`, `copy()`.

Operations that need an element where there is none raise `IndexError`.

### `adtkit.biginteger.BigInteger`

Signed integers of any size, built from a decimal string with an optional
leading `+` or `-` (`BigInteger()` is zero). A string with no digits or with
any other character raises `ValueError`. Supports `+`, `-`, `*`, all
comparisons and hashing, plus `sign()`, `compare(other)`, `add`, `sub`, `mult`,
`negate()`, `make_zero()` and `copy()`.

### `adtkit.dictionary.Dictionary`

An ordered mapping backed by an unbalanced binary search tree. Keys may be any
mutually comparable values. It supports `d[key]`, `d[key] = value`,
`del d[key]`, `in`, `len()`, iteration over keys in order, `items()`, `copy()`
and `==`, along with `get_value`, `set_value`, `remove` and `clear`. A missing
key raises `KeyError`.

It also carries an internal cursor: `begin()`, `end()`, `next()`, `prev()`,
`has_current()`, `current_key()`, `current_val()` and `set_current_val(value)`.
Reading an undefined cursor raises `LookupError`.

`str(d)` lists `key : value` lines in key order; `pre_string()` lists the keys
in tree pre-order, one per line.

### `adtkit.rb_dictionary.RedBlackDictionary`

The same interface as `Dictionary`, kept balanced as a red-black tree.
`black_height()` returns the tree's black height and raises `ValueError` if the
red-black properties do not hold.

```python
from adtkit.biginteger import BigInteger
from adtkit.dictionary import Dictionary

a = BigInteger("-330293847502398475")
b = BigInteger("9876545439000000000000000100000000000006543654365346534")
print(a * b)

d = Dictionary([("of", 2), ("cruz", 5)])
d["santa"] = 4
print(d)
```

## Command-line tools

Install the package, then:

```
adtkit-arithmetic INPUT OUTPUT
```
Reads two whitespace-separated integers A and B from `INPUT` and writes, each
followed by a blank line: A, B, A+B, A-B, A-A, 3A-2B, AB, A², B², 9A⁴+16B⁵.
The same report is available as `adtkit.arithmetic.arithmetic_report(a, b)`.

```
adtkit-shuffle N
```
For each deck size from 1 to `N`, prints how many perfect shuffles (split in
half, interleave starting with the back half) bring the deck back to its
original order. See also `adtkit.shuffle.perfect_shuffle`, `shuffle_count` and
`shuffle_table`.

```
adtkit-order INPUT OUTPUT
```
Inserts each line of `INPUT` as a key of a `RedBlackDictionary`, valued by its
line number, and writes the in-order listing followed by the pre-order key
listing to `OUTPUT`. The report is available as `adtkit.order.order_report`.

```
adtkit-wordfreq INPUT OUTPUT
```
Splits `INPUT` on whitespace, punctuation and digits into lower-cased words and
writes each word with its count, in alphabetical order, to `OUTPUT`. See also
`adtkit.word_frequency.tokenize` and `word_frequencies`.

## Tests

```
pip install -e .[test]
pytest
```