"""Arbitrary-precision signed integers stored as base 10**9 limbs."""

from __future__ import annotations

BASE = 1_000_000_000
POWER = 9
_DIGITS = frozenset("0123456789")


def _compare_magnitude(a: list[int], b: list[int]) -> int:
    """Compare two little-endian limb lists; return -1, 0 or 1."""
    left = (len(a), a[::-1])
    right = (len(b), b[::-1])
    return (left > right) - (left < right)


def _add_magnitude(a: list[int], b: list[int]) -> list[int]:
    result: list[int] = []
    carry = 0
    for index in range(max(len(a), len(b))):
        total = carry
        if index < len(a):
            total += a[index]
        if index < len(b):
            total += b[index]
        carry, limb = divmod(total, BASE)
        result.append(limb)
    if carry:
        result.append(carry)
    return result


def _sub_magnitude(a: list[int], b: list[int]) -> list[int]:
    """Return |a| - |b|, assuming |a| >= |b|."""
    result: list[int] = []
    borrow = 0
    for index, limb in enumerate(a):
        diff = limb - borrow - (b[index] if index < len(b) else 0)
        borrow = 0
        if diff < 0:
            diff += BASE
            borrow = 1
        result.append(diff)
    return result


def _mul_magnitude(a: list[int], b: list[int]) -> list[int]:
    columns = [0] * (len(a) + len(b) + 1)
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            columns[i + j] += x * y
    result: list[int] = []
    carry = 0
    for column in columns:
        carry, limb = divmod(column + carry, BASE)
        result.append(limb)
    while carry:
        carry, limb = divmod(carry, BASE)
        result.append(limb)
    return result


class BigInteger:
    """A signed integer of unbounded size.

    Built from a decimal string with an optional leading ``+`` or ``-``.
    With no argument the value is zero.
    """

    def __init__(self, text: str | None = None) -> None:
        self._sign = 0
        self._limbs: list[int] = []
        if text is None:
            return
        sign = 1
        body = text
        if body[:1] in ("+", "-"):
            sign = -1 if body[0] == "-" else 1
            body = body[1:]
        if not body or not set(body) <= _DIGITS:
            raise ValueError("non-numeric string")
        body = body.lstrip("0")
        limbs = []
        end = len(body)
        while end > 0:
            start = max(0, end - POWER)
            limbs.append(int(body[start:end]))
            end = start
        self._set(sign, limbs)

    def _set(self, sign: int, limbs: list[int]) -> None:
        while limbs and limbs[-1] == 0:
            limbs.pop()
        self._limbs = limbs
        self._sign = sign if limbs else 0

    @classmethod
    def _from_parts(cls, sign: int, limbs: list[int]) -> BigInteger:
        value = cls()
        value._set(sign, list(limbs))
        return value

    # Access -------------------------------------------------------------

    def sign(self) -> int:
        """Return 1, -1 or 0 for a positive, negative or zero value."""
        return self._sign

    def compare(self, other: BigInteger) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than other."""
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        return self._sign * _compare_magnitude(self._limbs, other._limbs)

    # Manipulation -------------------------------------------------------

    def make_zero(self) -> None:
        """Reset this value to zero."""
        self._sign = 0
        self._limbs = []

    def negate(self) -> None:
        """Reverse the sign; zero stays zero."""
        self._sign = -self._sign

    def copy(self) -> BigInteger:
        """Return an independent copy."""
        return BigInteger._from_parts(self._sign, self._limbs)

    # Arithmetic ---------------------------------------------------------

    def add(self, other: BigInteger) -> BigInteger:
        """Return self + other."""
        if self._sign == 0:
            return other.copy()
        if other._sign == 0:
            return self.copy()
        if self._sign == other._sign:
            return BigInteger._from_parts(
                self._sign, _add_magnitude(self._limbs, other._limbs)
            )
        order = _compare_magnitude(self._limbs, other._limbs)
        if order == 0:
            return BigInteger()
        if order > 0:
            return BigInteger._from_parts(
                self._sign, _sub_magnitude(self._limbs, other._limbs)
            )
        return BigInteger._from_parts(
            other._sign, _sub_magnitude(other._limbs, self._limbs)
        )

    def sub(self, other: BigInteger) -> BigInteger:
        """Return self - other."""
        return self.add(BigInteger._from_parts(-other._sign, other._limbs))

    def mult(self, other: BigInteger) -> BigInteger:
        """Return self * other."""
        if self._sign == 0 or other._sign == 0:
            return BigInteger()
        return BigInteger._from_parts(
            self._sign * other._sign, _mul_magnitude(self._limbs, other._limbs)
        )

    # Operators ----------------------------------------------------------

    def __str__(self) -> str:
        if self._sign == 0:
            return "0"
        top, *rest = reversed(self._limbs)
        text = str(top) + "".join(str(limb).zfill(POWER) for limb in rest)
        return "-" + text if self._sign < 0 else text

    def __repr__(self) -> str:
        return f"BigInteger({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self._sign == other._sign and self._limbs == other._limbs

    def __hash__(self) -> int:
        return hash((self._sign, tuple(self._limbs)))

    def __lt__(self, other: BigInteger) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: BigInteger) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: BigInteger) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: BigInteger) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other: BigInteger) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: BigInteger) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: BigInteger) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.mult(other)