import pytest

from adtkit.biginteger import BigInteger

S2 = "-330293847502398475"
S4 = "9876545439000000000000000100000000000006543654365346534"

VALUES = [
    S2,
    S4,
    "0",
    "1",
    "-1",
    "999999999",
    "1000000000",
    "-1000000000000000000",
    "123456789012345678901234567890",
    "+42",
]


def test_string_round_trip():
    assert str(BigInteger(S2)) == S2
    assert str(BigInteger(S4)) == S4


def test_plus_sign_and_leading_zeros_dropped():
    assert str(BigInteger("+42")) == "42"
    assert str(BigInteger("0001000000000")) == "1000000000"


def test_zero_forms():
    assert str(BigInteger()) == "0"
    assert BigInteger("-000").sign() == 0
    assert BigInteger("0") == BigInteger()


@pytest.mark.parametrize(
    "text",
    ["", "+", "-", "12329837492387492837492$4982379487293847", "abc+82734098729287349827398", "1-2"],
)
def test_invalid_strings(text):
    with pytest.raises(ValueError):
        BigInteger(text)


def test_sign():
    assert BigInteger(S2).sign() == -1
    assert BigInteger(S4).sign() == 1
    assert BigInteger("0").sign() == 0


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", VALUES)
def test_arithmetic_matches_int(a, b):
    x, y = BigInteger(a), BigInteger(b)
    assert str(x + y) == str(int(a) + int(b))
    assert str(x - y) == str(int(a) - int(b))
    assert str(x * y) == str(int(a) * int(b))
    assert x.compare(y) == (int(a) > int(b)) - (int(a) < int(b))


def test_comparisons_from_source_values():
    a, b = BigInteger(S2), BigInteger(S4)
    assert not a == b
    assert a < b
    assert a <= b
    assert not a > b
    assert not a >= b


def test_commutativity_and_identities():
    a, b = BigInteger(S2), BigInteger(S4)
    assert a + b == b + a
    assert a * b == b * a
    assert (a - a).sign() == 0
    assert ((a + b) * (a - a)).sign() == 0


def test_named_methods_match_operators():
    a, b = BigInteger(S2), BigInteger(S4)
    assert a.add(b) == a + b
    assert a.sub(b) == a - b
    assert a.mult(b) == a * b


def test_negate_and_make_zero():
    a = BigInteger(S2)
    a.negate()
    assert str(a) == S2[1:]
    z = BigInteger()
    z.negate()
    assert z.sign() == 0
    a.make_zero()
    assert str(a) == "0"


def test_copy_is_independent():
    a = BigInteger(S4)
    b = a.copy()
    b.negate()
    assert a == BigInteger(S4)
    assert b == BigInteger("-" + S4)


def test_hash_consistent_with_equality():
    assert hash(BigInteger("+42")) == hash(BigInteger("42"))
    assert len({BigInteger("1"), BigInteger("+1"), BigInteger("01")}) == 1


def test_carry_across_limbs():
    assert str(BigInteger("999999999") + BigInteger("1")) == "1000000000"
    assert str(BigInteger("1000000000") - BigInteger("1")) == "999999999"


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        BigInteger("1") + 1