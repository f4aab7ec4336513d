import pytest

from cursorbigint.biginteger import BigInteger

SAMPLES = [
    "+12222222222",
    "-122239009090",
    "12356756756756",
    "-12222222222",
    "0",
    "999999999",
    "1000000000",
    "-1000000000000000000",
    "123456789123456789123456789",
    "-1",
]


def _ref(text):
    return int(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_string_round_trip(text):
    assert str(BigInteger(text)) == str(int(text))


@pytest.mark.parametrize("text", SAMPLES)
def test_sign_matches(text):
    n = int(text)
    assert BigInteger(text).sign() == (n > 0) - (n < 0)


@pytest.mark.parametrize("value", [0, 7, -7, 10**9, -(10**18) - 5, 2**100])
def test_int_constructor_round_trip(value):
    assert str(BigInteger(value)) == str(value)


def test_leading_zeros_and_signed_zero():
    assert str(BigInteger("+0012")) == "12"
    assert BigInteger("-000").sign() == 0
    assert str(BigInteger("-000")) == "0"
    assert str(BigInteger()) == "0"


def test_copy_is_independent():
    a = BigInteger("-42")
    b = BigInteger(a)
    a.negate()
    assert str(b) == "-42"
    assert str(a) == "42"


@pytest.mark.parametrize("text", ["", "12a", "+", "-", "1-2", " 12", "1.5"])
def test_bad_strings(text):
    with pytest.raises(ValueError):
        BigInteger(text)


def test_bad_type():
    with pytest.raises(TypeError):
        BigInteger(1.5)


PAIRS = [(a, b) for a in SAMPLES for b in SAMPLES]


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_sub_mult_against_int(a, b):
    x, y = BigInteger(a), BigInteger(b)
    assert str(x + y) == str(_ref(a) + _ref(b))
    assert str(x - y) == str(_ref(a) - _ref(b))
    assert str(x * y) == str(_ref(a) * _ref(b))


@pytest.mark.parametrize("a,b", PAIRS)
def test_compare_against_int(a, b):
    x, y = BigInteger(a), BigInteger(b)
    expected = (_ref(a) > _ref(b)) - (_ref(a) < _ref(b))
    assert x.compare(y) == expected
    assert (x < y) == (_ref(a) < _ref(b))
    assert (x <= y) == (_ref(a) <= _ref(b))
    assert (x > y) == (_ref(a) > _ref(b))
    assert (x >= y) == (_ref(a) >= _ref(b))
    assert (x == y) == (_ref(a) == _ref(b))


def test_driver_cases():
    a = BigInteger("+12222222222")
    b = BigInteger("-122239009090")
    c = BigInteger("12356756756756")
    j = BigInteger("-12222222222")
    assert str(a * b) == str(12222222222 * -122239009090)
    assert str(c + b) == str(12356756756756 - 122239009090)
    assert str(a - b) == str(12222222222 + 122239009090)
    assert a.compare(j) == 1
    assert j.compare(a) == -1


def test_in_place_operators_rebind():
    a = BigInteger("+12222222222")
    b = BigInteger("-122239009090")
    original = a
    a *= b
    assert str(a) == str(12222222222 * -122239009090)
    assert str(original) == "12222222222"


def test_int_operands():
    x = BigInteger("123456789123")
    assert str(3 * x) == str(3 * 123456789123)
    assert str(x * 2) == str(123456789123 * 2)
    assert str(5 - x) == str(5 - 123456789123)
    assert str(x + 1) == str(123456789124)
    assert str(1 + x) == str(123456789124)
    assert x > 5
    assert x == 123456789123


def test_self_subtraction_is_zero():
    x = BigInteger("-987654321987654321")
    diff = x - x
    assert diff.sign() == 0
    assert str(diff) == "0"


def test_make_zero():
    x = BigInteger("555555555555")
    x.make_zero()
    assert x.sign() == 0
    assert str(x) == "0"
    assert x == BigInteger(0)


def test_negate_twice():
    x = BigInteger("31415926535897932")
    x.negate()
    assert str(x) == "-31415926535897932"
    x.negate()
    assert str(x) == "31415926535897932"
    z = BigInteger(0)
    z.negate()
    assert z.sign() == 0


def test_carry_across_digit_boundary():
    assert str(BigInteger("999999999") + BigInteger("1")) == "1000000000"
    assert str(BigInteger("1000000000") - BigInteger("1")) == "999999999"


def test_not_hashable_and_repr():
    x = BigInteger("-17")
    assert repr(x) == "BigInteger('-17')"
    with pytest.raises(TypeError):
        hash(x)


def test_comparison_with_other_type():
    assert (BigInteger("1") == "1") is False
    with pytest.raises(TypeError):
        BigInteger("1") < "2"