import pytest

from precise_number.core import PreciseNumber, make_commonized
from precise_number.core.number import (
    ZERO,
    ONE,
    NEGATIVE_ONE,
    E,
    PI,
    TAU,
    ADDITIVE_IDENTITY,
    MULTIPLICATIVE_IDENTITY,
)
from precise_number.core.exc import PreciseNumberTypeError


def _parts(x: PreciseNumber):
    return x.exponent, x.significand, x.significant_digits


# -----------------------------
# Construction & canonical form
# -----------------------------

@pytest.mark.parametrize(
    "exp,sig,expected",
    [
        (2, 123, (2, 123, 3)),
        (2, -123, (2, -123, 3)),
        (2, 0, (0, 0, 0)),
        (2, 12300, (4, 123, 3)),
        (2, 123000, (5, 123, 3)),
        (-2, 123000, (1, 123, 3)),
        (-5, 12345, (-5, 12345, 5)),
        (0, 79228162514264337593543950335, (0, 79228162514264337593543950335, 29)),
        (0, -79228162514264337593543950335, (0, -79228162514264337593543950335, 29)),
    ],
)
def test_constructor_canonicalises(exp, sig, expected):
    print(f"[construct] ({exp}, {sig}) -> expect {expected}")
    assert _parts(PreciseNumber(exp, sig)) == expected


def test_constructor_sanitize_false_keeps_raw_pair():
    print("[construct-raw] (2, 12300, sanitize=False) keeps trailing zeros")
    x = PreciseNumber(2, 12300, sanitize=False)
    assert _parts(x) == (2, 12300, 5)


def test_unsanitized_value_equals_canonical_and_hashes_alike():
    print("[construct-raw] raw 12300e2 == canonical 123e4, same hash")
    raw = PreciseNumber(2, 12300, sanitize=False)
    canon = PreciseNumber(4, 123)
    assert raw == canon
    assert hash(raw) == hash(canon)
    assert raw.canonical_pair() == (4, 123)


@pytest.mark.parametrize("exp,sig", [(0, 0), (7, 0), (3, 1000), (-4, -25000), (-9, 7), (12, 10 ** 30)])
def test_canonicalisation_is_idempotent(exp, sig):
    once = PreciseNumber(exp, sig)
    twice = PreciseNumber(once.exponent, once.significand)
    print(f"[idempotent] ({exp}, {sig}) -> {once!r} -> {twice!r}")
    assert _parts(once) == _parts(twice)


@pytest.mark.parametrize(
    "exp,sig",
    [(0, 1.5), ("1", 2), (True, 1), (0, False), (None, 1)],
)
def test_constructor_rejects_non_int_components(exp, sig):
    print(f"[construct-type] ({exp!r}, {sig!r}) -> expect PreciseNumberTypeError")
    with pytest.raises(PreciseNumberTypeError):
        PreciseNumber(exp, sig)


def test_constructor_type_error_is_a_type_error():
    with pytest.raises(TypeError):
        PreciseNumber(0, 1.5)


def test_instances_are_immutable():
    x = PreciseNumber(1, 2)
    with pytest.raises(AttributeError):
        x.significand = 3  # type: ignore[misc]


# -----------------------------
# Named constants
# -----------------------------

def test_anchor_constants():
    print("[constants] ZERO/ONE/NEGATIVE_ONE components")
    assert _parts(ZERO) == (0, 0, 0)
    assert _parts(ONE) == (0, 1, 1)
    assert _parts(NEGATIVE_ONE) == (0, -1, 1)
    assert PreciseNumber.ZERO is ZERO
    assert PreciseNumber.ONE is ONE
    assert PreciseNumber.NEGATIVE_ONE is NEGATIVE_ONE
    assert ADDITIVE_IDENTITY == ZERO
    assert MULTIPLICATIVE_IDENTITY == ONE


def test_high_precision_constants():
    print("[constants] E, PI, TAU precision")
    assert (E.exponent, E.significant_digits) == (-40, 41)
    assert (PI.exponent, PI.significant_digits) == (-25, 26)
    assert (TAU.exponent, TAU.significant_digits) == (-24, 25)
    assert str(PI).startswith("3.14159265358979")
    assert str(E).startswith("2.71828182845904")
    assert str(TAU).startswith("6.28318530717958")


def test_equal_raw_constructions_match_anchors():
    assert PreciseNumber(0, 1) == ONE
    assert PreciseNumber(0, -1) == NEGATIVE_ONE
    assert PreciseNumber(0, 0) == ZERO


# -----------------------------
# Predicates
# -----------------------------

def test_has_infinite_precision():
    print("[anchor] 0, 1, -1 are anchors; 2 is not")
    assert ONE.has_infinite_precision
    assert ZERO.has_infinite_precision
    assert NEGATIVE_ONE.has_infinite_precision
    assert not PreciseNumber(0, 2).has_infinite_precision
    assert not PreciseNumber(1, 1).has_infinite_precision


def test_count_decimal_digits():
    assert PreciseNumber(-3, 123).count_decimal_digits() == 3
    assert PreciseNumber(-2, 12345).count_decimal_digits() == 2
    assert PreciseNumber(2, 5).count_decimal_digits() == 0
    assert ONE.count_decimal_digits() == 0


def test_integer_parity_predicates():
    two = PreciseNumber.from_int(2)
    twenty = PreciseNumber.from_int(20)
    half = PreciseNumber(-1, 5)
    assert two.is_even_integer() and not two.is_odd_integer()
    assert twenty.is_even_integer()
    assert ONE.is_odd_integer() and not ONE.is_even_integer()
    assert ZERO.is_even_integer()
    assert not half.is_integer()
    assert not half.is_even_integer() and not half.is_odd_integer()


def test_sign_predicates():
    assert NEGATIVE_ONE.is_negative()
    assert not ONE.is_negative()
    assert ONE.is_positive()
    assert ZERO.is_positive()
    assert not NEGATIVE_ONE.is_positive()
    assert ZERO.is_zero() and not ONE.is_zero()
    assert not bool(ZERO)
    assert bool(PreciseNumber(-3, -1))


def test_repr_shows_components():
    assert repr(PreciseNumber(-2, 12345)) == "PreciseNumber(12345e-2)"
    assert repr(ZERO) == "PreciseNumber(0e0)"


# -----------------------------
# Commonization
# -----------------------------

def test_make_commonized_rescales_to_smaller_exponent():
    print("[commonize] 123e1 and 456e3 -> common exponent 1")
    left, right, e = make_commonized(PreciseNumber(1, 123), PreciseNumber(3, 456))
    assert e == 1
    assert (left.exponent, left.significand) == (1, 123)
    assert (right.exponent, right.significand) == (1, 45600)
    assert right.significant_digits == 5


def test_make_commonized_keeps_values():
    a = PreciseNumber(-2, 12345)
    b = PreciseNumber(4, -7)
    ca, cb, e = make_commonized(a, b)
    assert e == -2
    assert ca == a and cb == b
    assert cb.significand == -7 * 10 ** 6


# -----------------------------
# Equality & hashing
# -----------------------------

def test_hash_consistency():
    n1 = PreciseNumber(2, 12345)
    n2 = PreciseNumber(2, 12345)
    n3 = PreciseNumber(3, 12345)
    assert hash(n1) == hash(n2)
    assert hash(n1) != hash(n3)
    assert len({n1, n2, n3}) == 2


def test_equality_with_foreign_types():
    assert ONE != "1"
    assert not (ONE == "1")
    assert ONE != None  # noqa: E711
