import math
import warnings

import pytest

from fractax.core import flags
from fractax.core.approximator import approximate, search, to_fraction
from fractax.core.constants import DEFAULT_PRECISION, MAX_INTEGER, MIN_PRECISION, SEED_DENOMINATOR
from fractax.core.errors import DenominatorOverflowWarning, InvalidInputError
from fractax.core.typing import SplitPolicy
from fractax.core.utils import split_value

# values the search has to handle at the default precision
REGRESSION_VALUES = [
    0.1,
    0.99999997,
    (0x40000000 - 1.0) / (0x40000000 + 1.0),
    1.0 / 3.0,
    1.0 / (0x40000000 - 1.0),
    320.0 / 240.0,
    6.0 / 7.0,
    320.0 / 241.0,
    720.0 / 577.0,
    2971.0 / 3511.0,
    3041.0 / 7639.0,
    1.0 / math.sqrt(2),
    math.pi,
]


def test_approximate_one_tenth():
    """Test 0.1 is found as 1/10"""
    assert approximate(0.1, 1e-9) == (1, 10)


def test_approximate_one_third():
    """Test 1/3 is found as 1/3"""
    assert approximate(1.0 / 3.0, 1e-9) == (1, 3)


def test_approximate_four_thirds():
    """Test that the integer part is added back: 320/240 -> 4/3"""
    assert approximate(320.0 / 240.0, 1e-9) == (4, 3)


def test_approximate_six_sevenths():
    """Test 6/7 is found as 6/7"""
    assert approximate(6.0 / 7.0, 1e-9) == (6, 7)


def test_approximate_pi():
    """Test pi is matched to 9 decimal places"""
    num, denom = approximate(math.pi, 1e-9)
    assert denom > 0
    assert abs(num / denom - math.pi) < 1e-9


def test_approximate_close_to_one():
    """Test a value just below one"""
    num, denom = approximate(0.99999997, 1e-9)
    assert abs(num / denom - 0.99999997) < 1e-9


def test_approximate_integers():
    """Test integral values give a denominator of one"""
    assert approximate(0.0) == (0, 1)
    assert approximate(2.0) == (2, 1)
    assert approximate(-5.0) == (-5, 1)
    assert approximate(7) == (7, 1)


@pytest.mark.parametrize("value", REGRESSION_VALUES)
def test_to_fraction_default_precision(value):
    """Test the known hard cases are matched within 1e-9 at the default precision"""
    frac = to_fraction(value)
    assert frac.denom > 0
    assert abs(frac.value() - value) < 1e-9


@pytest.mark.parametrize("value", [0.1, 1.0 / 3.0, 0.123456789, math.e, 1.0 / math.sqrt(2), 42.4242])
@pytest.mark.parametrize("precision", [1e-3, 1e-6, 1e-9])
def test_to_fraction_within_precision(value, precision):
    """Test |to_fraction(v, p).value() - v| < p"""
    frac = to_fraction(value, precision)
    assert abs(frac.value() - value) < precision


def test_to_fraction_is_not_reduced():
    """Test that the raw search result lives on the seed lattice and is not reduced"""
    frac = to_fraction(0.1, 1e-9)
    assert (frac.num, frac.denom) == (231, SEED_DENOMINATOR)
    assert frac.reduced() == frac
    assert (frac.reduced().num, frac.reduced().denom) == (1, 10)


def test_search_seed_lattice_needs_no_iterations():
    """Test that fractions with small prime denominators are found without a search step"""
    for value in [0.1, 0.5, 1.0 / 3.0, 6.0 / 7.0, 1.0 / 11.0]:
        result = search(value, 1e-9)
        assert result.iterations == 0
        assert not result.overflowed


def test_search_iterations_bounded():
    """Test that an irrational value converges in a small number of steps"""
    result = search(math.pi, 1e-9)
    assert not result.overflowed
    assert 0 < result.iterations <= 21


def test_search_tie_breaking():
    """Test a target exactly in the middle of the seed bracket (both distances equal)"""
    result = search(0.75, 1e-9)
    assert result.iterations == 1
    assert result.fraction == 0.75
    assert approximate(0.75) == (3, 4)


@pytest.mark.parametrize("value", [0.1, 1.0 / 3.0, 6.0 / 7.0, 320.0 / 240.0, 0.99999997, math.pi, 1.0 / math.sqrt(2)])
def test_approximate_sign_symmetry(value):
    """Test approximate(-v) is the negation of approximate(v) with truncation"""
    num, denom = approximate(value, 1e-9)
    assert approximate(-value, 1e-9) == (-num, denom)


@pytest.mark.parametrize("value", [0.99999997, math.pi, 1.0 / math.sqrt(2), 2.25])
def test_search_sign_symmetry(value):
    """Test the search of -v mirrors the search of v, bound for bound"""
    pos = search(value, 1e-9)
    neg = search(-value, 1e-9)
    assert tuple(neg.fraction) == (-pos.fraction.num, pos.fraction.denom)
    assert tuple(neg.low) == (-pos.low.num, pos.low.denom)
    assert neg.iterations == pos.iterations
    assert abs(neg.fraction.value() + value) < 1e-9


def test_approximate_negative_values():
    """Test negative values with a fractional remainder"""
    assert approximate(-0.1, 1e-9) == (-1, 10)
    assert approximate(-2.25, 1e-9) == (-9, 4)
    num, denom = approximate(-math.pi, 1e-9)
    assert abs(num / denom + math.pi) < 1e-9


def test_approximate_floor_policy():
    """Test that both split policies find the same fraction"""
    assert approximate(-2.25, 1e-9, split=SplitPolicy.FLOOR) == (-9, 4)
    assert approximate(-0.1, 1e-9, split=SplitPolicy.FLOOR) == (-1, 10)
    num, denom = approximate(-math.pi, 1e-9, split=SplitPolicy.FLOOR)
    assert abs(num / denom + math.pi) < 1e-9


def test_split_value_truncate():
    """Test truncation toward zero keeps the sign in the remainder"""
    assert split_value(2.25, SplitPolicy.TRUNCATE) == (2, 0.25)
    assert split_value(-2.25, SplitPolicy.TRUNCATE) == (-2, -0.25)


def test_split_value_floor():
    """Test floor split gives a remainder in [0, 1)"""
    assert split_value(2.25, SplitPolicy.FLOOR) == (2, 0.25)
    assert split_value(-2.25, SplitPolicy.FLOOR) == (-3, 0.75)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_invalid_value(value):
    """Test that non-finite values are rejected"""
    with pytest.raises(InvalidInputError):
        approximate(value)


@pytest.mark.parametrize("precision", [0.0, -1e-9, math.nan, math.inf, 1e-300, 1e-16])
def test_invalid_precision(precision):
    """Test that precision has to be positive and finite"""
    with pytest.raises(InvalidInputError):
        approximate(0.5, precision)


def test_value_out_of_integer_range():
    """Test that values whose integer part does not fit are rejected"""
    with pytest.raises(InvalidInputError):
        approximate(float(MAX_INTEGER))
    with pytest.raises(InvalidInputError):
        approximate(1e300)
    with pytest.raises(InvalidInputError):
        approximate(1e5, max_integer=10**5)


def test_precision_floor():
    """Test precisions down to the floor are accepted and met"""
    frac = to_fraction(math.pi, MIN_PRECISION)
    assert abs(frac.value() - math.pi) < 1e-14
    with pytest.raises(InvalidInputError):
        search(math.pi, MIN_PRECISION / 10)


def test_value_beyond_float_range():
    """Test that integers too large for a float are invalid input"""
    with pytest.raises(InvalidInputError):
        approximate(10**400)
    with pytest.raises(InvalidInputError):
        search(-(10**400))


def test_invalid_max_integer():
    """Test that the overflow threshold has to leave room for the seed bracket"""
    with pytest.raises(InvalidInputError):
        approximate(0.5, max_integer=SEED_DENOMINATOR)


def test_invalid_input_is_value_error():
    """Test that invalid input can be caught as ValueError"""
    with pytest.raises(ValueError):
        approximate(math.nan)


def test_overflow_guard_returns_best_bound():
    """Test that the overflow guard stops the search and returns the current upper bound"""
    with pytest.warns(DenominatorOverflowWarning):
        result = search(math.pi, 1e-13, max_integer=2**15)

    assert result.overflowed
    assert result.iterations == 1
    assert (result.fraction.num, result.fraction.denom) == (87085, 27720)
    assert result.fraction.denom < 2**15
    assert result.low.denom < 2**15


def test_overflow_error_bounded_by_bracket():
    """Test that the degraded result is still within the final bracket"""
    with pytest.warns(DenominatorOverflowWarning):
        result = search(math.pi, 1e-13, max_integer=2**15)

    error = abs(result.fraction.value() - math.pi)
    assert error > 1e-13
    assert error <= result.bracket_width
    assert result.low <= math.pi <= result.fraction


def test_overflow_warning_can_be_disabled(monkeypatch):
    """Test the flag suppressing the overflow warning"""
    monkeypatch.setattr(flags, "WARN_ON_DENOMINATOR_OVERFLOW", False)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = search(math.pi, 1e-13, max_integer=2**15)
    assert result.overflowed


def test_default_precision():
    """Test the default precision constant"""
    assert DEFAULT_PRECISION == 1e-13
    assert MAX_INTEGER == 2**63 - 1
