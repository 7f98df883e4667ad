from __future__ import annotations

import math
import warnings
from dataclasses import dataclass

from fractax.core import constants, flags
from fractax.core.constants import DEFAULT_PRECISION
from fractax.core.errors import DenominatorOverflowWarning
from fractax.core.fraction import Fraction
from fractax.core.reducer import reduce
from fractax.core.typing import SplitPolicy
from fractax.core.utils import check_search_input, resolve_max_integer, split_value


@dataclass(frozen=True)
class SearchResult:
    # answer of the search, integer part included, not reduced
    fraction: Fraction
    # the other bound of the bracket at termination, integer part included
    low: Fraction
    iterations: int
    # True if the overflow guard stopped the search. fraction is then only the best bound found so far.
    overflowed: bool

    @property
    def bracket_width(self) -> float:
        return abs(self.fraction.value() - self.low.value())


def search(
    value: float,
    precision: float = DEFAULT_PRECISION,
    *,
    max_integer: int | None = None,
    split: SplitPolicy | None = None,
) -> SearchResult:
    """
    Searches a fraction whose value differs from value by less than precision.

    The fractional part of value is bracketed by two fractions low <= frac <= high. In every iteration, one bound is
    replaced by adding the other bound to it n times at once (vector addition of (denom, num), i.e. repeated
    mediants). n is derived from the distances of both bounds to the target, and the direction with the larger
    change is taken. This converges like a continued fraction expansion, but the bracket starts at
    floor(frac * 2310) / 2310 .. (floor(frac * 2310) + 1) / 2310 instead of 0/1 .. 1/1, so the result is generally
    not in lowest terms.

    With SplitPolicy.TRUNCATE, a negative value is searched as its absolute value and the result is negated, so
    search(-v) is the exact mirror of search(v).

    The stopping test compares the unscaled distances denom * frac - num against precision. This is stricter than
    |num / denom - frac| < precision and was found empirically to be faster and to work well for irrational values.

    Args:
        value (float): finite value to approximate
        precision (float, optional): absolute tolerance. Defaults to DEFAULT_PRECISION.
        max_integer (int | None, optional): overflow threshold for the denominators. Defaults to
            constants.MAX_INTEGER.
        split (SplitPolicy | None, optional): how the integer part is separated. Defaults to SplitPolicy.TRUNCATE.

    Returns:
        SearchResult: the answer, the opposite bound, iteration count and whether the overflow guard tripped.
    """
    max_integer = resolve_max_integer(max_integer)
    value, precision = check_search_input(value, precision, max_integer)
    if split is None:
        split = SplitPolicy.TRUNCATE

    # truncation is symmetric in the sign: negative values are searched as abs(value) and negated at the end
    sign = -1 if split is SplitPolicy.TRUNCATE and value < 0 else 1
    int_part, frac = split_value(sign * value, split)

    seed = constants.SEED_DENOMINATOR
    low_num, low_denom = math.floor(frac * seed), seed
    high_num, high_denom = low_num + 1, seed

    iterations = 0
    overflowed = False
    while True:
        # b*m - a and c - d*m for low = a/b, high = c/d, target m. Both are >= 0 as long as the bracket holds.
        test_low = low_denom * frac - low_num
        test_high = high_num - high_denom * frac

        if test_high < precision:
            break
        if test_low < precision:
            low_num, low_denom, high_num, high_denom = high_num, high_denom, low_num, low_denom
            break

        x1 = test_high / test_low
        x2 = test_low / test_high

        # take the direction with the largest change
        if x1 > x2:
            if (x1 + 1) * low_denom + high_denom >= max_integer:
                overflowed = True
                break
            n = int(x1)
            h_num, h_denom = n * low_num + high_num, n * low_denom + high_denom
            low_num, low_denom = h_num + low_num, h_denom + low_denom
            high_num, high_denom = h_num, h_denom
        else:
            if low_denom + (x2 + 1) * high_denom >= max_integer:
                overflowed = True
                break
            n = int(x2)
            l_num, l_denom = low_num + n * high_num, low_denom + n * high_denom
            high_num, high_denom = l_num + high_num, l_denom + high_denom
            low_num, low_denom = l_num, l_denom
        iterations += 1

    if overflowed and flags.WARN_ON_DENOMINATOR_OVERFLOW:
        warnings.warn(
            f"Approximation of {value} stopped after {iterations} iterations: the next denominator would exceed "
            f"{max_integer}. The result may not match precision {precision}.",
            DenominatorOverflowWarning,
            stacklevel=2,
        )

    return SearchResult(
        fraction=Fraction(sign * (high_num + high_denom * int_part), high_denom),
        low=Fraction(sign * (low_num + low_denom * int_part), low_denom),
        iterations=iterations,
        overflowed=overflowed,
    )


def to_fraction(
    value: float,
    precision: float = DEFAULT_PRECISION,
    *,
    max_integer: int | None = None,
    split: SplitPolicy | None = None,
) -> Fraction:
    """Unreduced fraction within precision of value. See search for details."""
    return search(value, precision, max_integer=max_integer, split=split).fraction


def approximate(
    value: float,
    precision: float = DEFAULT_PRECISION,
    *,
    max_integer: int | None = None,
    split: SplitPolicy | None = None,
) -> tuple[int, int]:
    """
    Simplest fraction (in lowest terms, positive denominator) within precision of value.

    Args:
        value (float): finite value to approximate
        precision (float, optional): absolute tolerance. Defaults to DEFAULT_PRECISION.
        max_integer (int | None, optional): overflow threshold for the denominators. Defaults to
            constants.MAX_INTEGER.
        split (SplitPolicy | None, optional): how the integer part is separated. Defaults to SplitPolicy.TRUNCATE.

    Returns:
        tuple[int, int]: numerator and denominator
    """
    frac = to_fraction(value, precision, max_integer=max_integer, split=split)
    return reduce(frac.num, frac.denom)
