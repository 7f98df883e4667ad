from __future__ import annotations

import math

from jax import core

from fractax.core import constants
from fractax.core.errors import InvalidInputError
from fractax.core.typing import SplitPolicy


def is_traced(x) -> bool:
    return isinstance(x, core.Tracer)


def resolve_max_integer(max_integer: int | None) -> int:
    if max_integer is None:
        return constants.MAX_INTEGER
    if max_integer <= constants.SEED_DENOMINATOR:
        raise InvalidInputError(
            f"max_integer must be larger than the seed denominator {constants.SEED_DENOMINATOR}, got {max_integer}"
        )
    return int(max_integer)


def check_search_input(
    value: float,
    precision: float,
    max_integer: int,
) -> tuple[float, float]:
    """
    Rejects inputs for which the search is undefined and converts value and precision to float.

    Args:
        value (float): Value to approximate
        precision (float): Requested absolute tolerance
        max_integer (int): Overflow threshold of the search

    Returns:
        tuple[float, float]: value and precision as float

    Raises:
        InvalidInputError: If value is not finite or too large for a float, precision is not a finite number of at
            least MIN_PRECISION or the integer part of value does not fit into the integer range.
    """
    try:
        value, precision = float(value), float(precision)
    except OverflowError as e:
        raise InvalidInputError(f"Cannot approximate {value}: out of float range") from e
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(f"Cannot approximate non-finite value {value}")
    if math.isnan(precision) or math.isinf(precision) or precision < constants.MIN_PRECISION:
        raise InvalidInputError(
            f"Precision has to be a finite number of at least {constants.MIN_PRECISION}, got {precision}"
        )
    if abs(value) >= max_integer:
        raise InvalidInputError(f"Magnitude of {value} exceeds the integer range (max {max_integer})")
    return value, precision


def split_value(
    value: float,
    policy: SplitPolicy,
) -> tuple[int, float]:
    """
    Splits a value into integer part and remainder, such that int_part + remainder == value.

    With SplitPolicy.TRUNCATE, the remainder of a negative value is negative as well (-2.25 -> (-2, -0.25)).
    With SplitPolicy.FLOOR, the remainder is always in [0, 1) (-2.25 -> (-3, 0.75)).
    """
    if policy is SplitPolicy.TRUNCATE:
        int_part = math.trunc(value)
    elif policy is SplitPolicy.FLOOR:
        int_part = math.floor(value)
    else:
        raise TypeError(f"Unknown split policy: {policy}")
    return int_part, value - int_part
