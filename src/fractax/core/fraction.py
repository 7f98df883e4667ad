from __future__ import annotations

import math
import numbers
from typing import Any, NamedTuple

from fractax.core.constants import ATOL_COMPARISON, DEFAULT_PRECISION
from fractax.core.errors import InvalidInputError
from fractax.core.reducer import reduce


class _FractionFields(NamedTuple):
    num: int
    denom: int


def _to_int(x: Any) -> int:
    # integral types (incl. numpy integers) are kept, every other real is rounded
    if isinstance(x, numbers.Integral):
        return int(x)
    x = float(x)
    if not math.isfinite(x):
        raise InvalidInputError(f"Cannot convert non-finite value {x} to an integer")
    return round(x)


class Fraction(_FractionFields):
    """Immutable numerator / denominator pair. The denominator is never zero.

    Fraction(num, denom) stores the pair as given (non-integral reals are rounded to the nearest integer), without reducing it.
    Use Fraction.from_float to find a fraction for a real value.
    """

    __slots__ = ()

    def __new__(cls, num: int | float, denom: int | float = 1) -> Fraction:
        num, denom = _to_int(num), _to_int(denom)
        if denom == 0:
            raise ZeroDivisionError(f"Denominator of fraction {num}/{denom} is zero")
        return super().__new__(cls, num, denom)

    @classmethod
    def from_float(
        cls,
        value: float,
        precision: float = DEFAULT_PRECISION,
    ) -> Fraction:
        """
        Finds a fraction in lowest terms whose value differs from the given value by less than precision.

        Args:
            value (float): finite real value
            precision (float, optional): absolute tolerance. Defaults to DEFAULT_PRECISION.

        Returns:
            Fraction: reduced fraction
        """
        from fractax.core.approximator import to_fraction

        return to_fraction(value, precision).reduced()

    def __repr__(self) -> str:
        return f"Fraction({self.num}, {self.denom})"

    def __str__(self) -> str:
        if self.denom == 1:
            return str(self.num)
        return f"{self.num}/{self.denom}"

    def value(self) -> float:
        return self.num / self.denom

    def __float__(self) -> float:
        return self.value()

    def reduced(self) -> Fraction:
        return Fraction(*reduce(self.num, self.denom))

    def __neg__(self) -> Fraction:
        return Fraction(-self.num, self.denom)

    def __abs__(self) -> Fraction:
        return Fraction(abs(self.num), abs(self.denom))

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Fraction):
            return tuple(self.reduced()) == tuple(other.reduced())
        if isinstance(other, int):
            self_red = self.reduced()
            return self_red.denom == 1 and self_red.num == other
        if isinstance(other, float):
            return abs(self.value() - other) < ATOL_COMPARISON
        return False

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        num, denom = reduce(self.num, self.denom)
        if denom == 1:
            return hash(num)
        return hash((num, denom))

    def _cross(self, other: Any) -> tuple[int, int] | None:
        # both sides scaled to the product of the (positive) denominators
        num, denom = reduce(self.num, self.denom)
        if isinstance(other, Fraction):
            other_num, other_denom = reduce(other.num, other.denom)
            return num * other_denom, other_num * denom
        if isinstance(other, int):
            return num, other * denom
        return None

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, float):
            return self.value() < other
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] < cross[1]

    def __le__(self, other: Any) -> bool:
        if isinstance(other, float):
            return self.value() <= other
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] <= cross[1]

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, float):
            return self.value() > other
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] > cross[1]

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, float):
            return self.value() >= other
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] >= cross[1]
