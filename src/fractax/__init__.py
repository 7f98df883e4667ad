from fractax.core.approximator import SearchResult, approximate, search, to_fraction
from fractax.core.errors import DenominatorOverflowWarning, InvalidInputError
from fractax.core.fraction import Fraction
from fractax.core.reducer import gcd, reduce
from fractax.core.typing import SplitPolicy
from fractax.functional.array import rationalize


__all__ = [
    "approximate",
    "to_fraction",
    "search",
    "SearchResult",
    "Fraction",
    "reduce",
    "gcd",
    "rationalize",
    "SplitPolicy",
    "InvalidInputError",
    "DenominatorOverflowWarning",
]
