"""Default precision of the fraction search. Found empirically: below ~1e-13 the limited accuracy of float64
starts to dominate and the search produces absurdly large denominators."""

DEFAULT_PRECISION: float = 1e-13

"""
Smallest accepted precision. The stopping test loses its meaning once precision is below the rounding error of
denom * frac, which is about half a float64 epsilon (~1.1e-16) after division by the denominator. Smaller
precisions would stop on rounding noise with an error far above the requested tolerance.
"""
MIN_PRECISION: float = 1e-15

"""
Denominator of the starting bracket. The search starts at floor(frac * 2310) / 2310 instead of the range 0/1 .. 1/1.
2310 = 2 * 3 * 5 * 7 * 11, so fractions with these small prime factors in the denominator are hit without a single
search step.
"""
SEED_DENOMINATOR: int = 2 * 3 * 5 * 7 * 11

"""Width of the signed integers that numerator and denominator have to fit into"""
INTEGER_BITS: int = 64

"""Overflow threshold of the search. A step which would produce a denominator at or above this value is not taken."""
MAX_INTEGER: int = 2 ** (INTEGER_BITS - 1) - 1

"""Absolute tolerance when comparing a fraction with a float"""
ATOL_COMPARISON = 1e-15
