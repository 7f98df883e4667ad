class InvalidInputError(ValueError):
    """Raised for values or precisions that cannot be approximated (NaN, infinity, non-positive precision,
    magnitudes outside of the integer range)."""


class DenominatorOverflowWarning(RuntimeWarning):
    """The next search step would have left the integer range. The returned fraction is the best bound found so far
    and may not match the requested precision."""
