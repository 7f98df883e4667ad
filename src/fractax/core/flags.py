"""If True, a DenominatorOverflowWarning is emitted whenever the overflow guard stops a search early and the result
is only the best bound found so far.
"""

WARN_ON_DENOMINATOR_OVERFLOW: bool = True
