from __future__ import annotations

from enum import Enum
from typing import Union

import numpy as np


# How a value is split into integer part and fractional remainder before the search.
class SplitPolicy(Enum):
    TRUNCATE = "truncate"  # toward zero, remainder carries the sign of the value
    FLOOR = "floor"  # toward -inf, remainder in [0, 1)


# Scalars that are rationalized to a single (num, denom) pair
RealScalar = Union[
    int,
    float,
    np.integer,
    np.floating,
]
