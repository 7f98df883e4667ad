# ruff: noqa: F811

import jax
import numpy as np
from plum import dispatch, overload

from fractax.core.approximator import approximate
from fractax.core.constants import DEFAULT_PRECISION
from fractax.core.typing import RealScalar, SplitPolicy
from fractax.core.utils import is_traced


def _rationalize_numpy(
    x: np.ndarray,
    precision: float,
    max_integer: int | None,
    split: SplitPolicy | None,
) -> tuple[np.ndarray, np.ndarray]:
    flat = np.asarray(x, dtype=np.float64).ravel()
    nums = np.empty(flat.shape, dtype=np.int64)
    denoms = np.empty(flat.shape, dtype=np.int64)
    for i, v in enumerate(flat):
        nums[i], denoms[i] = approximate(v.item(), precision, max_integer=max_integer, split=split)
    return nums.reshape(np.shape(x)), denoms.reshape(np.shape(x))


## rationalize #####################################
@overload
def rationalize(
    x: RealScalar,
    *,
    precision: float = DEFAULT_PRECISION,
    max_integer: int | None = None,
    split: SplitPolicy | None = None,
) -> tuple[int, int]:
    if isinstance(x, np.generic):
        x = x.item()
    return approximate(x, precision, max_integer=max_integer, split=split)


@overload
def rationalize(
    x: np.ndarray,
    *,
    precision: float = DEFAULT_PRECISION,
    max_integer: int | None = None,
    split: SplitPolicy | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    return _rationalize_numpy(x, precision, max_integer, split)


@overload
def rationalize(
    x: jax.Array,
    *,
    precision: float = DEFAULT_PRECISION,
    max_integer: int | None = None,
    split: SplitPolicy | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    # the number of search steps depends on the data, this cannot be traced
    if is_traced(x):
        raise TypeError("rationalize cannot be used on traced values, e.g. inside of jax.jit")
    return _rationalize_numpy(np.asarray(x), precision, max_integer, split)


@dispatch
def rationalize(
    x,
    *,
    precision: float = DEFAULT_PRECISION,
    max_integer: int | None = None,
    split: SplitPolicy | None = None,
):
    """
    Element-wise approximation of real values by fractions in lowest terms.

    Args:
        x: Python or NumPy scalar, NumPy array or (concrete) JAX array
        precision (float, optional): absolute tolerance. Defaults to DEFAULT_PRECISION.
        max_integer (int | None, optional): overflow threshold for the denominators.
        split (SplitPolicy | None, optional): how the integer part is separated.

    Returns:
        (num, denom) for scalars, two int64 arrays of the input shape for arrays.
    """
    del x, precision, max_integer, split
    raise NotImplementedError()
