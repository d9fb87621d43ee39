"""
Conversions between finite surreal numbers and floats.

Surreal -> float is exact for dyadic values within the precision of the
float type: each { L | R } sits one unit beyond its only populated side,
or halfway between max(L) and min(R).

Float -> surreal runs a bisection between floor(x) and floor(x) + 1. Each
step adds one level of depth, and it stops as soon as the midpoint's float
equals x, which finite precision guarantees will happen.
"""

from __future__ import annotations
import logging
from typing import Optional

import numpy as np

from .arithmetic import get_context
from .errors import InvalidConstruction, surface_recursion
from .finite import FiniteNumber
from .number_set import NumberSet

logger = logging.getLogger(__name__)


def _resolve_dtype(dtype) -> type:
    if dtype is None:
        return get_context().config.float_dtype
    return np.dtype(dtype).type


def _evaluate(number: FiniteNumber, dtype: type) -> np.floating:
    # Bisection shares subtrees between levels, so each node is evaluated once.
    cached = number._float_values.get(dtype)
    if cached is not None:
        return cached

    lefts = [_evaluate(x, dtype) for x in number.left]
    rights = [_evaluate(x, dtype) for x in number.right]

    if not lefts and not rights:
        value = dtype(0.0)
    elif not rights:
        value = max(lefts) + dtype(1.0)
    elif not lefts:
        value = min(rights) - dtype(1.0)
    else:
        value = (max(lefts) + min(rights)) / dtype(2.0)

    number._float_values[dtype] = value
    return value


@surface_recursion
def to_float(number: FiniteNumber, dtype=None) -> float:
    """
    Evaluate a finite surreal number.

    Args:
        number: the number to evaluate
        dtype: numpy float type for the arithmetic (default: active config)

    Returns:
        The value as a Python float.
    """
    return float(_evaluate(number, _resolve_dtype(dtype)))


def _midpoint(lo: FiniteNumber, hi: FiniteNumber) -> FiniteNumber:
    return FiniteNumber._trusted(NumberSet([lo]), NumberSet([hi]))


def from_int(n: int) -> FiniteNumber:
    """The integer n as a surreal number."""
    return FiniteNumber.from_int(n)


def from_float(value: float, dtype=None) -> FiniteNumber:
    """
    Build a surreal number from a float by bisection.

    Args:
        value: a finite float
        dtype: numpy float type deciding when the bisection stops

    Raises:
        InvalidConstruction: value is NaN or infinite
    """
    dtype = _resolve_dtype(dtype)
    target = dtype(value)
    if not np.isfinite(target):
        raise InvalidConstruction(f"cannot build a surreal number from {value!r}")

    floor_value = np.floor(target)
    if floor_value == target:
        return FiniteNumber.from_int(int(floor_value))

    ceil_value = floor_value + dtype(1.0)
    mid_value = (floor_value + ceil_value) / dtype(2.0)

    floor_number = FiniteNumber.from_int(int(floor_value))
    ceil_number = FiniteNumber.from_int(int(ceil_value))
    # floor < mid < ceil holds by construction, so midpoints skip the
    # recursive pseudo-number check.
    mid_number = _midpoint(floor_number, ceil_number)

    steps = 0
    while mid_value != target:
        if target < mid_value:
            ceil_value = mid_value
            ceil_number, mid_number = mid_number, _midpoint(floor_number, mid_number)
        else:
            floor_value = mid_value
            floor_number, mid_number = mid_number, _midpoint(mid_number, ceil_number)
        mid_value = (floor_value + ceil_value) / dtype(2.0)
        steps += 1

    logger.debug("from_float(%r): %d bisection steps, depth %d",
                 value, steps, mid_number.depth)
    return mid_number
