"""
Arithmetic lifted over sets of numbers.

The recursive definitions of + and * are written in terms of sets:
``Al + b`` means "add b to every element of a's left set", and
``X + Y`` for two sets means every pairwise sum. SetAlgebra provides those
liftings for any binary operation, so the arithmetic engine can pass in
its own memoized add/multiply.
"""

from __future__ import annotations
from typing import Callable, Iterable

from .number_set import NumberSet

BinaryOp = Callable[[object, object], object]


class SetAlgebra:
    """Element-wise and cross-product combination of number sets."""

    @staticmethod
    def map(op: BinaryOp, xs: Iterable, y) -> NumberSet:
        """{ op(x, y) : x in xs }"""
        return NumberSet(op(x, y) for x in xs)

    @staticmethod
    def cross(op: BinaryOp, xs: Iterable, ys: Iterable) -> NumberSet:
        """{ op(x, y) : x in xs, y in ys }"""
        ys = list(ys)
        return NumberSet(op(x, y) for x in xs for y in ys)

    @staticmethod
    def negate(xs: Iterable) -> NumberSet:
        """{ -x : x in xs }"""
        return NumberSet(-x for x in xs)

    @staticmethod
    def union(*sets: Iterable) -> NumberSet:
        """Union of any number of sets; earlier representations win."""
        if not sets:
            return NumberSet()
        return NumberSet.of(sets[0]).union(*sets[1:])
