"""
The surreal order relation.

Everything is derived from a single recursive definition:

    a <= b  iff  no x in a.L has b <= x,  and  no y in b.R has y <= a

Both checks are vacuous over empty sets, so the recursion bottoms out at
{ | } <= { | }. The remaining relations are:

    a >= b  ==  b <= a
    a == b  ==  a <= b and b <= a
    a != b  ==  not a == b
    a >  b  ==  not a <= b
    a <  b  ==  b > a

Comparison is not memoized. Its cost is exponential in the worst case in
the combined depth of the operands, which is fine for the shallow numbers
the arithmetic engine produces but worth keeping in mind for deep ones.

These functions only read ``.left`` and ``.right``, so they work on any
object shaped like a FiniteNumber.
"""

from __future__ import annotations

from .errors import surface_recursion


def _less_equal(a, b) -> bool:
    for x in a.left:
        if _less_equal(b, x):
            return False
    for y in b.right:
        if _less_equal(y, a):
            return False
    return True


@surface_recursion
def less_equal(a, b) -> bool:
    """a <= b."""
    return _less_equal(a, b)


def greater_equal(a, b) -> bool:
    """a >= b."""
    return less_equal(b, a)


def equal(a, b) -> bool:
    """Numeric equality: a <= b and b <= a."""
    return less_equal(a, b) and less_equal(b, a)


def not_equal(a, b) -> bool:
    return not equal(a, b)


def greater(a, b) -> bool:
    """a > b, i.e. not a <= b."""
    return not less_equal(a, b)


def less(a, b) -> bool:
    """a < b, i.e. b > a."""
    return greater(b, a)


def compare(a, b) -> int:
    """
    Three-way comparison: -1, 0 or 1.

    Suitable for ``functools.cmp_to_key``.
    """
    a_le_b = less_equal(a, b)
    b_le_a = less_equal(b, a)
    if a_le_b and b_le_a:
        return 0
    return -1 if a_le_b else 1
