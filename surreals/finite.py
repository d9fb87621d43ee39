"""
Finite Surreal Numbers

Conway's construction: every number is a pair { L | R } of sets of
previously constructed numbers, such that no member of R is <= any member
of L. Starting from nothing:

- { | }            = 0   (day 0)
- { 0 | }          = 1,  { | 0 } = -1   (day 1)
- { 1 | }          = 2,  { 0 | 1 } = 1/2, ...

Every number built from finite sets is a dyadic rational. Numbers are
immutable; arithmetic always produces new instances through the active
ArithmeticContext, which memoizes and canonicalizes results.
"""

from __future__ import annotations
from dataclasses import InitVar, dataclass, field
from functools import cached_property
from typing import Dict, Iterable, Optional

import numpy as np

from . import comparison
from .arithmetic import get_context
from .errors import InvalidConstruction
from .number_set import NumberSet


@dataclass(frozen=True, eq=False)
class FiniteNumber:
    """
    A surreal number { left | right } over finite sets.

    Equality is numeric, not structural: {-1 | 1} == { | }.

    Args:
        left: numbers below this one (any iterable; ints/floats are coerced)
        right: numbers above this one
        simplify: keep only max(left) and min(right). The value is unchanged.

    Raises:
        InvalidConstruction: some element of right is <= some element of left
    """
    left: NumberSet = field(default_factory=NumberSet)
    right: NumberSet = field(default_factory=NumberSet)
    simplify: InitVar[bool] = False

    def __post_init__(self, simplify: bool):
        left = self._as_set(self.left)
        right = self._as_set(self.right)

        # Both sides are sorted, so comparing the extremes covers every pair.
        if left and right and comparison.less_equal(right.min(), left.max()):
            raise InvalidConstruction(
                f"right element {right.min()} <= left element {left.max()}"
            )

        if simplify:
            left = NumberSet([left.max()]) if left else left
            right = NumberSet([right.min()]) if right else right

        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    @classmethod
    def _as_set(cls, items: Iterable) -> NumberSet:
        if isinstance(items, NumberSet):
            return items
        return NumberSet(cls.coerce(item) for item in items)

    @classmethod
    def _trusted(cls, left: NumberSet, right: NumberSet) -> FiniteNumber:
        """
        Build { left | right } without the pseudo-number check.

        Only for callers that already know every left element is below every
        right element. The check is a full recursive comparison, and on the
        deep, structure-sharing numbers made by bisection its cost doubles
        with every level.
        """
        number = object.__new__(cls)
        object.__setattr__(number, "left", left)
        object.__setattr__(number, "right", right)
        return number

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_sets(cls, left: Iterable = (), right: Iterable = (),
                  simplify: bool = False) -> FiniteNumber:
        """Create { left | right }."""
        return cls(left, right, simplify)

    @classmethod
    def zero(cls) -> FiniteNumber:
        """{ | }"""
        return cls()

    @classmethod
    def from_int(cls, n: int) -> FiniteNumber:
        """
        Create the integer n.

        n > 0 is zero nested n times on the left: {{{ { | } | } | } | }.
        n < 0 nests on the right instead.
        """
        if not hasattr(n, "__index__"):
            raise TypeError(f"from_int() needs an integer, got {type(n).__name__}")
        n = n.__index__()

        result = cls()
        if n > 0:
            for _ in range(n):
                result = cls(left=NumberSet([result]))
        else:
            for _ in range(-n):
                result = cls(right=NumberSet([result]))
        return result

    @classmethod
    def from_float(cls, value: float, dtype=None) -> FiniteNumber:
        """Create the number closest to ``value`` reachable by bisection."""
        from .float_bridge import from_float
        return from_float(value, dtype)

    @classmethod
    def pair(cls, lo: FiniteNumber, hi: FiniteNumber) -> FiniteNumber:
        """
        Create { lo | hi }.

        Raises:
            InvalidConstruction: unless lo < hi
        """
        lo, hi = cls.coerce(lo), cls.coerce(hi)
        if not comparison.less(lo, hi):
            raise InvalidConstruction(f"pair needs lo < hi, got {lo} and {hi}")
        return cls(NumberSet([lo]), NumberSet([hi]))

    @classmethod
    def from_transfinite(cls, number) -> FiniteNumber:
        """
        Project a TransfiniteNumber with bounded sides.

        Raises:
            UnboundedSet: some side anywhere in the tree is infinite
        """
        return number.to_finite()

    @classmethod
    def coerce(cls, value) -> FiniteNumber:
        """Convert ints, floats and transfinite numbers; pass FiniteNumbers through."""
        if isinstance(value, FiniteNumber):
            return value
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)

        from .transfinite import TransfiniteNumber
        if isinstance(value, TransfiniteNumber):
            return value.to_finite()
        raise TypeError(f"cannot make a surreal number from {type(value).__name__}")

    @classmethod
    def _operand(cls, value) -> Optional[FiniteNumber]:
        if isinstance(value, FiniteNumber):
            return value
        if isinstance(value, (int, float)):
            return cls.coerce(value)
        return None

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @cached_property
    def depth(self) -> int:
        """Nesting level: 0 for { | }, else 1 + the deepest element."""
        if not self.left and not self.right:
            return 0
        left_max = max((x.depth for x in self.left), default=0)
        right_max = max((x.depth for x in self.right), default=0)
        return max(left_max, right_max) + 1

    @property
    def term_count(self) -> int:
        """Number of elements in left and right together."""
        return len(self.left) + len(self.right)

    def __neg__(self) -> FiniteNumber:
        return self._negation

    @cached_property
    def _negation(self) -> FiniteNumber:
        # Swapping the sides of a valid number keeps it valid.
        return FiniteNumber._trusted(
            NumberSet(-x for x in self.right),
            NumberSet(-x for x in self.left),
        )

    def __pos__(self) -> FiniteNumber:
        return self

    # ------------------------------------------------------------------
    # Arithmetic (via the active context)
    # ------------------------------------------------------------------

    def __add__(self, other) -> FiniteNumber:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return get_context().add(self, other)

    def __radd__(self, other) -> FiniteNumber:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return get_context().add(other, self)

    def __sub__(self, other) -> FiniteNumber:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return get_context().subtract(self, other)

    def __rsub__(self, other) -> FiniteNumber:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return get_context().subtract(other, self)

    def __mul__(self, other) -> FiniteNumber:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return get_context().multiply(self, other)

    def __rmul__(self, other) -> FiniteNumber:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return get_context().multiply(other, self)

    # ------------------------------------------------------------------
    # Order
    # ------------------------------------------------------------------

    def __le__(self, other) -> bool:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return comparison.less_equal(self, other)

    def __ge__(self, other) -> bool:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return comparison.greater_equal(self, other)

    def __lt__(self, other) -> bool:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return comparison.less(self, other)

    def __gt__(self, other) -> bool:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return comparison.greater(self, other)

    def __eq__(self, other) -> bool:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return comparison.equal(self, other)

    def __ne__(self, other) -> bool:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return comparison.not_equal(self, other)

    def __hash__(self) -> int:
        # Equal numbers share one dyadic value, hence one float.
        return hash(self._exact_value)

    def __bool__(self) -> bool:
        return comparison.not_equal(self, FiniteNumber())

    # ------------------------------------------------------------------
    # Conversion and display
    # ------------------------------------------------------------------

    @cached_property
    def _float_values(self) -> Dict[type, np.floating]:
        """Float value per numpy float type, filled in by the float bridge."""
        return {}

    @cached_property
    def _exact_value(self) -> float:
        from .float_bridge import to_float
        return to_float(self, np.float64)

    def to_float(self, dtype=None) -> float:
        """Evaluate as a float (the active context's float type by default)."""
        from .float_bridge import to_float
        return to_float(self, dtype)

    def __float__(self) -> float:
        return self.to_float()

    def display(self, depth: Optional[int] = None) -> str:
        """
        Brace form, switching to float values below ``depth`` levels.

        display(0) of 1/2 is "{ 0.000000 | 1.000000 }".
        """
        if depth is None:
            depth = get_context().config.display_depth

        parts = ["{ "]
        for x in self.left:
            parts.append(x.display(depth - 1) if depth > 0 else f"{x.to_float():f}")
            parts.append(" ")
        parts.append("| ")
        for x in self.right:
            parts.append(x.display(depth - 1) if depth > 0 else f"{x.to_float():f}")
            parts.append(" ")
        parts.append("}")
        return "".join(parts)

    def display_verbose(self) -> str:
        """Brace form all the way down: 2 is "{ { { | } | } | }"."""
        parts = ["{ "]
        for x in self.left:
            parts.append(x.display_verbose())
            parts.append(" ")
        parts.append("| ")
        for x in self.right:
            parts.append(x.display_verbose())
            parts.append(" ")
        parts.append("}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"FiniteNumber({self.display(0)})"
