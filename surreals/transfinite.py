"""
Transfinite Surreal Numbers

The finite construction only reaches dyadic rationals. Letting the sets be
infinite reaches everything else:

- ω  = { 0, 1, 2, 3, ... | }        (bigger than every integer)
- -ω = { | ..., -3, -2, -1, 0 }
- ε  = { 0 | ..., 1/8, 1/4, 1/2, 1 } (positive, smaller than every 1/2^n)

An infinite set cannot be enumerated up front, so each side of a
TransfiniteNumber is a generating function from an index to an element,
together with a size (negative = unbounded) and a cache. Elements are
produced on demand and each index is generated at most once per instance.

Trusted, not checked: the left generator ascends (non-strictly), the right
generator descends (non-strictly), and every right element exceeds every
left element.

Conversions: numbers whose sides are bounded all the way down project back
to a FiniteNumber via to_finite(), which raises UnboundedSet otherwise.
to_float() never raises for that reason; it returns nan instead, and
is_bounded() tells the two cases apart.
"""

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

import numpy as np

from .arithmetic import get_context
from .errors import InvalidConstruction, UnboundedSet, surface_recursion
from .finite import FiniteNumber

logger = logging.getLogger(__name__)

GeneratingFunction = Callable[[int], "TransfiniteNumber"]


class GeneratedSide:
    """
    One side of a TransfiniteNumber: generating function, size and cache.

    A nonnegative size is the exact number of elements; a negative size
    means the side never ends.
    """

    def __init__(self, generator: Optional[GeneratingFunction] = None, size: int = 0):
        if generator is None and size != 0:
            raise InvalidConstruction(f"a side of size {size} needs a generating function")
        self.generator = generator
        self.size = size
        self._cache: Dict[int, TransfiniteNumber] = {}
        self.calls = 0   # Generator invocations so far

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def is_bounded(self) -> bool:
        return self.size >= 0

    @property
    def cache(self) -> Mapping[int, TransfiniteNumber]:
        """Read-only view of the elements generated so far."""
        return MappingProxyType(self._cache)

    def __getitem__(self, n: int) -> TransfiniteNumber:
        if n < 0 or (self.is_bounded and n >= self.size):
            raise IndexError(f"index {n} out of range for side of size {self.size}")
        if n in self._cache:
            return self._cache[n]

        value = TransfiniteNumber.coerce(self.generator(n))
        self.calls += 1
        self._cache[n] = value
        return value

    def take(self, count: int) -> List[TransfiniteNumber]:
        """The first ``count`` elements."""
        return [self[i] for i in range(count)]

    def __repr__(self) -> str:
        size = "unbounded" if self.size < 0 else self.size
        return f"GeneratedSide(size={size}, cached={len(self._cache)})"


class TransfiniteNumber:
    """
    A surreal number { left | right } whose sides are generated lazily.

    Args:
        left_gen: index -> element of the left set (None: empty side)
        right_gen: index -> element of the right set (None: empty side)
        sizes: (left_size, right_size); negative means unbounded

    With no arguments this is zero.
    """

    def __init__(
        self,
        left_gen: Optional[GeneratingFunction] = None,
        right_gen: Optional[GeneratingFunction] = None,
        sizes: Tuple[int, int] = (0, 0),
    ):
        left_size, right_size = sizes
        self.left = GeneratedSide(left_gen, left_size)
        self.right = GeneratedSide(right_gen, right_size)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_finite(cls, number: FiniteNumber) -> TransfiniteNumber:
        """
        Wrap a finite number.

        Each nonempty side becomes a one-element side yielding max(left)
        or min(right), itself wrapped on first access.
        """
        left_gen = right_gen = None
        if number.left:
            greatest = number.left.max()
            left_gen = lambda n: cls.from_finite(greatest)
        if number.right:
            smallest = number.right.min()
            right_gen = lambda n: cls.from_finite(smallest)
        return cls(left_gen, right_gen, (1 if left_gen else 0, 1 if right_gen else 0))

    @classmethod
    def from_int(cls, n: int) -> TransfiniteNumber:
        return cls.from_finite(FiniteNumber.from_int(n))

    @classmethod
    def from_float(cls, value: float, dtype=None) -> TransfiniteNumber:
        return cls.from_finite(FiniteNumber.from_float(value, dtype))

    @classmethod
    def coerce(cls, value) -> TransfiniteNumber:
        """Accept transfinite, finite, int or float values."""
        if isinstance(value, TransfiniteNumber):
            return value
        if isinstance(value, FiniteNumber):
            return cls.from_finite(value)
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        raise TypeError(f"cannot make a transfinite number from {type(value).__name__}")

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    @property
    def left_size(self) -> int:
        return self.left.size

    @property
    def right_size(self) -> int:
        return self.right.size

    @property
    def left_cache(self) -> Mapping[int, TransfiniteNumber]:
        return self.left.cache

    @property
    def right_cache(self) -> Mapping[int, TransfiniteNumber]:
        return self.right.cache

    def get_left(self, n: int) -> TransfiniteNumber:
        """n-th element of the left set (generated once, then cached)."""
        return self.left[n]

    def get_right(self, n: int) -> TransfiniteNumber:
        """n-th element of the right set (generated once, then cached)."""
        return self.right[n]

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def is_bounded(self) -> bool:
        """True if to_finite() would succeed."""
        if not (self.left.is_bounded and self.right.is_bounded):
            return False
        return all(side[side.size - 1].is_bounded()
                   for side in (self.left, self.right) if side.size > 0)

    def _project(self) -> FiniteNumber:
        if not (self.left.is_bounded and self.right.is_bounded):
            raise UnboundedSet(
                f"cannot project a number with sizes ({self.left_size}, {self.right_size})"
            )
        # Left ascends and right descends, so the last index holds the extreme.
        left = [self.left[self.left.size - 1]._project()] if self.left.size > 0 else []
        right = [self.right[self.right.size - 1]._project()] if self.right.size > 0 else []
        return FiniteNumber(left, right, simplify=True)

    @surface_recursion
    def to_finite(self) -> FiniteNumber:
        """
        Project to a FiniteNumber.

        Raises:
            UnboundedSet: some side anywhere in the descent is unbounded
        """
        return self._project()

    def to_float(self, dtype=None) -> float:
        """Float value, or nan when some side is unbounded."""
        try:
            finite = self.to_finite()
        except UnboundedSet:
            logger.debug("Unbounded side, %r has no float value", self)
            return float(np.nan)
        return finite.to_float(dtype)

    def __float__(self) -> float:
        return self.to_float()

    def __neg__(self) -> TransfiniteNumber:
        left, right = self.left, self.right
        left_gen = (lambda n: -right[n]) if right.size else None
        right_gen = (lambda n: -left[n]) if left.size else None
        return TransfiniteNumber(left_gen, right_gen, (right.size, left.size))

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def _render(self, width: int, term: Callable[[TransfiniteNumber], str]) -> str:
        parts = ["{ "]

        if self.left.size > 0:
            parts.extend(term(self.left[i]) + " " for i in range(self.left.size))
        elif self.left.size < 0 and width > 0:
            parts.extend(term(self.left[i]) + " " for i in range(width))
            parts.append("... ")

        parts.append("| ")

        if self.right.size > 0:
            parts.extend(term(self.right[i]) + " " for i in reversed(range(self.right.size)))
        elif self.right.size < 0 and width > 0:
            parts.append("... ")
            parts.extend(term(self.right[i]) + " " for i in reversed(range(width)))

        parts.append("}")
        return "".join(parts)

    def display(self, width: Optional[int] = None, depth: Optional[int] = None) -> str:
        """
        Brace form with float leaves.

        Args:
            width: elements shown for an unbounded side (default from config)
            depth: levels printed as braces before switching to floats
        """
        config = get_context().config
        width = config.display_width if width is None else width
        depth = config.display_depth if depth is None else depth

        def term(x: TransfiniteNumber) -> str:
            if depth > 0:
                return x.display(width, depth - 1)
            return f"{x.to_float():f}"

        return self._render(width, term)

    def display_verbose(self, width: Optional[int] = None) -> str:
        """Brace form all the way down."""
        if width is None:
            width = get_context().config.display_width
        return self._render(width, lambda x: x.display_verbose(width))

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"TransfiniteNumber(left_size={self.left_size}, right_size={self.right_size})"


# ----------------------------------------------------------------------
# Generating functions and examples
# ----------------------------------------------------------------------

def naturals(n: int) -> TransfiniteNumber:
    """0, 1, 2, ..."""
    return TransfiniteNumber.from_int(n)


def negative_naturals(n: int) -> TransfiniteNumber:
    """0, -1, -2, ..."""
    return TransfiniteNumber.from_int(-n)


def powers_of_half(n: int) -> TransfiniteNumber:
    """1, 1/2, 1/4, ..."""
    return TransfiniteNumber.from_float(2.0 ** -n)


def omega() -> TransfiniteNumber:
    """ω = { 0, 1, 2, ... | }"""
    return TransfiniteNumber(naturals, None, (-1, 0))


def negative_omega() -> TransfiniteNumber:
    """-ω = { | ..., -2, -1, 0 }"""
    return TransfiniteNumber(None, negative_naturals, (0, -1))


def epsilon() -> TransfiniteNumber:
    """ε = { 0 | ..., 1/4, 1/2, 1 }, positive but below every 1/2^n."""
    return TransfiniteNumber(lambda n: TransfiniteNumber(), powers_of_half, (1, -1))


if __name__ == "__main__":
    print("=== Transfinite Surreal Numbers ===\n")

    examples = [
        ("zero", TransfiniteNumber()),
        ("two", TransfiniteNumber.from_int(2)),
        ("omega", omega()),
        ("-omega", negative_omega()),
        ("epsilon", epsilon()),
    ]
    for name, number in examples:
        print(f"{name}: {number}  (float {number.to_float()})")

    print(f"\nepsilon at depth 1: {epsilon().display(5, 1)}")
