"""
Memoized Surreal Arithmetic

Addition and multiplication follow Conway's recursive definitions:

    a + b = { Al+b, a+Bl | Ar+b, a+Br }
    a * b = { Al*b + a*Bl - Al*Bl,  Ar*b + a*Br - Ar*Br
            | Al*b + a*Br - Al*Br,  Ar*b + a*Bl - Ar*Bl }

Both recurse heavily on the same small operands, so every result is stored
in a MemoTable keyed by the unordered operand pair. Each fresh result is
also canonicalized against the values already in the table: if a
numerically equal but structurally simpler value is stored, it replaces
the fresh one. That keeps results such as {-1 | 1} collapsing to { | }
instead of accumulating structure over repeated operations.

The tables belong to an ArithmeticContext rather than to the process.
FiniteNumber operators use the active context (see get_context and
local_context).
"""

from __future__ import annotations
import bisect
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from . import comparison
from .config import SurrealConfig
from .errors import surface_recursion
from .set_algebra import SetAlgebra

logger = logging.getLogger(__name__)

PairKey = Tuple[object, object]


class MemoTable:
    """
    Ordered map from unordered number pairs to results.

    Keys are stored as (min, max) under the surreal order, so (a, b) and
    (b, a) find the same entry, and so do numerically equal operands with
    different representations.
    """

    def __init__(self, name: str, symbol: str):
        self.name = name
        self.symbol = symbol
        self._keys: List[PairKey] = []
        self._values: List = []
        self.rewrites = 0   # In-place canonicalization rewrites so far

    @staticmethod
    def key(a, b) -> PairKey:
        """The canonical (min, max) key for an operand pair."""
        return (a, b) if comparison.less_equal(a, b) else (b, a)

    def _index(self, key: PairKey) -> Tuple[int, bool]:
        i = bisect.bisect_left(self._keys, key)
        return i, i < len(self._keys) and self._keys[i] == key

    def get(self, key: PairKey):
        """Result stored under a canonical key, or None."""
        i, found = self._index(key)
        return self._values[i] if found else None

    def put(self, key: PairKey, value) -> None:
        """Store under a canonical key. An existing entry is never overwritten."""
        i, found = self._index(key)
        if not found:
            self._keys.insert(i, key)
            self._values.insert(i, value)

    def lookup(self, a, b):
        """Result for a and b in either order, or None."""
        return self.get(self.key(a, b))

    def canonicalize(self, raw, log_rewrites: bool = False):
        """
        Return the simplest stored value equal to ``raw``.

        Entries are scanned in key order. For each stored value equal to
        raw: if raw has more terms, the stored value wins and the scan
        stops; if raw has fewer, the entry is rewritten to raw and the scan
        continues; on a tie the stored value wins and the scan stops.
        """
        size = raw.term_count
        for i, stored in enumerate(self._values):
            if not comparison.equal(raw, stored):
                continue
            if size < stored.term_count:
                self._values[i] = raw
                self.rewrites += 1
                if log_rewrites:
                    lhs, rhs = self._keys[i]
                    logger.debug("%s table: rewrote %s %s %s to %s",
                                 self.name, lhs, self.symbol, rhs, raw.display_verbose())
            else:
                return stored
        return raw

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()
        self.rewrites = 0

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Tuple[object, object, object]]:
        """(lhs, rhs, result) triples in key order."""
        for (lhs, rhs), value in zip(self._keys, self._values):
            yield lhs, rhs, value

    def items(self) -> List[Tuple[PairKey, object]]:
        return list(zip(self._keys, self._values))

    def describe(self) -> List[str]:
        """One "lhs op rhs = result" line per entry."""
        return [f"{lhs} {self.symbol} {rhs} = {value}" for lhs, rhs, value in self]

    def __repr__(self) -> str:
        return f"MemoTable({self.name!r}, entries={len(self)})"


class ArithmeticContext:
    """
    Owns the addition and multiplication tables and the configuration.

    Contexts share nothing, so separate contexts (one per thread, one per
    test) never see each other's entries.
    """

    def __init__(self, config: Optional[SurrealConfig] = None):
        self.config = config or SurrealConfig()
        self.add_table = MemoTable("addition", "+")
        self.mult_table = MemoTable("multiplication", "*")
        logger.debug("Created arithmetic context (float type %s)",
                     self.config.float_dtype.__name__)

    @surface_recursion
    def add(self, a, b):
        """a + b"""
        return self._add(a, b)

    @surface_recursion
    def subtract(self, a, b):
        """a - b, computed as a + (-b)"""
        return self._add(a, -b)

    @surface_recursion
    def multiply(self, a, b):
        """a * b"""
        return self._multiply(a, b)

    def _add(self, a, b):
        key = MemoTable.key(a, b)
        cached = self.add_table.get(key)
        if cached is not None:
            return cached

        add = self._add
        left = SetAlgebra.union(SetAlgebra.map(add, a.left, b),
                                SetAlgebra.map(add, b.left, a))
        right = SetAlgebra.union(SetAlgebra.map(add, a.right, b),
                                 SetAlgebra.map(add, b.right, a))
        raw = type(a)(left, right)

        result = self.add_table.canonicalize(raw, self.config.log_canonicalization)
        self.add_table.put(key, result)
        return result

    def _multiply(self, a, b):
        key = MemoTable.key(a, b)
        cached = self.mult_table.get(key)
        if cached is not None:
            return cached

        mul, add = self._multiply, self._add

        def term(x, y):
            # x*b + a*y - x*y for an option x of a and an option y of b
            return add(add(mul(x, b), mul(a, y)), -mul(x, y))

        left = SetAlgebra.union(SetAlgebra.cross(term, a.left, b.left),
                                SetAlgebra.cross(term, a.right, b.right))
        right = SetAlgebra.union(SetAlgebra.cross(term, a.left, b.right),
                                 SetAlgebra.cross(term, a.right, b.left))
        raw = type(a)(left, right)

        result = self.mult_table.canonicalize(raw, self.config.log_canonicalization)
        self.mult_table.put(key, result)
        return result

    def stats(self) -> Dict[str, int]:
        """Entry and rewrite counts for both tables."""
        return {
            "addition": len(self.add_table),
            "multiplication": len(self.mult_table),
            "addition_rewrites": self.add_table.rewrites,
            "multiplication_rewrites": self.mult_table.rewrites,
        }

    def clear(self) -> None:
        """Forget every memoized result."""
        self.add_table.clear()
        self.mult_table.clear()
        logger.debug("Cleared arithmetic context")

    def __repr__(self) -> str:
        return (f"ArithmeticContext(add={len(self.add_table)}, "
                f"mult={len(self.mult_table)})")


_active: Optional[ArithmeticContext] = None


def get_context() -> ArithmeticContext:
    """The context used by FiniteNumber operators, created on first use."""
    global _active
    if _active is None:
        _active = ArithmeticContext()
    return _active


def set_context(context: ArithmeticContext) -> Optional[ArithmeticContext]:
    """Make ``context`` active and return the previously active one."""
    global _active
    previous = _active
    _active = context
    return previous


@contextmanager
def local_context(config: Optional[SurrealConfig] = None) -> Iterator[ArithmeticContext]:
    """
    Run a block against a fresh context.

    Example:
        with local_context(SurrealConfig.single_precision()) as ctx:
            six = FiniteNumber.from_int(2) * FiniteNumber.from_int(3)
            print(ctx.stats())
    """
    context = ArithmeticContext(config)
    previous = set_context(context)
    try:
        yield context
    finally:
        set_context(previous)
