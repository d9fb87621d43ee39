"""
surreals: An Algebra Engine for Conway's Surreal Numbers

Every surreal number is a pair { L | R } of sets of simpler numbers where
no member of R is <= any member of L. From the empty pair { | } = 0 the
construction reaches every dyadic rational in finitely many steps, and,
once the sets may be infinite, numbers such as ω and ε.

This package provides:
- FiniteNumber: recursive pair-of-sets numbers with a total order,
  negation, addition, subtraction and multiplication
- NumberSet / SetAlgebra: comparator-keyed sets and lifted set arithmetic
- ArithmeticContext / MemoTable: memoized, canonicalizing arithmetic
- Float bridge: exact evaluation of dyadic values, float -> surreal bisection
- TransfiniteNumber: lazily generated, possibly infinite sides with
  per-instance caching, projection back to finite numbers, and display

Example usage:
    from surreals import FiniteNumber, TransfiniteNumber, omega

    two = FiniteNumber.from_int(2)
    half = FiniteNumber.from_float(0.5)
    print(two.display_verbose())            # { { { | } | } | }
    print(float(two * half))                # 1.0
    print(float(two + half))                # 2.5

    w = omega()
    print(w)                                # { 0.000000 1.000000 ... | }
"""

import logging

__version__ = "0.1.0"

from .errors import (
    SurrealError,
    InvalidConstruction,
    UnboundedSet,
    RecursionDepthExceeded,
)

from .config import SurrealConfig

from .comparison import (
    less_equal,
    greater_equal,
    equal,
    not_equal,
    less,
    greater,
    compare,
)

from .number_set import NumberSet

from .set_algebra import SetAlgebra

from .arithmetic import (
    ArithmeticContext,
    MemoTable,
    get_context,
    set_context,
    local_context,
)

from .finite import FiniteNumber

from .float_bridge import (
    to_float,
    from_float,
    from_int,
)

from .transfinite import (
    TransfiniteNumber,
    GeneratedSide,
    naturals,
    negative_naturals,
    powers_of_half,
    omega,
    negative_omega,
    epsilon,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SurrealError",
    "InvalidConstruction",
    "UnboundedSet",
    "RecursionDepthExceeded",
    # Configuration
    "SurrealConfig",
    # Order
    "less_equal",
    "greater_equal",
    "equal",
    "not_equal",
    "less",
    "greater",
    "compare",
    # Sets
    "NumberSet",
    "SetAlgebra",
    # Arithmetic
    "ArithmeticContext",
    "MemoTable",
    "get_context",
    "set_context",
    "local_context",
    # Finite numbers
    "FiniteNumber",
    "to_float",
    "from_float",
    "from_int",
    # Transfinite numbers
    "TransfiniteNumber",
    "GeneratedSide",
    "naturals",
    "negative_naturals",
    "powers_of_half",
    "omega",
    "negative_omega",
    "epsilon",
]
