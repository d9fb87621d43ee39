"""
Configuration for surreal arithmetic and display.

A SurrealConfig is owned by an ArithmeticContext. It controls the floating
point type used when a number is evaluated as a float (and therefore how
deep the float-to-surreal bisection goes), plus the default width/depth
used by the display functions.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Type

import numpy as np


@dataclass
class SurrealConfig:
    """Configuration for surreal number evaluation and display."""

    # Float bridge
    float_dtype: Type[np.floating] = np.float64   # np.float32 for single precision

    # Display
    display_width: int = 5        # Terms shown for an unbounded side
    display_depth: int = 0        # Levels printed as braces before switching to floats

    # Diagnostics
    log_canonicalization: bool = False  # Debug record for every in-place memo rewrite

    def __post_init__(self):
        if not issubclass(np.dtype(self.float_dtype).type, np.floating):
            raise ValueError(f"float_dtype must be a numpy floating type, got {self.float_dtype!r}")
        self.float_dtype = np.dtype(self.float_dtype).type
        if self.display_width < 0:
            raise ValueError("display_width must be non-negative")
        if self.display_depth < 0:
            raise ValueError("display_depth must be non-negative")

    @classmethod
    def single_precision(cls) -> SurrealConfig:
        """32-bit floats: shallower float-to-surreal conversions."""
        return cls(float_dtype=np.float32)

    @classmethod
    def double_precision(cls) -> SurrealConfig:
        """64-bit floats (the default)."""
        return cls(float_dtype=np.float64)

    def as_float(self, value) -> np.floating:
        """Cast a value to the configured float type."""
        return self.float_dtype(value)
