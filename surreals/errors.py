"""
Error kinds raised by the surreal number engine.

Every error derives from SurrealError so callers can catch the whole
family at once, and from the closest builtin so existing handlers
(ValueError, RecursionError) keep working.
"""

import functools
import logging

logger = logging.getLogger(__name__)


class SurrealError(Exception):
    """Base class for all surreal number errors."""


class InvalidConstruction(SurrealError, ValueError):
    """
    A {L | R} pair would be a pseudo-number.

    Raised when some element of R is <= some element of L, when a
    two-number pair is not strictly increasing, or when the input to a
    constructor cannot describe a surreal number at all (NaN, infinity).
    """


class UnboundedSet(SurrealError, ValueError):
    """A transfinite number with an infinite side was projected to a finite one."""


class RecursionDepthExceeded(SurrealError, RecursionError):
    """The operands are too deep for the interpreter stack."""


def surface_recursion(func):
    """
    Re-raise interpreter stack exhaustion inside ``func`` as RecursionDepthExceeded.

    Already-converted errors pass through untouched, so nested guarded
    calls report the original failure once.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RecursionDepthExceeded:
            raise
        except RecursionError as exc:
            logger.warning("Recursion limit hit in %s", func.__qualname__)
            raise RecursionDepthExceeded(
                f"operands too deep for {func.__qualname__}"
            ) from exc

    return wrapper
