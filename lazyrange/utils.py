import functools
import inspect
import math
import operator
from typing import Any, Callable, Optional


def ceil_div(x: int, y: int) -> int:
    """
    Ceiling division for non-negative ``x`` and positive ``y``.
    """
    return -(-x // y)


def as_int(value: Any, name: str) -> int:
    # accept anything implementing __index__ (bool, numpy ints, ...)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, not {type(value).__name__!r}") from None


def integral_value(value: Any) -> Optional[int]:
    """
    Return the int that ``value`` compares equal to, or None if there is
    none. ``2``, ``2.0``, ``Decimal(2)``, ``Fraction(4, 2)`` and ``2+0j`` all
    give 2; ``2.5``, nan, infinities and non-numbers give None.
    """
    try:
        return operator.index(value)
    except TypeError:
        pass

    try:
        candidate = math.floor(value)
    except (TypeError, ValueError, OverflowError):
        # no floor (complex and friends): integral only through the real part
        real = getattr(value, "real", None)
        if real is None or type(real) is type(value) or real != value:
            return None
        return integral_value(real)

    if candidate != value:
        return None
    return candidate


def clamp_index(index: Optional[int], length: int, default: int) -> int:
    """
    Resolve a possibly negative index against ``length``, the way array
    methods (slice, splice, indexOf) do.

    Negative indices count from the end; anything left below zero is
    clamped to 0, anything past the end to ``length``.
    """
    if index is None:
        return default
    index = as_int(index, "index")
    if index < 0:
        return max(index + length, 0)
    return min(index, length)


def _positional_arity(fn: Callable) -> Optional[int]:
    # returns None when fn accepts any number of positional arguments
    sig = inspect.signature(fn)
    count = 0
    for param in sig.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def adapt_callback(fn: Callable, minimum: int) -> Callable:
    """
    Wrap a user callback so it can always be called with the full argument
    list, e.g. ``(value, index, range)``.

    The callback only receives as many leading arguments as its signature
    accepts, so both ``lambda v: ...`` and ``lambda v, i, r: ...`` work.
    Callables whose signature cannot be inspected (some builtins) receive
    ``minimum`` arguments.
    """
    if not callable(fn):
        raise TypeError(f"{fn!r} is not callable")

    try:
        arity = _positional_arity(fn)
    except (TypeError, ValueError):
        arity = minimum

    if arity is None:
        return fn

    @functools.wraps(fn)
    def wrapper(*args):
        return fn(*args[:arity])

    return wrapper
