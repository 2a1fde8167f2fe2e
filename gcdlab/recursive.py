"""Recursive Euclidean GCD variants, including the extended algorithm."""

import sys
from typing import NamedTuple, Optional

from .int64 import (
    RecursionDepthError,
    check_operands,
    safe_abs,
    to_result,
    trivial_gcd,
    trunc_divmod,
    trunc_mod,
)

# Depth is linear in the quotient; stays below the interpreter recursion limit.
MAX_SUBTRACTION_DEPTH = 400


class ExtendedGcd(NamedTuple):
    """gcd together with Bezout coefficients: a*x + b*y == gcd."""

    gcd: int
    x: int
    y: int


def _mod_recursive(a: int, b: int) -> int:
    if b == 0:
        return a
    return _mod_recursive(b, trunc_mod(a, b))


def gcd_recursive_modulo(a, b) -> int:
    a, b = check_operands(a, b)
    shortcut = trivial_gcd(a, b)
    if shortcut is not None:
        return shortcut
    return to_result(_mod_recursive(a, b))


def _sub_recursive(a: int, b: int, depth: int, limit: int) -> int:
    if depth > limit:
        raise RecursionDepthError(limit)
    if a == b:
        return a
    if a > b:
        return _sub_recursive(a - b, b, depth + 1, limit)
    return _sub_recursive(a, b - a, depth + 1, limit)


def gcd_recursive_subtraction(a, b, max_depth: Optional[int] = None) -> int:
    """
    Recursive subtraction Euclid on absolute values.

    Depth grows with max(|a|, |b|) / gcd; once it passes ``max_depth``
    (default ``MAX_SUBTRACTION_DEPTH``) a ``RecursionDepthError`` is raised
    instead of exhausting the interpreter stack. ``max_depth`` may not
    exceed half of ``sys.getrecursionlimit()``.
    """
    if max_depth is not None:
        ceiling = sys.getrecursionlimit() // 2
        if max_depth > ceiling:
            raise ValueError(
                f"max_depth={max_depth} exceeds the usable recursion depth {ceiling}"
            )
    a, b = check_operands(a, b)
    a, b = safe_abs(a), safe_abs(b)
    shortcut = trivial_gcd(a, b)
    if shortcut is not None:
        return shortcut
    limit = MAX_SUBTRACTION_DEPTH if max_depth is None else max_depth
    return _sub_recursive(a, b, 0, limit)


def _extended_recursive(a: int, b: int):
    if b == 0:
        return a, 1, 0
    q, r = trunc_divmod(a, b)
    g, x1, y1 = _extended_recursive(b, r)
    return g, y1, x1 - q * y1


def gcd_extended(a, b) -> ExtendedGcd:
    """
    Extended Euclid by back-substitution.

    Returns ``ExtendedGcd(g, x, y)`` with ``a*x + b*y == g`` and ``g >= 0``.
    A negative ``g`` from the recurrence is fixed by negating the whole
    triple; the coefficients are otherwise left as the recurrence
    produces them.
    """
    a, b = check_operands(a, b)
    g, x, y = _extended_recursive(a, b)
    if g < 0:
        g, x, y = -g, -x, -y
    to_result(g)
    return ExtendedGcd(g, x, y)


def gcd_extended_value(a, b) -> int:
    return gcd_extended(a, b).gcd
