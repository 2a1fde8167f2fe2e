"""
Signed 64-bit operand domain shared by every GCD variant.

Python integers never overflow, so the 64-bit contract is enforced
explicitly: operands are range-checked on entry, and any path that needs
``|INT64_MIN|`` (which is not representable) raises instead of returning
a value the reference platform could not produce.
"""

import operator
from typing import Optional, Tuple

import numpy as np

_INFO = np.iinfo(np.int64)

INT64_MIN = int(_INFO.min)
INT64_MAX = int(_INFO.max)


class GcdError(ValueError):
    """Base class for errors raised by gcdlab."""


class InvalidOperandError(GcdError):
    """An operand cannot be handled by the requested algorithm."""


class OperandRangeError(InvalidOperandError):
    def __init__(self, name: str, value: int):
        super().__init__(
            f"{name}={value} is outside the signed 64-bit range "
            f"[{INT64_MIN}, {INT64_MAX}]"
        )
        self.name = name
        self.value = value


class OverflowUnsafeError(InvalidOperandError):
    def __init__(self, value: int = INT64_MIN):
        super().__init__(
            f"absolute value of {value} does not fit in a signed 64-bit integer"
        )
        self.value = value


class RecursionDepthError(GcdError):
    def __init__(self, limit: int):
        super().__init__(
            f"recursion depth limit {limit} exceeded; use a modulo-based variant "
            f"for operands with a large quotient"
        )
        self.limit = limit


def check_operand(value, name: str = "operand") -> int:
    """
    Coerce ``value`` to a plain ``int`` and check it is a 64-bit integer.

    Accepts anything implementing ``__index__`` (``int``, ``numpy.int64``,
    ...). Raises ``TypeError`` for non-integers and ``OperandRangeError``
    for values outside ``[INT64_MIN, INT64_MAX]``.
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, not bool")
    value = operator.index(value)
    if value < INT64_MIN or value > INT64_MAX:
        raise OperandRangeError(name, value)
    return value


def check_operands(a, b) -> Tuple[int, int]:
    return check_operand(a, "a"), check_operand(b, "b")


def safe_abs(value: int) -> int:
    if value == INT64_MIN:
        raise OverflowUnsafeError(value)
    return -value if value < 0 else value


def trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """
    Quotient and remainder with the quotient truncated toward zero.

    ``r = a - b*q`` always takes the sign of ``a``, unlike Python's
    floor-based ``divmod``.
    """
    if b == 0:
        raise ZeroDivisionError("trunc_divmod by zero")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


def trunc_mod(a: int, b: int) -> int:
    return trunc_divmod(a, b)[1]


def trivial_gcd(a: int, b: int) -> Optional[int]:
    """
    Shared edge-case policy applied before any algorithm loop.

    Returns the GCD when a shortcut applies, otherwise ``None``:

    - ``gcd(0, 0) = 0``
    - ``gcd(a, 0) = |a|`` and ``gcd(0, b) = |b|``
    - ``gcd(a, a) = |a|``
    - ``gcd(a, ±1) = gcd(±1, b) = 1``

    Shortcuts that would need ``|INT64_MIN|`` raise ``OverflowUnsafeError``.
    """
    if a == 0 and b == 0:
        return 0
    if b == 0:
        return safe_abs(a)
    if a == 0:
        return safe_abs(b)
    if a == b:
        return safe_abs(a)
    if a in (1, -1) or b in (1, -1):
        return 1
    return None


def to_result(value: int) -> int:
    """Final non-negative GCD from a signed loop result."""
    magnitude = -value if value < 0 else value
    if magnitude > INT64_MAX:
        raise OverflowUnsafeError(value)
    return magnitude
