"""Stein's binary GCD: shifts, comparisons and subtraction only."""

from .int64 import check_operands, safe_abs


def gcd_stein(a, b) -> int:
    """
    Binary GCD on absolute values.

    Right shifts on negative Python ints are arithmetic, which would never
    clear the sign, so operands are made non-negative before any bit
    operation. INT64_MIN raises ``OverflowUnsafeError``.
    """
    a, b = check_operands(a, b)
    a, b = safe_abs(a), safe_abs(b)
    if a == 0:
        return b
    if b == 0:
        return a

    shift = 0
    while ((a | b) & 1) == 0:
        a >>= 1
        b >>= 1
        shift += 1

    while (a & 1) == 0:
        a >>= 1

    while b != 0:
        while (b & 1) == 0:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a

    return a << shift
