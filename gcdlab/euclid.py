"""Iterative Euclidean GCD variants."""

from .int64 import (
    check_operands,
    safe_abs,
    to_result,
    trivial_gcd,
    trunc_divmod,
    trunc_mod,
)


def gcd_modulo(a, b) -> int:
    """
    Classic Euclid: replace (a, b) by (b, a mod b) until b is zero.

    Uses a truncating remainder, so intermediate values may be negative;
    the final magnitude is returned. Accepts INT64_MIN unless the GCD
    itself would be 2**63.
    """
    a, b = check_operands(a, b)
    shortcut = trivial_gcd(a, b)
    if shortcut is not None:
        return shortcut

    while b != 0:
        a, b = b, trunc_mod(a, b)
    return to_result(a)


def gcd_subtraction(a, b) -> int:
    """
    Euclid by repeated subtraction on absolute values.

    Linear in max(|a|, |b|) / gcd; only suitable for small quotients.
    """
    a, b = check_operands(a, b)
    a, b = safe_abs(a), safe_abs(b)
    shortcut = trivial_gcd(a, b)
    if shortcut is not None:
        return shortcut

    while a != b:
        if a > b:
            a -= b
        else:
            b -= a
    return a


def gcd_division(a, b) -> int:
    """Same recurrence as gcd_modulo with the remainder taken as a - b*q."""
    a, b = check_operands(a, b)
    shortcut = trivial_gcd(a, b)
    if shortcut is not None:
        return shortcut

    while b != 0:
        quotient, _ = trunc_divmod(a, b)
        remainder = a - b * quotient
        a, b = b, remainder
    return to_result(a)
