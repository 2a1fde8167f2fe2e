"""
Reference GCD and property checks used to verify any algorithm's output.

Every check is a query: it returns ``True``/``False`` and never raises
for well-formed integers, whichever algorithm produced the result.
"""

from typing import Iterable, Optional

from .int64 import INT64_MAX, INT64_MIN

# (a, b, expected gcd)
SELF_TEST_CASES = [
    (48, 18, 6),
    (17, 13, 1),
    (100, 25, 25),
    (0, 5, 5),
    (7, 0, 7),
    (0, 0, 0),
    (-12, 8, 4),
    (15, -10, 5),
    (-20, -30, 10),
]


def reference_gcd(a: int, b: int) -> int:
    """Plain iterative Euclid over absolute values; the ground truth."""
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def _in_range(*values: int) -> bool:
    return all(INT64_MIN <= v <= INT64_MAX for v in values)


def validate(a: int, b: int, result: Optional[int]) -> bool:
    """
    Check that ``result`` is exactly gcd(a, b).

    In order: gcd(0, 0) must be 0; otherwise the result must be positive,
    equal |a| or |b| when the other operand is zero, divide both
    operands, and leave coprime quotients (maximality).
    """
    if result is None or not _in_range(result):
        return False
    if a == 0 and b == 0:
        return result == 0
    if result <= 0:
        return False

    abs_a, abs_b = abs(a), abs(b)
    if a == 0:
        return result == abs_b
    if b == 0:
        return result == abs_a

    if abs_a % result != 0 or abs_b % result != 0:
        return False

    return reference_gcd(abs_a // result, abs_b // result) == 1


def validate_extended(a: int, b: int, g: int, x: int, y: int) -> bool:
    """
    Plain GCD check on ``g``, 64-bit coefficients, and the exact Bezout
    identity a*x + b*y == g.
    """
    if not validate(a, b, g):
        return False
    if not _in_range(x, y):
        return False
    return a * x + b * y == g


def check_fundamental_properties(a: int, b: int, result: int) -> bool:
    if not validate(a, b, result):
        return False

    # commutativity
    if result != reference_gcd(b, a):
        return False

    if b == 0 and result != abs(a):
        return False
    if a == 0 and result != abs(b):
        return False

    return True


def validate_consistency(results: Iterable[Optional[int]]) -> bool:
    """
    True when every computed result in the collection is identical.

    ``None`` marks an algorithm that rejected the input and is skipped.
    Any disagreement among the rest is a failure; there is no majority
    vote. A collection with no computed result is not consistent.
    """
    values = [r for r in results if r is not None]
    if not values:
        return False
    first = values[0]
    return all(v == first for v in values[1:])


def run_self_test(algorithms=None) -> bool:
    """
    Run the fixed case table through the reference implementation and
    every algorithm, plus the Bezout check for the extended variant.
    """
    from .algorithms import ALL_ALGORITHMS
    from .recursive import gcd_extended

    algorithms = ALL_ALGORITHMS if algorithms is None else list(algorithms)

    for a, b, expected in SELF_TEST_CASES:
        if reference_gcd(a, b) != expected:
            return False
        for algorithm in algorithms:
            if algorithm.compute(a, b) != expected:
                return False
        g, x, y = gcd_extended(a, b)
        if not validate_extended(a, b, g, x, y):
            return False

    return True
