import math

import numpy as np

from gcdlab.int64 import INT64_MAX, INT64_MIN

# Operand pairs small enough for every variant, including the
# subtraction-based ones, with the expected gcd.
REPRESENTATIVE_CASES = [
    (48, 18, 6),
    (17, 13, 1),
    (100, 25, 25),
    (0, 5, 5),
    (7, 0, 7),
    (0, 0, 0),
    (-12, 8, 4),
    (15, -10, 5),
    (-20, -30, 10),
    (12, 12, 12),
    (-9, -9, 9),
    (1, 97, 1),
    (-1, 64, 1),
    (270, 192, 6),
    (1071, 462, 21),
    (1024, 768, 256),
    (96, -36, 12),
    (-35, 49, 7),
    (2, 3, 1),
    (210, 330, 30),
]


def is_exact_gcd(a: int, b: int, g: int) -> bool:
    """
    Independent check against math.gcd, plus the divisor and maximality
    properties stated directly.
    """
    if g != math.gcd(a, b):
        return False
    if a == 0 and b == 0:
        return g == 0
    if g <= 0:
        return False
    if a % g != 0 or b % g != 0:
        return False
    return math.gcd(a // g, b // g) == 1


def in_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def make_random_operands(
    count: int,
    bound: int,
) -> list[tuple[int, int]]:
    """Random signed operand pairs in [-bound, bound], as plain ints."""
    data = np.random.randint(-bound, bound + 1, size=(count, 2), dtype=np.int64)
    return [(int(a), int(b)) for a, b in data]
