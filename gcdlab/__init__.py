from .algorithms import ALL_ALGORITHMS, Algorithm
from .binary import gcd_stein
from .euclid import gcd_division, gcd_modulo, gcd_subtraction
from .int64 import (
    INT64_MAX,
    INT64_MIN,
    GcdError,
    InvalidOperandError,
    OperandRangeError,
    OverflowUnsafeError,
    RecursionDepthError,
)
from .recursive import (
    ExtendedGcd,
    gcd_extended,
    gcd_recursive_modulo,
    gcd_recursive_subtraction,
)
from .validation import (
    check_fundamental_properties,
    reference_gcd,
    validate,
    validate_consistency,
    validate_extended,
)

__all__ = [
    "ALL_ALGORITHMS",
    "Algorithm",
    "ExtendedGcd",
    "GcdError",
    "INT64_MAX",
    "INT64_MIN",
    "InvalidOperandError",
    "OperandRangeError",
    "OverflowUnsafeError",
    "RecursionDepthError",
    "check_fundamental_properties",
    "gcd_division",
    "gcd_extended",
    "gcd_modulo",
    "gcd_recursive_modulo",
    "gcd_recursive_subtraction",
    "gcd_stein",
    "gcd_subtraction",
    "reference_gcd",
    "validate",
    "validate_consistency",
    "validate_extended",
]
