"""
The closed set of GCD variants.

``Algorithm`` is the dispatch point for the analyzer and CLI: each member
knows its metadata and computes through ``Algorithm.compute``. Name lookup
with short aliases lives in ``Algorithm.from_name`` for the CLI only.
"""

from enum import Enum
from typing import Dict, List

from .binary import gcd_stein
from .euclid import gcd_division, gcd_modulo, gcd_subtraction
from .recursive import (
    gcd_extended_value,
    gcd_recursive_modulo,
    gcd_recursive_subtraction,
)


class Algorithm(Enum):
    EUCLID_MOD = "euclid-mod"
    EUCLID_SUB = "euclid-sub"
    EUCLID_DIV = "euclid-div"
    EUCLID_MOD_RECURSIVE = "euclid-mod-recursive"
    EUCLID_SUB_RECURSIVE = "euclid-sub-recursive"
    EUCLID_EXTENDED = "euclid-extended"
    BINARY_STEIN = "binary-stein"

    @property
    def display_name(self) -> str:
        return _INFO[self][0]

    @property
    def family(self) -> str:
        return _INFO[self][1]

    @property
    def is_recursive(self) -> bool:
        return _INFO[self][2]

    @property
    def description(self) -> str:
        return _INFO[self][3]

    def compute(self, a, b) -> int:
        if self is Algorithm.EUCLID_MOD:
            return gcd_modulo(a, b)
        if self is Algorithm.EUCLID_SUB:
            return gcd_subtraction(a, b)
        if self is Algorithm.EUCLID_DIV:
            return gcd_division(a, b)
        if self is Algorithm.EUCLID_MOD_RECURSIVE:
            return gcd_recursive_modulo(a, b)
        if self is Algorithm.EUCLID_SUB_RECURSIVE:
            return gcd_recursive_subtraction(a, b)
        if self is Algorithm.EUCLID_EXTENDED:
            return gcd_extended_value(a, b)
        return gcd_stein(a, b)

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        key = name.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            known = ", ".join(sorted(_ALIASES))
            raise ValueError(f"Unknown algorithm {name!r}; expected one of: {known}") from None


# display name, family, recursive, description
_INFO = {
    Algorithm.EUCLID_MOD: (
        "Euclidean Modulo", "euclidean", False,
        "Iterative Euclid with the remainder operator",
    ),
    Algorithm.EUCLID_SUB: (
        "Euclidean Subtraction", "euclidean", False,
        "Iterative Euclid by repeated subtraction (slow reference)",
    ),
    Algorithm.EUCLID_DIV: (
        "Euclidean Division", "euclidean", False,
        "Iterative Euclid with the remainder computed as a - b*q",
    ),
    Algorithm.EUCLID_MOD_RECURSIVE: (
        "Recursive Modulo", "recursive", True,
        "Tail-recursive Euclid with the remainder operator",
    ),
    Algorithm.EUCLID_SUB_RECURSIVE: (
        "Recursive Subtraction", "recursive", True,
        "Recursive Euclid by subtraction, depth-bounded",
    ),
    Algorithm.EUCLID_EXTENDED: (
        "Extended Euclidean", "recursive", True,
        "Recursive Euclid returning Bezout coefficients",
    ),
    Algorithm.BINARY_STEIN: (
        "Stein Binary", "binary", False,
        "Stein's binary GCD using shifts instead of division",
    ),
}

_ALIASES: Dict[str, Algorithm] = {member.value: member for member in Algorithm}
_ALIASES.update({
    "modulo": Algorithm.EUCLID_MOD,
    "mod": Algorithm.EUCLID_MOD,
    "subtraction": Algorithm.EUCLID_SUB,
    "sub": Algorithm.EUCLID_SUB,
    "division": Algorithm.EUCLID_DIV,
    "div": Algorithm.EUCLID_DIV,
    "recursive_modulo": Algorithm.EUCLID_MOD_RECURSIVE,
    "rec_mod": Algorithm.EUCLID_MOD_RECURSIVE,
    "recursive_subtraction": Algorithm.EUCLID_SUB_RECURSIVE,
    "rec_sub": Algorithm.EUCLID_SUB_RECURSIVE,
    "extended": Algorithm.EUCLID_EXTENDED,
    "ext": Algorithm.EUCLID_EXTENDED,
    "stein": Algorithm.BINARY_STEIN,
    "binary": Algorithm.BINARY_STEIN,
})

ALL_ALGORITHMS: List[Algorithm] = list(Algorithm)
