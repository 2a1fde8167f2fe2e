import pytest

from gcdlab.euclid import gcd_division, gcd_modulo, gcd_subtraction
from gcdlab.int64 import INT64_MAX, INT64_MIN, OperandRangeError, OverflowUnsafeError
from tests.helpers import REPRESENTATIVE_CASES, is_exact_gcd, make_random_operands

ITERATIVE = [
    pytest.param(gcd_modulo, id="modulo"),
    pytest.param(gcd_subtraction, id="subtraction"),
    pytest.param(gcd_division, id="division"),
]


@pytest.mark.parametrize("gcd", ITERATIVE)
@pytest.mark.parametrize("a, b, expected", REPRESENTATIVE_CASES)
def test_known_values(gcd, a, b, expected):
    assert gcd(a, b) == expected
    assert gcd(b, a) == expected


@pytest.mark.parametrize("gcd", ITERATIVE)
def test_zero_identities(gcd):
    assert gcd(0, 0) == 0
    assert gcd(-15, 0) == 15
    assert gcd(0, -15) == 15


@pytest.mark.parametrize("gcd", [gcd_modulo, gcd_division], ids=["modulo", "division"])
def test_negative_operand_gives_non_negative_result(gcd):
    # A truncating remainder carries the dividend's sign through the
    # loop; the result must still come out non-negative.
    for a, b in [(-12, 8), (12, -8), (-12, -8), (8, -12), (-1071, 462)]:
        g = gcd(a, b)
        assert g >= 0
        assert is_exact_gcd(a, b, g)


def test_division_matches_modulo(seeded_rng):
    for a, b in make_random_operands(500, 10**12):
        assert gcd_division(a, b) == gcd_modulo(a, b)


def test_modulo_random_against_math_gcd(seeded_rng):
    for a, b in make_random_operands(500, 2**62):
        assert is_exact_gcd(a, b, gcd_modulo(a, b))


def test_large_operands():
    assert gcd_modulo(10**18, 1) == 1
    assert gcd_modulo(2**62, 2**40 * 3) == 2**40
    assert gcd_division(INT64_MAX, INT64_MAX - 1) == 1
    # Fibonacci neighbours are the worst case for Euclid
    assert gcd_modulo(7540113804746346429, 4660046610375530309) == 1


@pytest.mark.parametrize("gcd", [gcd_modulo, gcd_division], ids=["modulo", "division"])
def test_modulo_family_accepts_int64_min_when_result_fits(gcd):
    assert gcd(INT64_MIN, 6) == 2
    assert gcd(6, INT64_MIN) == 2
    assert gcd(INT64_MIN, 2**62) == 2**62
    assert gcd(INT64_MIN, -3) == 1


@pytest.mark.parametrize("gcd", ITERATIVE)
def test_int64_min_without_representable_answer(gcd):
    with pytest.raises(OverflowUnsafeError):
        gcd(INT64_MIN, 0)
    with pytest.raises(OverflowUnsafeError):
        gcd(INT64_MIN, INT64_MIN)


def test_subtraction_rejects_int64_min():
    with pytest.raises(OverflowUnsafeError):
        gcd_subtraction(INT64_MIN, 6)
    with pytest.raises(OverflowUnsafeError):
        gcd_subtraction(6, INT64_MIN)


@pytest.mark.parametrize("gcd", ITERATIVE)
def test_out_of_range(gcd):
    with pytest.raises(OperandRangeError):
        gcd(2**63, 1)
