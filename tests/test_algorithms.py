import pytest

from gcdlab.algorithms import ALL_ALGORITHMS, Algorithm
from gcdlab.recursive import gcd_extended
from gcdlab.validation import check_fundamental_properties, validate, validate_consistency
from tests.helpers import REPRESENTATIVE_CASES, is_exact_gcd, make_random_operands

ALGORITHM_PARAMS = [pytest.param(alg, id=alg.value) for alg in ALL_ALGORITHMS]


def test_closed_set_of_seven():
    assert [alg.value for alg in ALL_ALGORITHMS] == [
        "euclid-mod",
        "euclid-sub",
        "euclid-div",
        "euclid-mod-recursive",
        "euclid-sub-recursive",
        "euclid-extended",
        "binary-stein",
    ]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("modulo", Algorithm.EUCLID_MOD),
        ("MOD", Algorithm.EUCLID_MOD),
        ("sub", Algorithm.EUCLID_SUB),
        ("div", Algorithm.EUCLID_DIV),
        ("rec_mod", Algorithm.EUCLID_MOD_RECURSIVE),
        ("recursive_subtraction", Algorithm.EUCLID_SUB_RECURSIVE),
        ("ext", Algorithm.EUCLID_EXTENDED),
        ("binary", Algorithm.BINARY_STEIN),
        (" stein ", Algorithm.BINARY_STEIN),
        ("euclid-div", Algorithm.EUCLID_DIV),
    ],
)
def test_from_name(name, expected):
    assert Algorithm.from_name(name) is expected


def test_from_name_unknown():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        Algorithm.from_name("quantum")


def test_metadata():
    assert Algorithm.BINARY_STEIN.family == "binary"
    assert Algorithm.EUCLID_EXTENDED.is_recursive
    assert not Algorithm.EUCLID_MOD.is_recursive
    assert Algorithm.EUCLID_SUB.display_name == "Euclidean Subtraction"
    for alg in ALL_ALGORITHMS:
        assert alg.description


@pytest.mark.parametrize("alg", ALGORITHM_PARAMS)
@pytest.mark.parametrize("a, b, expected", REPRESENTATIVE_CASES)
def test_every_algorithm_satisfies_properties(alg, a, b, expected):
    g = alg.compute(a, b)
    assert g == expected
    assert alg.compute(b, a) == g
    assert validate(a, b, g)
    assert check_fundamental_properties(a, b, g)


@pytest.mark.parametrize("a, b, expected", REPRESENTATIVE_CASES)
def test_cross_algorithm_agreement(a, b, expected):
    results = [alg.compute(a, b) for alg in ALL_ALGORITHMS]
    assert validate_consistency(results)
    assert results[0] == expected


def test_scenario_48_18():
    assert {alg.compute(48, 18) for alg in ALL_ALGORITHMS} == {6}
    g, x, y = gcd_extended(48, 18)
    assert g == 6 and 48 * x + 18 * y == 6


def test_fast_algorithms_agree_on_random_input(seeded_rng):
    fast = [
        Algorithm.EUCLID_MOD,
        Algorithm.EUCLID_DIV,
        Algorithm.EUCLID_MOD_RECURSIVE,
        Algorithm.EUCLID_EXTENDED,
        Algorithm.BINARY_STEIN,
    ]
    for a, b in make_random_operands(300, 2**62):
        results = [alg.compute(a, b) for alg in fast]
        assert validate_consistency(results)
        assert is_exact_gcd(a, b, results[0])


def test_subtraction_algorithms_agree_on_small_random_input(seeded_rng):
    for a, b in make_random_operands(300, 200):
        iterative = Algorithm.EUCLID_SUB.compute(a, b)
        recursive = Algorithm.EUCLID_SUB_RECURSIVE.compute(a, b)
        assert iterative == recursive
        assert is_exact_gcd(a, b, iterative)
