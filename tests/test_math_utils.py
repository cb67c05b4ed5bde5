import pytest

from aoc2024.math_utils import abs_diff, gcd, gcd_multiple, lcm, lcm_multiple


@pytest.mark.parametrize(("a", "b", "expected"), [(12, 8, 4), (17, 13, 1), (100, 25, 25)])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected


@pytest.mark.parametrize(("a", "b", "expected"), [(12, 8, 24), (17, 13, 221), (10, 15, 30)])
def test_lcm(a, b, expected):
    assert lcm(a, b) == expected


@pytest.mark.parametrize(("numbers", "expected"), [([12, 18, 24], 6), ([15, 25, 35], 5)])
def test_gcd_multiple(numbers, expected):
    assert gcd_multiple(numbers) == expected


@pytest.mark.parametrize(("numbers", "expected"), [([4, 6], 12), ([4, 6, 8], 24)])
def test_lcm_multiple(numbers, expected):
    assert lcm_multiple(numbers) == expected


def test_multiple_of_empty_is_zero():
    assert gcd_multiple([]) == 0
    assert lcm_multiple([]) == 0


def test_single_element_multiple():
    assert gcd_multiple([42]) == 42
    assert lcm_multiple([42]) == 42


@pytest.mark.parametrize(("a", "b", "expected"), [(10, 5, 5), (5, 10, 5), (-5, 5, 10)])
def test_abs_diff(a, b, expected):
    assert abs_diff(a, b) == expected


def test_gcd_divides_both_and_lcm_invariant():
    for a, b in [(12, 8), (17, 13), (100, 25), (84, 36)]:
        g = gcd(a, b)
        assert a % g == 0 and b % g == 0
        assert g * lcm(a, b) == a * b