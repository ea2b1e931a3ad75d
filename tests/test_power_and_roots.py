from fractions import Fraction

import pytest

from longhand import api
from longhand.config import Limits
from longhand.errors import DomainError, LimitExceeded

TOLERANCE = Fraction(1, 10 ** 9)


def close_to(text: str, expected) -> bool:
    return abs(Fraction(text) - Fraction(expected)) < TOLERANCE


# -------------------------------
# Integer powers
# -------------------------------
@pytest.mark.parametrize(
    "base,exponent,expected",
    [
        ("2", "10", "1024"),
        ("2", "-1", "0.5"),
        ("5", "0", "1"),
        ("0", "5", "0"),
        ("1", "12345", "1"),
        ("7", "1", "7"),
        ("-2", "3", "-8"),
        ("-2", "2", "4"),
        ("1.5", "2", "2.25"),
        ("10", "-3", "0.001"),
        ("2", "-10", "0.0009765625"),
        ("3", "-2", "0.111111111111111"),
        ("0.1", "3", "0.001"),
        ("2", "2.0", "4"),
    ]
)
def test_power(base, exponent, expected):
    assert api.power(base, exponent) == expected


@pytest.mark.parametrize("base,exponent", [("2", 1000), ("3", 200), ("-7", 33), ("12", 0)])
def test_power_matches_python_integers(base, exponent):
    assert api.power(base, str(exponent)) == str(int(base) ** exponent)


def test_zero_to_negative_power_is_a_domain_error():
    with pytest.raises(DomainError):
        api.power("0", "-1")
    with pytest.raises(DomainError):
        api.power_decimal("0", "-0.5")


def test_exponent_caps_return_markers():
    assert api.power("2", "1001") == "power(2, 1001) [exponent too large for computation]"
    assert api.power("2", "-5000") == "power(2, -5000) [exponent too large for computation]"
    assert api.power("2", "1234567890") == "power(2, 1234567890) [exponent too large]"


def test_exponent_cap_is_configurable():
    limits = Limits(max_exponent=5)
    assert api.power("2", "5", limits=limits) == "32"
    assert api.power("2", "6", limits=limits).endswith("[exponent too large for computation]")


# -------------------------------
# Fractional powers
# -------------------------------
@pytest.mark.parametrize(
    "base,exponent,expected",
    [
        ("4", "0.5", "2"),
        ("4", "1.5", "8"),
        ("4", "-0.5", "0.5"),
        ("0", "0.5", "0"),
        ("1", "0.37", "1"),
        ("7", "0", "1"),
    ]
)
def test_power_decimal_exact_cases(base, exponent, expected):
    assert api.power_decimal(base, exponent) == expected


@pytest.mark.parametrize(
    "base,exponent,expected",
    [
        ("2", "0.5", "1.41421356237309504880"),
        ("9", "0.5", 3),
        ("8", "0.25", "1.68179283050742908606"),
        ("27", "1.5", "140.29611541307906"),
    ]
)
def test_power_with_fractional_exponent_is_approximate(base, exponent, expected):
    assert close_to(api.power(base, exponent), expected)


def test_fractional_power_that_cannot_be_computed_returns_marker():
    assert api.power("-8", "0.5") == "decimal_power(-8, 0.5) [approximation needed]"
    assert api.power("2", "0.001") == "decimal_power(2, 0.001) [approximation needed]"


def test_nesting_limit_is_enforced():
    with pytest.raises(LimitExceeded):
        api.power("4", "0.5", limits=Limits(max_nesting=0))


# -------------------------------
# Roots
# -------------------------------
@pytest.mark.parametrize(
    "number,root,expected",
    [
        ("8", "3", 2),
        ("-8", "3", -2),
        ("27", "3", 3),
        ("-27", "3", -3),
        ("16", "4", 2),
        ("2", "2", "1.41421356237309504880"),
        ("16", "-2", "0.25"),
        ("0.25", "2", "0.5"),
        ("1000000", "2", 1000),
    ]
)
def test_nth_root_converges(number, root, expected):
    assert close_to(api.nth_root(number, root), expected)


@pytest.mark.parametrize(
    "number,root,expected",
    [
        ("0", "5", "0"),
        ("1", "7", "1"),
        ("5", "1", "5"),
        ("-5", "1", "-5"),
    ]
)
def test_nth_root_special_cases(number, root, expected):
    assert api.nth_root(number, root) == expected


@pytest.mark.parametrize("number,root", [("-4", "2"), ("-16", "4"), ("9", "0"), ("-8", "1.5")])
def test_nth_root_domain_errors(number, root):
    with pytest.raises(DomainError):
        api.nth_root(number, root)


def test_nth_root_rejects_roots_above_the_degree_limit():
    assert api.nth_root("2", "100") == "root(2, 100) [root too large for computation]"


def test_nth_root_iteration_budget():
    # No refinement at all: the clamped initial guess a/n comes back.
    limits = Limits(newton_max_iterations=0)
    assert api.nth_root("8", "3", limits=limits) == "2.666666666666666"


def test_nth_root_returns_best_estimate_on_internal_failure():
    # x**2 exceeds the exponent cap inside the loop; the loop stops instead of raising.
    limits = Limits(max_exponent=1)
    assert api.nth_root("8", "3", limits=limits) == "2.666666666666666"


def test_nth_root_initial_guess_is_clamped():
    limits = Limits(newton_max_iterations=0)
    assert api.nth_root("0.000002", "2", limits=limits) == "0.001"
    assert api.nth_root("9000", "3", limits=limits) == "1000"


@pytest.mark.parametrize(
    "number,root,expected",
    [
        ("2", "10", "1.0717734625362931"),
        ("2", "20", "1.0352649238413775"),
        # a/n = 0.0625 and 0.0625**31 is far below the working precision
        ("2", "32", "1.0218971486541166"),
        ("0.5", "16", "0.9576032806985737"),
    ]
)
def test_nth_root_high_degrees(number, root, expected):
    assert close_to(api.nth_root(number, root), expected)


@pytest.mark.parametrize(
    "base,exponent,expected",
    [
        ("2", "0.1", "1.0717734625362931"),
        ("2", "0.05", "1.0352649238413775"),
        ("2", "0.03125", "1.0218971486541166"),
        ("2", "1.1", "2.1435469250725863"),
    ]
)
def test_fractional_power_with_large_denominator(base, exponent, expected):
    assert close_to(api.power(base, exponent), expected)


def test_fractional_power_that_does_not_converge_returns_marker():
    # 1000**(1/32) from a/n = 31.25 needs far more than 50 steps
    assert api.power("1000", "0.03125") == "decimal_power(1000, 0.03125) [approximation needed]"
    limits = Limits(newton_max_iterations=3)
    assert api.power("2", "0.5", limits=limits) == "decimal_power(2, 0.5) [approximation needed]"


def test_nth_root_still_returns_unconverged_estimate():
    limits = Limits(newton_max_iterations=3)
    estimate = Fraction(api.nth_root("2", "2", limits=limits))
    assert abs(estimate - Fraction("1.41421356")) < Fraction(1, 10 ** 5)
