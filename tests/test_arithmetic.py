from fractions import Fraction

import pytest

from longhand import api
from longhand.config import Limits
from longhand.errors import DivisionByZero, InvalidNumber, UnknownOperator


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("0.1", "0.2", "0.3"),
        ("-5", "5", "0"),
        ("999", "1", "1000"),
        ("1.25", "-0.75", "0.5"),
        ("-1.5", "-2.5", "-4"),
        ("0.001", "-1", "-0.999"),
        ("+7", "3", "10"),
        ("123.456", "0.544", "124"),
        ("-0", "0", "0"),
    ]
)
def test_add(a, b, expected):
    assert api.add(a, b) == expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("10", "3", "7"),
        ("3", "10", "-7"),
        ("-3", "-3", "0"),
        ("0.3", "0.1", "0.2"),
        ("1", "0.0001", "0.9999"),
        ("-2", "3", "-5"),
        ("-2", "-3", "1"),
    ]
)
def test_subtract(a, b, expected):
    assert api.subtract(a, b) == expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("123", "0", "0"),
        ("12", "12", "144"),
        ("-1.5", "2", "-3"),
        ("-0.5", "-0.5", "0.25"),
        ("0.001", "0.001", "0.000001"),
        ("99", "99", "9801"),
        ("2.50", "4", "10"),
        ("-3", "0", "0"),
    ]
)
def test_multiply(a, b, expected):
    assert api.multiply(a, b) == expected


@pytest.mark.parametrize("a", ["007.50", "-3", "0", "123456789.000001"])
def test_multiply_by_one_is_canonical_identity(a):
    assert api.multiply(a, "1") == api.canonicalize(a)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("1", "3", "0.333333333333333"),
        ("2", "3", "0.666666666666666"),
        ("22", "7", "3.142857142857142"),
        ("10", "4", "2.5"),
        ("1", "8", "0.125"),
        ("-7", "2", "-3.5"),
        ("7", "-0.5", "-14"),
        ("0", "5", "0"),
        ("1.5", "3", "0.5"),
        ("0.1", "0.03", "3.333333333333333"),
        ("0.01", "4", "0.0025"),
        ("-1", "-4", "0.25"),
    ]
)
def test_divide(a, b, expected):
    assert api.divide(a, b) == expected


def test_divide_stops_after_fifteen_fractional_digits():
    _, _, frac = api.divide("1", "3").partition(".")
    assert len(frac) == 15


@pytest.mark.parametrize("a", ["1", "-2.5", "0", "123456789"])
@pytest.mark.parametrize("zero", ["0", "-0", "0.000", "+0.0"])
def test_divide_by_zero(a, zero):
    with pytest.raises(DivisionByZero):
        api.divide(a, zero)


def test_divide_honours_configured_precision():
    assert api.divide("1", "3", limits=Limits(max_fraction_digits=5)) == "0.33333"
    assert api.divide("1", "3", limits=Limits(max_fraction_digits=0)) == "0"


@pytest.mark.parametrize(
    "fn,a,b",
    [
        (api.add, "abc", "1"),
        (api.subtract, "1", "-"),
        (api.multiply, "1", "1.2.3"),
        (api.divide, "", "2"),
        (api.power, "2", "x"),
        (api.nth_root, "8", ""),
    ]
)
def test_malformed_operands_raise_invalid_number(fn, a, b):
    with pytest.raises(InvalidNumber):
        fn(a, b)


@pytest.mark.parametrize(
    "a,op,b,expected",
    [
        ("2", "+", "3", "5"),
        ("2", "-", "3", "-1"),
        ("2", "*", "3", "6"),
        ("3", "/", "4", "0.75"),
        ("2", "^", "8", "256"),
    ]
)
def test_operate_dispatches(a, op, b, expected):
    assert api.operate(a, op, b) == expected


def test_operate_rejects_unknown_operator():
    with pytest.raises(UnknownOperator):
        api.operate("1", "#", "2")


def test_large_operands_match_exact_rationals():
    a = "98765432109876543210.0123456789"
    b = "-12345678901234567890.9876543210"
    assert Fraction(api.add(a, b)) == Fraction(a) + Fraction(b)
    assert Fraction(api.multiply(a, b)) == Fraction(a) * Fraction(b)
