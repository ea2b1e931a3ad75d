"""Pen-and-pencil arithmetic on Decimal values.

Every operation resolves signs here and hands unsigned digit arrays to the
kernels in digits.py. Results are canonical Decimals; nothing is mutated.

Failure policy: everything raises typed LonghandErrors immediately, except
nth_root's refinement loop, which stops on an internal failure and returns
the best estimate it has.
"""

from __future__ import annotations

import logging
from math import gcd

from longhand.arithmetic import digits
from longhand.config import DEFAULT_LIMITS, Limits
from longhand.errors import (
    DivisionByZero,
    DomainError,
    LimitExceeded,
    LonghandError,
    Unsupported,
)
from longhand.types.decimal_value import Decimal, Ordering, ONE, ZERO, compare_magnitudes

logger = logging.getLogger(__name__)

# Newton's initial guess is clamped into this band.
GUESS_FLOOR = Decimal.parse("0.001")
GUESS_CEILING = Decimal.parse("1000")


def _enter(depth: int, limits: Limits) -> None:
    if depth > limits.max_nesting:
        raise LimitExceeded(f"Nesting limit of {limits.max_nesting} exceeded")


def _aligned(a: Decimal, b: Decimal) -> tuple[list[int], list[int], int]:
    """Both operands as integer digit arrays at a common scale."""
    scale = max(a.scale, b.scale)
    return (
        a.digits + [0] * (scale - a.scale),
        b.digits + [0] * (scale - b.scale),
        scale,
    )


def _truncate(value: Decimal, places: int) -> Decimal:
    if value.scale <= places:
        return value
    return Decimal.of(value.negative, value.integer, value.fraction[:places])


def _truncate_relative(value: Decimal, places: int) -> Decimal:
    """Truncate to `places` fractional digits, counted from the first non-zero
    digit when |value| < 1, so a non-zero value never truncates to zero."""
    if value.integer == (0,):
        for digit in value.fraction:
            if digit:
                break
            places += 1
    return _truncate(value, places)


def _approximate_power(x: Decimal, exponent: Decimal, places: int, limits: Limits, depth: int) -> Decimal:
    """x ** exponent with every intermediate product cut by _truncate_relative."""
    if not exponent.is_integer:
        return _truncate_relative(power(x, exponent, limits, depth), places)
    _enter(depth, limits)
    n = _integer_exponent(x, exponent, limits)
    result = ONE
    current = x
    while n > 0:
        if n % 2 == 1:
            result = _truncate_relative(multiply(result, current), places)
        n //= 2
        if n:
            current = _truncate_relative(multiply(current, current), places)
    if exponent.negative:
        result = divide(ONE, result, limits)
    return result


# -------------------------------
# The four operations
# -------------------------------
def add(a: Decimal, b: Decimal) -> Decimal:
    da, db, scale = _aligned(a, b)
    if a.negative == b.negative:
        return Decimal.from_scaled(digits.add(da, db), scale, a.negative)
    # Opposite signs: subtract the smaller magnitude from the larger.
    if compare_magnitudes(a, b) >= Ordering.EQUAL:
        return Decimal.from_scaled(digits.sub(da, db), scale, a.negative)
    return Decimal.from_scaled(digits.sub(db, da), scale, b.negative)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return add(a, b.negate())


def multiply(a: Decimal, b: Decimal) -> Decimal:
    if a.is_zero or b.is_zero:
        return ZERO
    product = digits.mul(a.digits, b.digits)
    return Decimal.from_scaled(product, a.scale + b.scale, a.negative != b.negative)


def divide(a: Decimal, b: Decimal, limits: Limits | None = None) -> Decimal:
    """Long division, continued past the point for at most max_fraction_digits digits."""
    limits = limits or DEFAULT_LIMITS
    if b.is_zero:
        raise DivisionByZero("Division by zero")
    if a.is_zero:
        return ZERO

    dividend = a.digits
    divisor = digits.strip(b.digits)
    shift = b.scale - a.scale
    if shift > 0:
        dividend = dividend + [0] * shift
        places = 0
    else:
        places = -shift

    quotient, remainder = digits.long_divide(dividend, divisor)
    extra = 0
    while not digits.is_zero(remainder) and extra < limits.max_fraction_digits:
        digit, remainder = digits.next_digit(remainder, divisor)
        quotient.append(digit)
        extra += 1
    return Decimal.from_scaled(quotient, places + extra, a.negative != b.negative)


# -------------------------------
# Powers and roots
# -------------------------------
def _integer_exponent(base: Decimal, exponent: Decimal, limits: Limits) -> int:
    if len(exponent.integer) > limits.max_exponent_digits:
        raise Unsupported(f"power({base}, {exponent}) [exponent too large]")
    n = abs(int(exponent))
    if n > limits.max_exponent:
        raise Unsupported(f"power({base}, {exponent}) [exponent too large for computation]")
    return n


def power(base: Decimal, exponent: Decimal, limits: Limits | None = None, _depth: int = 0) -> Decimal:
    """base ** exponent by repeated squaring; fractional exponents go to power_decimal."""
    limits = limits or DEFAULT_LIMITS
    _enter(_depth, limits)

    if exponent.is_zero:
        return ONE
    if base.is_zero:
        if exponent.negative:
            raise DomainError("0 to a negative power is undefined")
        return ZERO
    if base == ONE:
        return ONE
    if exponent == ONE:
        return base
    if not exponent.is_integer:
        return power_decimal(base, exponent, limits, _depth + 1)

    n = _integer_exponent(base, exponent, limits)
    result = ONE
    current = base
    while n > 0:
        if n % 2 == 1:
            result = multiply(result, current)
        n //= 2
        if n:
            current = multiply(current, current)

    if exponent.negative:
        result = divide(ONE, result, limits)
    return result


def _reduced_fraction(fraction: tuple[int, ...]) -> tuple[Decimal, Decimal]:
    """0.d1d2..dk as numerator/denominator in lowest terms."""
    numerator = int(''.join(map(str, fraction)))
    denominator = 10 ** len(fraction)
    common = gcd(numerator, denominator)
    return Decimal.from_int(numerator // common), Decimal.from_int(denominator // common)


def power_decimal(base: Decimal, exponent: Decimal, limits: Limits | None = None, _depth: int = 0) -> Decimal:
    """base ** (w + p/q) computed as base**w * qth_root(base**p)."""
    limits = limits or DEFAULT_LIMITS
    _enter(_depth, limits)

    if base.is_zero:
        if exponent.negative:
            raise DomainError("0 to a negative power is undefined")
        return ZERO
    if base == ONE or exponent.is_zero:
        return ONE
    if exponent == ONE:
        return base

    magnitude = exponent.abs()
    if magnitude.is_integer:
        return power(base, exponent, limits, _depth + 1)

    whole = Decimal.of(False, magnitude.integer)
    numerator, denominator = _reduced_fraction(magnitude.fraction)
    try:
        result, converged = _newton_root(power(base, numerator, limits, _depth + 1), denominator, limits, _depth + 1)
        if not converged:
            raise Unsupported(f"root of {base} did not converge")
        if not whole.is_zero:
            result = multiply(power(base, whole, limits, _depth + 1), result)
    except (DomainError, LimitExceeded, Unsupported) as exc:
        raise Unsupported(f"decimal_power({base}, {exponent}) [approximation needed]") from exc

    if exponent.negative:
        result = divide(ONE, result, limits)
    return result


def nth_root(number: Decimal, root: Decimal, limits: Limits | None = None, _depth: int = 0) -> Decimal:
    """Solve x ** root == number by Newton's method.

    Odd roots of negative numbers are taken on the magnitude and the sign
    reapplied; even roots of negative numbers raise DomainError. When the
    iteration stops before reaching newton_tolerance the best estimate so
    far is returned.
    """
    x, converged = _newton_root(number, root, limits or DEFAULT_LIMITS, _depth)
    if not converged:
        logger.debug("nth_root(%s, %s) returned an unconverged estimate %s", number, root, x)
    return x


def _newton_root(number: Decimal, root: Decimal, limits: Limits, depth: int) -> tuple[Decimal, bool]:
    """The root estimate, and whether successive iterates got within tolerance."""
    _enter(depth, limits)

    if number.is_zero:
        return ZERO, True
    if number == ONE:
        return ONE, True
    if root == ONE:
        return number, True
    if root.is_zero:
        raise DomainError("Cannot take the 0th root")
    if root.negative:
        x, converged = _newton_root(number, root.abs(), limits, depth + 1)
        return divide(ONE, x, limits), converged
    if number.negative and (not root.is_integer or root.integer[-1] % 2 == 0):
        raise DomainError("Even root of a negative number is undefined in real numbers")
    if compare_magnitudes(root, Decimal.from_int(limits.max_root_degree)) is Ordering.GREATER:
        raise Unsupported(f"root({number}, {root}) [root too large for computation]")

    a = number.abs()
    tolerance = Decimal.parse(limits.newton_tolerance)
    working_places = 2 * limits.max_fraction_digits

    x = divide(a, root, limits)
    if compare_magnitudes(x, GUESS_FLOOR) is Ordering.LESS:
        x = GUESS_FLOOR
    elif compare_magnitudes(x, GUESS_CEILING) is Ordering.GREATER:
        x = GUESS_CEILING

    # For a degree above 1 the root lies between a and 1.
    bracket = None
    if compare_magnitudes(root, ONE) is Ordering.GREATER:
        bracket = (a, ONE) if compare_magnitudes(a, ONE) is Ordering.LESS else (ONE, a)

    n_minus_1 = subtract(root, ONE)
    converged = False
    for iteration in range(limits.newton_max_iterations):
        previous = x
        # x := ((n-1)*x + a / x**(n-1)) / n
        try:
            x_pow = _approximate_power(x, n_minus_1, working_places, limits, depth + 1)
            quotient = divide(a, x_pow, limits)
            x = divide(add(multiply(n_minus_1, x), quotient), root, limits)
        except LonghandError as exc:
            logger.debug("nth_root(%s, %s) stopped at iteration %d: %s", number, root, iteration, exc)
            break
        x = _truncate_relative(x, working_places)
        if bracket is not None:
            low, high = bracket
            if compare_magnitudes(x, high) is Ordering.GREATER:
                x = high
            elif compare_magnitudes(x, low) is Ordering.LESS:
                x = low
        if compare_magnitudes(subtract(x, previous), tolerance) is Ordering.LESS:
            converged = True
            break

    x = _truncate(x, limits.max_fraction_digits)
    return (x.negate() if number.negative else x), converged
