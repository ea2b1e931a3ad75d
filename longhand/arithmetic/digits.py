"""Unsigned digit-array kernels.

A digit array is a list of ints in 0..9, most significant digit first,
representing a non-negative integer. Kernels never mutate their inputs.

The Cython build in digits_cy.pyx provides the same four kernels; it is
used when importable unless LONGHAND_CY_DIGITS=0.
"""

from __future__ import annotations

from longhand.config import use_cy_digits

Digits = list[int]


def strip(a: Digits) -> Digits:
    """Drop leading zeros, keeping a single 0 for zero."""
    i = 0
    n = len(a) - 1
    while i < n and a[i] == 0:
        i += 1
    return a[i:] if a else [0]


def is_zero(a: Digits) -> bool:
    return not any(a)


def compare_py(a: Digits, b: Digits) -> int:
    """-1, 0 or 1 as a is less than, equal to or greater than b."""
    a = strip(a)
    b = strip(b)
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


def add_py(a: Digits, b: Digits) -> Digits:
    i = len(a) - 1
    j = len(b) - 1
    carry = 0
    out: Digits = []
    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += a[i]
            i -= 1
        if j >= 0:
            total += b[j]
            j -= 1
        out.append(total % 10)
        carry = total // 10
    out.reverse()
    return strip(out)


def sub_py(a: Digits, b: Digits) -> Digits:
    """a - b; requires a >= b."""
    width = max(len(a), len(b))
    a = [0] * (width - len(a)) + a
    b = [0] * (width - len(b)) + b
    borrow = 0
    out = [0] * width
    for k in range(width - 1, -1, -1):
        diff = a[k] - b[k] - borrow
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        out[k] = diff
    return strip(out)


def mul_py(a: Digits, b: Digits) -> Digits:
    if is_zero(a) or is_zero(b):
        return [0]
    result = [0] * (len(a) + len(b))
    for i in range(len(a) - 1, -1, -1):
        for j in range(len(b) - 1, -1, -1):
            total = a[i] * b[j] + result[i + j + 1]
            result[i + j + 1] = total % 10
            result[i + j] += total // 10
    return strip(result)


def long_divide(dividend: Digits, divisor: Digits) -> tuple[Digits, Digits]:
    """Long division: bring down one digit at a time, subtract until it no longer fits."""
    quotient: Digits = []
    remainder: Digits = [0]
    for digit in dividend:
        remainder = strip(remainder + [digit])
        count = 0
        while compare(remainder, divisor) >= 0:
            remainder = sub(remainder, divisor)
            count += 1
        quotient.append(count)
    return strip(quotient), remainder


def next_digit(remainder: Digits, divisor: Digits) -> tuple[int, Digits]:
    """One step of long division past the point: remainder*10 divided by divisor."""
    remainder = strip(remainder + [0])
    count = 0
    while compare(remainder, divisor) >= 0:
        remainder = sub(remainder, divisor)
        count += 1
    return count, remainder


def _select():
    if use_cy_digits():
        try:
            from longhand.arithmetic import digits_cy
        except ImportError:
            return compare_py, add_py, sub_py, mul_py, "py"
        return digits_cy.compare, digits_cy.add, digits_cy.sub, digits_cy.mul, "cy"
    return compare_py, add_py, sub_py, mul_py, "py"


compare, add, sub, mul, KERNEL = _select()
