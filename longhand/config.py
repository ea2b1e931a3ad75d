from __future__ import annotations
import os
from dataclasses import dataclass

from longhand.types.decimal_value import is_valid


# Defaults
_DEFAULT_MAX_FRACTION_DIGITS = 15
_DEFAULT_MAX_EXPONENT = 1000
_DEFAULT_MAX_EXPONENT_DIGITS = 9
_DEFAULT_NEWTON_MAX_ITERATIONS = 50
_DEFAULT_NEWTON_TOLERANCE = "0.000000001"
_DEFAULT_MAX_ROOT_DEGREE = 32
_DEFAULT_MAX_NESTING = 8


@dataclass(frozen=True)
class Limits:
    """Hard limits that bound the cost of a single computation.

    max_fraction_digits:   extra digits produced past the point by division
    max_exponent:          largest integer exponent that is actually computed
    max_exponent_digits:   exponents with more digits are rejected unparsed
    newton_max_iterations: iteration cap for nth-root refinement
    newton_tolerance:      convergence threshold, as decimal text
    max_root_degree:       largest root degree Newton's method will attempt
    max_nesting:           power -> root -> power re-entry depth
    """

    max_fraction_digits: int = _DEFAULT_MAX_FRACTION_DIGITS
    max_exponent: int = _DEFAULT_MAX_EXPONENT
    max_exponent_digits: int = _DEFAULT_MAX_EXPONENT_DIGITS
    newton_max_iterations: int = _DEFAULT_NEWTON_MAX_ITERATIONS
    newton_tolerance: str = _DEFAULT_NEWTON_TOLERANCE
    max_root_degree: int = _DEFAULT_MAX_ROOT_DEGREE
    max_nesting: int = _DEFAULT_MAX_NESTING


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def decimal_from_env(var: str, default: str) -> str:
    """Non-negative decimal text from the environment, else the default."""
    raw = os.environ.get(var, "").strip()
    if not is_valid(raw) or raw.startswith("-"):
        return default
    return raw


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


def load_limits() -> Limits:
    return Limits(
        max_fraction_digits=int_from_env('LONGHAND_MAX_FRACTION_DIGITS', _DEFAULT_MAX_FRACTION_DIGITS),
        max_exponent=int_from_env('LONGHAND_MAX_EXPONENT', _DEFAULT_MAX_EXPONENT),
        max_exponent_digits=int_from_env('LONGHAND_MAX_EXPONENT_DIGITS', _DEFAULT_MAX_EXPONENT_DIGITS),
        newton_max_iterations=int_from_env('LONGHAND_NEWTON_MAX_ITERATIONS', _DEFAULT_NEWTON_MAX_ITERATIONS),
        newton_tolerance=decimal_from_env('LONGHAND_NEWTON_TOLERANCE', _DEFAULT_NEWTON_TOLERANCE),
        max_root_degree=int_from_env('LONGHAND_MAX_ROOT_DEGREE', _DEFAULT_MAX_ROOT_DEGREE),
        max_nesting=int_from_env('LONGHAND_MAX_NESTING', _DEFAULT_MAX_NESTING),
    )


def strict_tokens() -> bool:
    return flag_from_env('LONGHAND_STRICT_TOKENS')


def use_cy_digits() -> bool:
    return flag_from_env('LONGHAND_CY_DIGITS', default=True)


# Loaded once; shared read-only by every evaluation.
DEFAULT_LIMITS = load_limits()
