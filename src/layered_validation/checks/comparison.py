"""Comparison checks: equality, membership, ranges, thresholds.

Work with any mutually comparable values (``int``, ``float``, ``Decimal``,
``str``, dates...). ``None`` never satisfies a comparison.
"""

from __future__ import annotations

from typing import Any

from ..domain.check import BaseCheck, PredicateCheck
from ..primitives.exceptions import ConfigurationError


def equal_to(other: Any) -> BaseCheck[Any]:
    return PredicateCheck(
        lambda value: value is not None and value == other, f"equal_to({other!r})"
    )


def not_equal_to(other: Any) -> BaseCheck[Any]:
    return PredicateCheck(
        lambda value: value is not None and value != other, f"not_equal_to({other!r})"
    )


def one_of(*values: Any) -> BaseCheck[Any]:
    """True when the value equals one of *values* (``None`` only if listed)."""
    allowed = tuple(values)
    return PredicateCheck(lambda value: value in allowed, f"one_of{allowed!r}")


def in_range(minimum: Any, maximum: Any, inclusive: bool = True) -> BaseCheck[Any]:
    if inclusive:
        return in_range_inclusive(minimum, maximum)
    return in_range_exclusive(minimum, maximum)


def in_range_inclusive(minimum: Any, maximum: Any) -> BaseCheck[Any]:
    _check_bounds(minimum, maximum)
    return PredicateCheck(
        lambda value: value is not None and minimum <= value <= maximum,
        f"in_range_inclusive({minimum!r}, {maximum!r})",
    )


def in_range_exclusive(minimum: Any, maximum: Any) -> BaseCheck[Any]:
    _check_bounds(minimum, maximum)
    return PredicateCheck(
        lambda value: value is not None and minimum < value < maximum,
        f"in_range_exclusive({minimum!r}, {maximum!r})",
    )


def lt(threshold: Any) -> BaseCheck[Any]:
    return PredicateCheck(
        lambda value: value is not None and value < threshold, f"lt({threshold!r})"
    )


def lte(threshold: Any) -> BaseCheck[Any]:
    return PredicateCheck(
        lambda value: value is not None and value <= threshold, f"lte({threshold!r})"
    )


def gt(threshold: Any) -> BaseCheck[Any]:
    return PredicateCheck(
        lambda value: value is not None and value > threshold, f"gt({threshold!r})"
    )


def gte(threshold: Any) -> BaseCheck[Any]:
    return PredicateCheck(
        lambda value: value is not None and value >= threshold, f"gte({threshold!r})"
    )


def _check_bounds(minimum: Any, maximum: Any) -> None:
    if maximum < minimum:
        msg = f"Range maximum {maximum!r} cannot be less than minimum {minimum!r}"
        raise ConfigurationError(msg)
