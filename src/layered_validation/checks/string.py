"""String shape checks: blank, alpha, numeric, regex, length.

Character classes follow Unicode: letters are ``str.isalpha`` characters and
digits are decimal digits (``str.isdecimal``). ``None`` never satisfies a
shape check except the ones that accept absence (``blank``, ``empty``,
``matches_or_null``).
"""

from __future__ import annotations

import re
from typing import Any

from ..domain.check import BaseCheck, PredicateCheck
from ..primitives.exceptions import ConfigurationError


def not_blank() -> BaseCheck[str | None]:
    """Present and not only whitespace."""
    return PredicateCheck(lambda value: value is not None and bool(value.strip()), "not_blank")


def blank() -> BaseCheck[str | None]:
    return PredicateCheck(lambda value: value is None or not value.strip(), "blank")


def not_empty() -> BaseCheck[str | None]:
    return PredicateCheck(lambda value: value is not None and len(value) > 0, "not_empty")


def empty() -> BaseCheck[str | None]:
    return PredicateCheck(lambda value: value is None or len(value) == 0, "empty")


def alpha() -> BaseCheck[str | None]:
    """Only letters, at least one."""
    return PredicateCheck(lambda value: value is not None and value.isalpha(), "alpha")


def alphanumeric() -> BaseCheck[str | None]:
    """Only letters or digits, at least one."""
    return PredicateCheck(
        lambda value: value is not None
        and len(value) > 0
        and all(_is_letter_or_digit(c) for c in value),
        "alphanumeric",
    )


def alphanumeric_space() -> BaseCheck[str | None]:
    """Only letters, digits or spaces; the empty string passes."""
    return PredicateCheck(
        lambda value: value is not None
        and all(c == " " or _is_letter_or_digit(c) for c in value),
        "alphanumeric_space",
    )


def alpha_space() -> BaseCheck[str | None]:
    """Only letters or spaces; the empty string passes."""
    return PredicateCheck(
        lambda value: value is not None and all(c == " " or c.isalpha() for c in value),
        "alpha_space",
    )


def ascii_printable() -> BaseCheck[str | None]:
    """Only ASCII 32..126; the empty string passes."""
    return PredicateCheck(
        lambda value: value is not None and all(" " <= c <= "~" for c in value),
        "ascii_printable",
    )


def numeric() -> BaseCheck[str | None]:
    """Only digits, at least one."""
    return PredicateCheck(lambda value: value is not None and value.isdecimal(), "numeric")


def numeric_space() -> BaseCheck[str | None]:
    """Only digits or spaces; the empty string passes."""
    return PredicateCheck(
        lambda value: value is not None and all(c == " " or c.isdecimal() for c in value),
        "numeric_space",
    )


def whitespace() -> BaseCheck[str | None]:
    """Only whitespace; the empty string passes."""
    return PredicateCheck(
        lambda value: value is not None and all(c.isspace() for c in value), "whitespace"
    )


def matches(pattern: str | re.Pattern[str], flags: int = 0) -> BaseCheck[Any]:
    """Present and matching *pattern* in full (not just a prefix)."""
    compiled = _compile(pattern, flags)
    return PredicateCheck(
        lambda value: value is not None and compiled.fullmatch(str(value)) is not None,
        f"matches({compiled.pattern!r})",
    )


def matches_or_null(pattern: str | re.Pattern[str], flags: int = 0) -> BaseCheck[Any]:
    compiled = _compile(pattern, flags)
    return PredicateCheck(
        lambda value: value is None or compiled.fullmatch(str(value)) is not None,
        f"matches_or_null({compiled.pattern!r})",
    )


def length_min_max(min_length: int, max_length: int, inclusive: bool = True) -> BaseCheck[Any]:
    if inclusive:
        return length_min_max_inclusive(min_length, max_length)
    return length_min_max_exclusive(min_length, max_length)


def length_min_max_inclusive(min_length: int, max_length: int) -> BaseCheck[Any]:
    _check_bounds(min_length, max_length)
    return PredicateCheck(
        lambda value: value is not None and min_length <= len(value) <= max_length,
        f"length_min_max_inclusive({min_length}, {max_length})",
    )


def length_min_max_exclusive(min_length: int, max_length: int) -> BaseCheck[Any]:
    _check_bounds(min_length, max_length)
    return PredicateCheck(
        lambda value: value is not None and min_length < len(value) < max_length,
        f"length_min_max_exclusive({min_length}, {max_length})",
    )


# -- internals ---------------------------------------------------------------


def _is_letter_or_digit(c: str) -> bool:
    return c.isalpha() or c.isdecimal()


def _compile(pattern: str | re.Pattern[str], flags: int) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, flags)


def _check_bounds(min_length: int, max_length: int) -> None:
    if min_length < 0:
        raise ConfigurationError("Parameter 'min_length' cannot be less than 0")
    if max_length < min_length:
        raise ConfigurationError("Parameter 'max_length' cannot be less than 'min_length'")
