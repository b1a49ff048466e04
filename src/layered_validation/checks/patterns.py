"""Predefined regular expressions for :func:`~layered_validation.checks.string.matches`.

All factories return compiled patterns meant for full matching::

    Validator.of(IS_NOT_VALID, matches(alnum_min_max(1, 10)))

"Alphanumeric" means ASCII letters and digits; European variants add the
accented letters selected through :class:`SpecialChars`.
"""

from __future__ import annotations

import re
from enum import IntFlag

from ..primitives.exceptions import ConfigurationError


class SpecialChars(IntFlag):
    GERMAN = 1 << 1
    FRENCH = 1 << 2
    SPANISH = 1 << 3
    ITALIAN = 1 << 4
    ALL = GERMAN | FRENCH | SPANISH | ITALIAN


_SPECIAL_CHARACTERS: dict[SpecialChars, str] = {
    SpecialChars.GERMAN: "ÄäÖöÜüß",
    SpecialChars.FRENCH: (
        "ÀàÂâÆæÇçÈèÉé"
        "ÊêËëÎîÏïÔôŒœ"
        "ÙùÛûŸÿ»«"
    ),
    SpecialChars.SPANISH: (
        "ÁáçÉéÍíÑñÓó"
        "Úúüªº¡¿"
    ),
    SpecialChars.ITALIAN: (
        "ÀàÈèÉéÌìÍíÏï"
        "ÒòÓóÙùÚú"
    ),
}

_ALNUM = "A-Za-z0-9"
_BLANK = " \t"
_DIGIT = "0-9"
_PHONE = r"0-9 +()/\-"

_EMAIL = re.compile(
    r"^[_A-Za-z0-9-]+(\.[_A-Za-z0-9-]+)*@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*"
    r"((\.[A-Za-z]{2,}){1}$)",
    re.IGNORECASE,
)


def email() -> re.Pattern[str]:
    return _EMAIL


def phone() -> re.Pattern[str]:
    """Digits, blanks, ``+``, parentheses, ``/`` and ``-``."""
    return re.compile(f"[{_PHONE}]+")


def phone_min_max(min_length: int, max_length: int) -> re.Pattern[str]:
    return re.compile(f"[{_PHONE}]{_quantifier(min_length, max_length)}")


def alnum() -> re.Pattern[str]:
    return re.compile(f"[{_ALNUM}]+")


def alnum_min_max(min_length: int, max_length: int) -> re.Pattern[str]:
    return re.compile(f"[{_ALNUM}]{_quantifier(min_length, max_length)}")


def alnum_with_blank() -> re.Pattern[str]:
    return re.compile(f"[{_ALNUM}{_BLANK}]+")


def alnum_with_blank_min_max(min_length: int, max_length: int) -> re.Pattern[str]:
    return re.compile(f"[{_ALNUM}{_BLANK}]{_quantifier(min_length, max_length)}")


def numeric() -> re.Pattern[str]:
    return re.compile(f"[{_DIGIT}]+")


def numeric_min_max(min_length: int, max_length: int) -> re.Pattern[str]:
    return re.compile(f"[{_DIGIT}]{_quantifier(min_length, max_length)}")


def any_min_max(min_length: int, max_length: int) -> re.Pattern[str]:
    """Any characters, line breaks included."""
    return re.compile(f".{_quantifier(min_length, max_length)}", re.DOTALL)


def alnum_european(flags: SpecialChars) -> re.Pattern[str]:
    return re.compile(f"[{_ALNUM}{_special_chars(flags)}]+")


def alnum_european_min_max(
    flags: SpecialChars, min_length: int, max_length: int
) -> re.Pattern[str]:
    return re.compile(
        f"[{_ALNUM}{_special_chars(flags)}]{_quantifier(min_length, max_length)}"
    )


def alnum_european_with_blank(flags: SpecialChars) -> re.Pattern[str]:
    return re.compile(f"[{_ALNUM}{_BLANK}{_special_chars(flags)}]+")


def alnum_european_with_blank_min_max(
    flags: SpecialChars, min_length: int, max_length: int
) -> re.Pattern[str]:
    return re.compile(
        f"[{_ALNUM}{_BLANK}{_special_chars(flags)}]"
        f"{_quantifier(min_length, max_length)}"
    )


# -- internals ---------------------------------------------------------------


def _special_chars(flags: SpecialChars) -> str:
    return "".join(
        re.escape(chars)
        for flag, chars in _SPECIAL_CHARACTERS.items()
        if flags & flag
    )


def _quantifier(min_length: int, max_length: int) -> str:
    if min_length < 0:
        raise ConfigurationError("Parameter 'min_length' cannot be less than 0")
    if max_length < min_length:
        raise ConfigurationError("Parameter 'max_length' cannot be less than 'min_length'")
    return f"{{{min_length},{max_length}}}"
