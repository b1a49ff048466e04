"""
Predefined check factories.

Every factory returns a fresh :class:`~layered_validation.domain.check.BaseCheck`
that can be combined with ``&``, ``|`` and ``~``.

Usage::

    from layered_validation.checks import gte, lte, not_null

    Validator.of(IS_NOT_IN_RANGE.with_args("20", "100"), gte(20), lte(100))
"""

from __future__ import annotations

from . import messages, patterns
from .boolean import is_false, is_false_or_null, is_true, is_true_or_null
from .comparison import (
    equal_to,
    gt,
    gte,
    in_range,
    in_range_exclusive,
    in_range_inclusive,
    lt,
    lte,
    not_equal_to,
    one_of,
)
from .null import is_null, not_null, not_null_or_empty
from .string import (
    alpha,
    alpha_space,
    alphanumeric,
    alphanumeric_space,
    ascii_printable,
    blank,
    empty,
    length_min_max,
    length_min_max_exclusive,
    length_min_max_inclusive,
    matches,
    matches_or_null,
    not_blank,
    not_empty,
    numeric,
    numeric_space,
    whitespace,
)
from .temporal import (
    after,
    after_or_null,
    after_or_same,
    after_or_same_or_null,
    before,
    before_or_null,
    before_or_same,
    before_or_same_or_null,
    in_the_future,
    in_the_future_or_null,
    in_the_past,
    in_the_past_or_null,
    same_day,
    same_day_or_null,
)

__all__ = [
    "messages",
    "patterns",
    # Null / empty
    "is_null",
    "not_null",
    "not_null_or_empty",
    # Comparison
    "equal_to",
    "not_equal_to",
    "one_of",
    "in_range",
    "in_range_inclusive",
    "in_range_exclusive",
    "lt",
    "lte",
    "gt",
    "gte",
    # String
    "alpha",
    "alpha_space",
    "alphanumeric",
    "alphanumeric_space",
    "ascii_printable",
    "blank",
    "empty",
    "length_min_max",
    "length_min_max_exclusive",
    "length_min_max_inclusive",
    "matches",
    "matches_or_null",
    "not_blank",
    "not_empty",
    "numeric",
    "numeric_space",
    "whitespace",
    # Temporal
    "after",
    "after_or_null",
    "after_or_same",
    "after_or_same_or_null",
    "before",
    "before_or_null",
    "before_or_same",
    "before_or_same_or_null",
    "in_the_future",
    "in_the_future_or_null",
    "in_the_past",
    "in_the_past_or_null",
    "same_day",
    "same_day_or_null",
    # Boolean
    "is_false",
    "is_false_or_null",
    "is_true",
    "is_true_or_null",
]
