"""Predefined validation messages.

Every message has ``ERROR`` severity and no args. Decorate them per use::

    IS_NOT_IN_RANGE.with_args("18", "50")
    IS_REQUIRED.with_prefix("customer")
"""

from __future__ import annotations

from ..domain.message import ValidationMessage

IS_NULL = ValidationMessage(key="IS_NULL")
IS_NOT_NULL = ValidationMessage(key="IS_NOT_NULL")
IS_VALID = ValidationMessage(key="IS_VALID")
IS_NOT_VALID = ValidationMessage(key="IS_NOT_VALID")
IS_REQUIRED = ValidationMessage(key="IS_REQUIRED")
IS_NOT_REQUIRED = ValidationMessage(key="IS_NOT_REQUIRED")
IS_EMPTY = ValidationMessage(key="IS_EMPTY")
IS_NOT_EMPTY = ValidationMessage(key="IS_NOT_EMPTY")
IS_LT = ValidationMessage(key="IS_LT")
IS_LTE = ValidationMessage(key="IS_LTE")
IS_GT = ValidationMessage(key="IS_GT")
IS_GTE = ValidationMessage(key="IS_GTE")
IS_EQ = ValidationMessage(key="IS_EQ")
IS_NEQ = ValidationMessage(key="IS_NEQ")
IS_IN_RANGE = ValidationMessage(key="IS_IN_RANGE")
IS_NOT_IN_RANGE = ValidationMessage(key="IS_NOT_IN_RANGE")
IS_AFTER = ValidationMessage(key="IS_AFTER")
IS_NOT_AFTER = ValidationMessage(key="IS_NOT_AFTER")
IS_BEFORE = ValidationMessage(key="IS_BEFORE")
IS_NOT_BEFORE = ValidationMessage(key="IS_NOT_BEFORE")
IS_IN = ValidationMessage(key="IS_IN")
IS_NOT_IN = ValidationMessage(key="IS_NOT_IN")
IS_TOO_LOW = ValidationMessage(key="IS_TOO_LOW")
IS_TOO_HIGH = ValidationMessage(key="IS_TOO_HIGH")
IS_NOT_POSITIVE = ValidationMessage(key="IS_NOT_POSITIVE")
IS_NOT_POSITIVE_OR_ZERO = ValidationMessage(key="IS_NOT_POSITIVE_OR_ZERO")
IS_NOT_NEGATIVE = ValidationMessage(key="IS_NOT_NEGATIVE")
IS_NOT_NEGATIVE_OR_ZERO = ValidationMessage(key="IS_NOT_NEGATIVE_OR_ZERO")
IS_POSITIVE = ValidationMessage(key="IS_POSITIVE")
IS_POSITIVE_OR_ZERO = ValidationMessage(key="IS_POSITIVE_OR_ZERO")
IS_NEGATIVE = ValidationMessage(key="IS_NEGATIVE")
IS_NEGATIVE_OR_ZERO = ValidationMessage(key="IS_NEGATIVE_OR_ZERO")
IS_THE_SAME = ValidationMessage(key="IS_THE_SAME")
IS_NOT_THE_SAME = ValidationMessage(key="IS_NOT_THE_SAME")
IS_ALPHA = ValidationMessage(key="IS_ALPHA")
IS_NOT_ALPHA = ValidationMessage(key="IS_NOT_ALPHA")
IS_ALPHANUMERIC = ValidationMessage(key="IS_ALPHANUMERIC")
IS_NOT_ALPHANUMERIC = ValidationMessage(key="IS_NOT_ALPHANUMERIC")
IS_NUMERIC = ValidationMessage(key="IS_NUMERIC")
IS_NOT_NUMERIC = ValidationMessage(key="IS_NOT_NUMERIC")
IS_ASCII = ValidationMessage(key="IS_ASCII")
IS_NOT_ASCII = ValidationMessage(key="IS_NOT_ASCII")
IS_MATCHES = ValidationMessage(key="IS_MATCHES")
IS_NOT_MATCHES = ValidationMessage(key="IS_NOT_MATCHES")
IS_IN_THE_FUTURE = ValidationMessage(key="IS_IN_THE_FUTURE")
IS_IN_THE_PAST = ValidationMessage(key="IS_IN_THE_PAST")

PREDEFINED_MESSAGES: tuple[ValidationMessage, ...] = tuple(
    value for name, value in dict(globals()).items() if name.startswith("IS_")
)
