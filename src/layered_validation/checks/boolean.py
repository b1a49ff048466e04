"""Boolean checks: is_true, is_false and their null-tolerant variants."""

from __future__ import annotations

from ..domain.check import BaseCheck, PredicateCheck


def is_true() -> BaseCheck[bool | None]:
    return PredicateCheck(lambda value: value is not None and bool(value), "is_true")


def is_true_or_null() -> BaseCheck[bool | None]:
    return PredicateCheck(lambda value: value is None or bool(value), "is_true_or_null")


def is_false() -> BaseCheck[bool | None]:
    return PredicateCheck(lambda value: value is not None and not value, "is_false")


def is_false_or_null() -> BaseCheck[bool | None]:
    return PredicateCheck(lambda value: value is None or not value, "is_false_or_null")
