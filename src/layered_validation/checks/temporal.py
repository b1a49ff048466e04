"""Temporal checks over ``datetime`` and ``date`` values.

"Now" is read when the check runs, not when it is created, so a check built
once at import time stays correct. Pass ``clock`` to pin the current time
(tests, batch jobs replaying a point in time).

Mixed ``datetime`` / ``date`` comparisons are done on calendar dates. Naive and
aware datetimes cannot be compared; keep both sides consistent.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from ..domain.check import BaseCheck, PredicateCheck

Clock = Callable[[], datetime]


def in_the_future(clock: Clock | None = None) -> BaseCheck[date | None]:
    return _relative_to_now("in_the_future", after_now=True, null_allowed=False, clock=clock)


def in_the_future_or_null(clock: Clock | None = None) -> BaseCheck[date | None]:
    return _relative_to_now(
        "in_the_future_or_null", after_now=True, null_allowed=True, clock=clock
    )


def in_the_past(clock: Clock | None = None) -> BaseCheck[date | None]:
    return _relative_to_now("in_the_past", after_now=False, null_allowed=False, clock=clock)


def in_the_past_or_null(clock: Clock | None = None) -> BaseCheck[date | None]:
    return _relative_to_now(
        "in_the_past_or_null", after_now=False, null_allowed=True, clock=clock
    )


def before(threshold: date) -> BaseCheck[date | None]:
    return _before(threshold, same_allowed=False, null_allowed=False, name="before")


def before_or_null(threshold: date) -> BaseCheck[date | None]:
    return _before(threshold, same_allowed=False, null_allowed=True, name="before_or_null")


def before_or_same(threshold: date) -> BaseCheck[date | None]:
    return _before(threshold, same_allowed=True, null_allowed=False, name="before_or_same")


def before_or_same_or_null(threshold: date) -> BaseCheck[date | None]:
    return _before(
        threshold, same_allowed=True, null_allowed=True, name="before_or_same_or_null"
    )


def after(threshold: date) -> BaseCheck[date | None]:
    return _after(threshold, same_allowed=False, null_allowed=False, name="after")


def after_or_null(threshold: date) -> BaseCheck[date | None]:
    return _after(threshold, same_allowed=False, null_allowed=True, name="after_or_null")


def after_or_same(threshold: date) -> BaseCheck[date | None]:
    return _after(threshold, same_allowed=True, null_allowed=False, name="after_or_same")


def after_or_same_or_null(threshold: date) -> BaseCheck[date | None]:
    return _after(
        threshold, same_allowed=True, null_allowed=True, name="after_or_same_or_null"
    )


def same_day(day: date) -> BaseCheck[date | None]:
    """True when the value falls on the same calendar day as *day*."""
    return PredicateCheck(
        lambda value: value is not None and _as_date(value) == _as_date(day),
        "same_day",
    )


def same_day_or_null(day: date) -> BaseCheck[date | None]:
    return PredicateCheck(
        lambda value: value is None or _as_date(value) == _as_date(day),
        "same_day_or_null",
    )


# -- internals ---------------------------------------------------------------


def _before(
    threshold: date, *, same_allowed: bool, null_allowed: bool, name: str
) -> BaseCheck[date | None]:
    def check(value: date | None) -> bool:
        if value is None:
            return null_allowed
        left, right = _comparable(value, threshold)
        return left < right or (same_allowed and left == right)

    return PredicateCheck(check, name)


def _after(
    threshold: date, *, same_allowed: bool, null_allowed: bool, name: str
) -> BaseCheck[date | None]:
    def check(value: date | None) -> bool:
        if value is None:
            return null_allowed
        left, right = _comparable(value, threshold)
        return left > right or (same_allowed and left == right)

    return PredicateCheck(check, name)


def _relative_to_now(
    name: str, *, after_now: bool, null_allowed: bool, clock: Clock | None
) -> BaseCheck[date | None]:
    def check(value: date | None) -> bool:
        if value is None:
            return null_allowed
        left, right = _comparable(value, _now_for(value, clock))
        return left > right if after_now else left < right

    return PredicateCheck(check, name)


def _now_for(value: date, clock: Clock | None) -> date:
    if clock is not None:
        return clock()
    if isinstance(value, datetime):
        return datetime.now(value.tzinfo)
    return date.today()


def _comparable(value: date, other: date) -> tuple[Any, Any]:
    if isinstance(value, datetime) and isinstance(other, datetime):
        return value, other
    return _as_date(value), _as_date(other)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value
