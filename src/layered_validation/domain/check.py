"""Composable validation checks.

A check is any ``Callable[[T], bool]``. :class:`BaseCheck` subclasses add
logical composition on top::

    adult_name = not_blank() & length_min_max(2, 40)
    optional_code = is_null() | matches(r"[A-Z]{3}")
    not_admin = ~equal_to("admin")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T", contravariant=True)


class BaseCheck(ABC, Generic[T]):
    """Base class for checks with logic operator support."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def is_satisfied_by(self, value: T) -> bool: ...

    def __call__(self, value: T) -> bool:
        return self.is_satisfied_by(value)

    def __and__(self, other: Callable[[Any], bool]) -> AndCheck[T]:
        return AndCheck(self, other)

    def __or__(self, other: Callable[[Any], bool]) -> OrCheck[T]:
        return OrCheck(self, other)

    def __invert__(self) -> NotCheck[T]:
        return NotCheck(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class PredicateCheck(BaseCheck[T]):
    """Wraps a plain predicate function and gives it a readable name."""

    def __init__(self, predicate: Callable[[T], bool], name: str | None = None) -> None:
        self._predicate = predicate
        self._name = name or getattr(predicate, "__name__", "predicate")

    @property
    def name(self) -> str:
        return self._name

    def is_satisfied_by(self, value: T) -> bool:
        return bool(self._predicate(value))


class AndCheck(BaseCheck[T]):
    """Satisfied when every child check is satisfied (short-circuits)."""

    def __init__(self, *checks: Callable[[Any], bool]) -> None:
        self.checks = checks

    @property
    def name(self) -> str:
        return " and ".join(_name_of(c) for c in self.checks)

    def is_satisfied_by(self, value: T) -> bool:
        return all(check(value) for check in self.checks)


class OrCheck(BaseCheck[T]):
    """Satisfied when at least one child check is satisfied."""

    def __init__(self, *checks: Callable[[Any], bool]) -> None:
        self.checks = checks

    @property
    def name(self) -> str:
        return " or ".join(_name_of(c) for c in self.checks)

    def is_satisfied_by(self, value: T) -> bool:
        return any(check(value) for check in self.checks)


class NotCheck(BaseCheck[T]):
    def __init__(self, check: Callable[[Any], bool]) -> None:
        self.check = check

    @property
    def name(self) -> str:
        return f"not {_name_of(self.check)}"

    def is_satisfied_by(self, value: T) -> bool:
        return not self.check(value)


def as_check(predicate: Callable[[T], bool], name: str | None = None) -> BaseCheck[T]:
    """Return *predicate* as a :class:`BaseCheck`, wrapping it when needed."""
    if isinstance(predicate, BaseCheck):
        return predicate
    return PredicateCheck(predicate, name)


def _name_of(check: Callable[[Any], bool]) -> str:
    if isinstance(check, BaseCheck):
        return check.name
    return getattr(check, "__name__", repr(check))
