"""Null / emptiness checks: not_null, is_null, not_null_or_empty."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from ..domain.check import BaseCheck, PredicateCheck


def not_null() -> BaseCheck[Any]:
    return PredicateCheck(lambda value: value is not None, "not_null")


def is_null() -> BaseCheck[Any]:
    return PredicateCheck(lambda value: value is None, "is_null")


def not_null_or_empty() -> BaseCheck[Sized | None]:
    """True for collections (or strings) that are present and hold something."""
    return PredicateCheck(
        lambda value: value is not None and len(value) > 0, "not_null_or_empty"
    )
