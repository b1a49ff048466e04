"""Domain primitives: messages, severities and composable checks."""

from __future__ import annotations

from .check import AndCheck, BaseCheck, NotCheck, OrCheck, PredicateCheck, as_check
from .message import Severity, ValidationMessage

__all__: list[str] = [
    "AndCheck",
    "BaseCheck",
    "NotCheck",
    "OrCheck",
    "PredicateCheck",
    "Severity",
    "ValidationMessage",
    "as_check",
]
