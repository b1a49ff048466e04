"""Shared fixtures for layered-validation tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from layered_validation import ValidationMessage

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def msg_a() -> ValidationMessage:
    return ValidationMessage(key="A")


@pytest.fixture
def msg_b() -> ValidationMessage:
    return ValidationMessage(key="B")


@pytest.fixture
def msg_c() -> ValidationMessage:
    return ValidationMessage(key="C")


@pytest.fixture
def clock():
    """Clock pinned to :data:`FIXED_NOW` for temporal checks."""
    return lambda: FIXED_NOW
