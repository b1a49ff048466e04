"""Tests for CompositeValidator."""

from __future__ import annotations

from layered_validation import (
    CompositeValidator,
    HierarchicalValidator,
    IValidator,
    ValidationMessage,
    Validator,
)
from layered_validation.checks import gte, lte, not_null


def test_runs_every_validator_and_merges() -> None:
    low = ValidationMessage(key="TOO_LOW")
    high = ValidationMessage(key="TOO_HIGH")
    composite = CompositeValidator([Validator.of(low, gte(10)), Validator.of(high, lte(5))])

    assert [m.key for m in composite.validate(7)] == ["TOO_LOW", "TOO_HIGH"]


def test_duplicate_messages_are_merged() -> None:
    required = ValidationMessage(key="IS_REQUIRED")
    composite = CompositeValidator([Validator.of(required, not_null())] * 2)
    assert composite.validate(None).size == 1


def test_empty_composite_accepts_everything() -> None:
    assert CompositeValidator().validate(object()).is_empty


def test_with_validator_returns_new_instance() -> None:
    base = CompositeValidator()
    extended = base.with_validator(Validator.of(ValidationMessage(key="K"), not_null()))

    assert base.validators == ()
    assert len(extended.validators) == 1
    assert extended.validate(None).is_not_empty


def test_composite_can_drive_a_post_phase() -> None:
    composite = CompositeValidator(
        [
            Validator.of(ValidationMessage(key="A"), lambda d: d["a"] > 0),
            Validator.of(ValidationMessage(key="B"), lambda d: d["b"] > 0),
        ]
    )
    validator = (
        HierarchicalValidator.builder()
        .with_prefix("totals")
        .with_post_validator(composite)
        .build()
    )

    assert isinstance(composite, IValidator)
    assert [m.key for m in validator.validate({"a": 0, "b": 0})] == ["totals.A", "totals.B"]
