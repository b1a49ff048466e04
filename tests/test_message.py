"""Tests for ValidationMessage value semantics and decoration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from layered_validation import Severity, ValidationMessage
from layered_validation.checks import messages

# -- Construction ------------------------------------------------------------


def test_defaults() -> None:
    msg = ValidationMessage(key="KEY1")
    assert msg.key == "KEY1"
    assert msg.severity is Severity.ERROR
    assert msg.args is None


def test_of_collects_positional_args() -> None:
    msg = ValidationMessage.of("KEY1", "a", "b", severity=Severity.WARN)
    assert msg.args == ("a", "b")
    assert msg.severity is Severity.WARN


def test_of_without_args_leaves_args_absent() -> None:
    assert ValidationMessage.of("KEY1").args is None


def test_empty_key_is_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        ValidationMessage(key="")


def test_message_is_immutable() -> None:
    msg = ValidationMessage(key="KEY1")
    with pytest.raises(PydanticValidationError):
        msg.key = "OTHER"  # type: ignore[misc]


# -- Value semantics ---------------------------------------------------------


def test_equality_and_hash_by_value() -> None:
    first = ValidationMessage.of("KEY1", "x")
    second = ValidationMessage.of("KEY1", "x")
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


@pytest.mark.parametrize(
    "other",
    [
        ValidationMessage.of("KEY2", "x"),
        ValidationMessage.of("KEY1", "y"),
        ValidationMessage.of("KEY1", "x", severity=Severity.INFO),
        ValidationMessage.of("KEY1"),
    ],
)
def test_any_differing_attribute_breaks_equality(other: ValidationMessage) -> None:
    assert ValidationMessage.of("KEY1", "x") != other


# -- Decoration --------------------------------------------------------------


def test_with_prefix_returns_new_message() -> None:
    original = ValidationMessage.of("KEY1", "a", severity=Severity.WARN)
    prefixed = original.with_prefix("order")

    assert prefixed.key == "order.KEY1"
    assert prefixed.severity is Severity.WARN
    assert prefixed.args == ("a",)
    assert original.key == "KEY1"


def test_with_args_replaces_args_and_keeps_key() -> None:
    msg = messages.IS_NOT_IN_RANGE.with_args("18", "50")
    assert msg.key == "IS_NOT_IN_RANGE"
    assert msg.args == ("18", "50")
    assert messages.IS_NOT_IN_RANGE.args is None


def test_with_prefix_and_args() -> None:
    msg = messages.IS_LTE.with_prefix_and_args("root.id", "10")
    assert msg.key == "root.id.IS_LTE"
    assert msg.args == ("10",)


def test_with_prefix_and_args_without_prefix() -> None:
    msg = messages.IS_LTE.with_prefix_and_args(None, "10")
    assert msg.key == "IS_LTE"


def test_with_severity() -> None:
    msg = messages.IS_EMPTY.with_severity(Severity.INFO)
    assert msg.severity is Severity.INFO
    assert msg.key == "IS_EMPTY"


def test_str_and_to_dict() -> None:
    msg = ValidationMessage.of("KEY1", "a", "b")
    assert str(msg) == "key=KEY1,severity=ERROR,args={a, b}"
    assert msg.to_dict() == {"key": "KEY1", "severity": "ERROR", "args": ["a", "b"]}


# -- Predefined --------------------------------------------------------------


def test_predefined_messages_are_plain_errors() -> None:
    assert messages.IS_NULL in messages.PREDEFINED_MESSAGES
    assert messages.IS_IN_THE_PAST in messages.PREDEFINED_MESSAGES
    for msg in messages.PREDEFINED_MESSAGES:
        assert msg.severity is Severity.ERROR
        assert msg.args is None
        assert msg.key.startswith("IS_")
