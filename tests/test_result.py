"""Tests for ValidationResult accumulation, prefixing and merging."""

from __future__ import annotations

import pytest

from layered_validation import (
    Severity,
    ValidationError,
    ValidationMessage,
    ValidationResult,
)

# -- Accumulation ------------------------------------------------------------


def test_empty_result() -> None:
    result = ValidationResult.empty()
    assert result.is_empty
    assert not result.is_not_empty
    assert result.is_valid
    assert result.size == 0
    assert result.messages == ()


def test_add_preserves_order_and_deduplicates(msg_a, msg_b, msg_c) -> None:
    result = ValidationResult()
    result.add(msg_b).add(msg_a).add(msg_b).add(msg_c)

    assert result.messages == (msg_b, msg_a, msg_c)
    assert result.size == 3


def test_add_accepts_iterables_results_and_none(msg_a, msg_b, msg_c) -> None:
    other = ValidationResult.of(msg_c)
    result = ValidationResult().add([msg_a, None], None, other, (msg_b,))
    assert result.messages == (msg_a, msg_c, msg_b)


def test_messages_snapshot_is_read_only(msg_a) -> None:
    result = ValidationResult.of(msg_a)
    snapshot = result.messages
    result.add(ValidationMessage(key="LATER"))
    assert snapshot == (msg_a,)


def test_contains_and_iteration(msg_a, msg_b) -> None:
    result = ValidationResult.of(msg_a, msg_b)
    assert msg_a in result
    assert ValidationMessage(key="Z") not in result
    assert list(result) == [msg_a, msg_b]
    assert len(result) == 2


# -- Prefixing ---------------------------------------------------------------


def test_add_with_prefix_rewrites_keys_only() -> None:
    source = ValidationMessage.of("KEY1", "x", severity=Severity.WARN)
    result = ValidationResult().add_with_prefix("customer", source)

    (msg,) = result.messages
    assert msg.key == "customer.KEY1"
    assert msg.severity is Severity.WARN
    assert msg.args == ("x",)


def test_add_with_prefix_of_empty_adds_nothing() -> None:
    result = ValidationResult().add_with_prefix("customer", ValidationResult())
    assert result.is_empty


def test_nested_prefixes_compose(msg_a) -> None:
    inner = ValidationResult().add_with_prefix("b", msg_a)
    nested = ValidationResult().add_with_prefix("a", inner)
    flat = ValidationResult().add_with_prefix("a.b", msg_a)
    assert nested == flat


def test_add_with_prefix_from_self_does_not_fail(msg_a) -> None:
    result = ValidationResult.of(msg_a)
    result.add_with_prefix("p", result)
    assert [m.key for m in result] == ["A", "p.A"]


def test_add_message_if_check_failed() -> None:
    message = ValidationMessage(key="IS_NEGATIVE")
    result = ValidationResult()

    result.add_message_if_check_failed(5, lambda v: v >= 0, message)
    assert result.is_empty

    result.add_message_if_check_failed(-5, lambda v: v >= 0, message, prefix="amount")
    assert [m.key for m in result] == ["amount.IS_NEGATIVE"]


def test_add_message_if_check_failed_propagates_check_errors() -> None:
    def broken(_: object) -> bool:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        ValidationResult().add_message_if_check_failed(1, broken, ValidationMessage(key="K"))


# -- Merging -----------------------------------------------------------------


def test_merge_returns_union_without_mutating(msg_a, msg_b, msg_c) -> None:
    left = ValidationResult.of(msg_a, msg_b)
    right = ValidationResult.of(msg_b, msg_c)

    merged = left.merge(right)

    assert merged.messages == (msg_a, msg_b, msg_c)
    assert left.messages == (msg_a, msg_b)
    assert right.messages == (msg_b, msg_c)


def test_merge_is_commutative_as_a_set(msg_a, msg_b, msg_c) -> None:
    left = ValidationResult.of(msg_a, msg_b)
    right = ValidationResult.of(msg_c, msg_a)
    assert set(left.merge(right)) == set(right.merge(left))


def test_merge_is_associative(msg_a, msg_b, msg_c) -> None:
    a, b, c = ValidationResult.of(msg_a), ValidationResult.of(msg_b), ValidationResult.of(msg_c)
    assert a.merge(b).merge(c) == a.merge(b.merge(c))


def test_merge_with_empty_is_identity(msg_a) -> None:
    result = ValidationResult.of(msg_a)
    assert result.merge(ValidationResult()) == result
    assert ValidationResult().merge(result) == result


# -- Filtering ---------------------------------------------------------------


def test_filters() -> None:
    err = ValidationMessage(key="order.id.IS_NULL")
    warn = ValidationMessage(key="order.name.IS_BLANK", severity=Severity.WARN)
    other = ValidationMessage(key="customer.IS_NULL")
    result = ValidationResult.of(err, warn, other)

    assert result.messages_by_severity(Severity.WARN) == (warn,)
    assert result.messages_by_severity(Severity.INFO) == ()
    assert result.messages_by_prefix("order.") == (err, warn)
    assert result.messages_by_filter(lambda m: m.key.endswith("IS_NULL")) == (err, other)


# -- Raising and serialisation -----------------------------------------------


def test_raise_if_not_empty_returns_self_when_valid() -> None:
    result = ValidationResult()
    assert result.raise_if_not_empty() is result


def test_raise_if_not_empty_carries_result(msg_a, msg_b) -> None:
    result = ValidationResult.of(msg_a, msg_b)
    with pytest.raises(ValidationError) as exc_info:
        result.raise_if_not_empty()

    assert exc_info.value.result is result
    assert "2 message(s)" in str(exc_info.value)


def test_to_exception_does_not_raise(msg_a) -> None:
    exc = ValidationResult.of(msg_a).to_exception()
    assert isinstance(exc, ValidationError)
    assert exc.result.messages == (msg_a,)


def test_to_dict(msg_a) -> None:
    assert ValidationResult().to_dict() == {"valid": True, "messages": []}
    assert ValidationResult.of(msg_a).to_dict() == {
        "valid": False,
        "messages": [{"key": "A", "severity": "ERROR", "args": None}],
    }


def test_truthiness_follows_validity(msg_a) -> None:
    assert ValidationResult()
    assert not ValidationResult.of(msg_a)


def test_str_lists_messages(msg_a) -> None:
    text = str(ValidationResult.of(msg_a))
    assert text.startswith("ValidationResult[")
    assert "key=A,severity=ERROR" in text


def test_add_message_if_check_failed_ignores_empty_prefix(msg_a) -> None:
    result = ValidationResult().add_message_if_check_failed(0, bool, msg_a, prefix="")
    assert [m.key for m in result] == ["A"]
