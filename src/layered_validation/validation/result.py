"""ValidationResult — ordered, de-duplicated collection of validation messages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, Union

from ..domain.message import Severity, ValidationMessage
from ..primitives.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

MessageSource = Union[
    ValidationMessage, "ValidationResult", Iterable[ValidationMessage], None
]


class ValidationResult:
    """Collects the messages produced by one validation run.

    Messages keep their first-seen order and are de-duplicated by value
    (key, severity and args), so merging two results yields their union.

    Usage::

        result = ValidationResult.empty()
        result.add(IS_REQUIRED)
        result.add_with_prefix("customer", other_result)
        result.raise_if_not_empty()

    Truthiness follows :attr:`is_valid`: an empty result is truthy.
    """

    __slots__ = ("_messages",)

    def __init__(self, *items: MessageSource) -> None:
        # dict keys act as an insertion-ordered set
        self._messages: dict[ValidationMessage, None] = {}
        self.add(*items)

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def empty(cls) -> ValidationResult:
        return cls()

    @classmethod
    def of(cls, *items: MessageSource) -> ValidationResult:
        return cls(*items)

    # ── Adding ───────────────────────────────────────────────────

    def add(self, *items: MessageSource) -> ValidationResult:
        """Add messages, message iterables or other results; ``None`` is ignored."""
        for msg in _flatten(items):
            self._messages.setdefault(msg, None)
        return self

    def add_with_prefix(self, prefix: str, *items: MessageSource) -> ValidationResult:
        """Add messages after rewriting every key to ``prefix + "." + key``.

        Severity and args are carried through unchanged. Nothing is added (and
        no prefix is attached) when *items* hold no messages.
        """
        for msg in _flatten(items):
            self._messages.setdefault(msg.with_prefix(prefix), None)
        return self

    def add_message_if_check_failed(
        self,
        value: T,
        check: Callable[[T], bool],
        message: ValidationMessage,
        prefix: str | None = None,
    ) -> ValidationResult:
        """Evaluate *check* against *value* and add *message* when it fails.

        Exceptions raised by *check* propagate; they are faults, not failures.
        """
        if not check(value):
            if prefix:
                self.add_with_prefix(prefix, message)
            else:
                self.add(message)
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding the union of both, this one's order first."""
        return ValidationResult(self, other)

    # ── Queries ──────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return not self._messages

    @property
    def is_not_empty(self) -> bool:
        return bool(self._messages)

    @property
    def is_valid(self) -> bool:
        return self.is_empty

    @property
    def size(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> tuple[ValidationMessage, ...]:
        """Read-only snapshot of the messages in insertion order."""
        return tuple(self._messages)

    def messages_by_severity(
        self, severity: Severity
    ) -> tuple[ValidationMessage, ...]:
        return self.messages_by_filter(lambda msg: msg.severity == severity)

    def messages_by_prefix(self, prefix: str) -> tuple[ValidationMessage, ...]:
        """Messages whose key starts with *prefix* (plain string prefix match)."""
        return self.messages_by_filter(lambda msg: msg.key.startswith(prefix))

    def messages_by_filter(
        self, accept: Callable[[ValidationMessage], bool]
    ) -> tuple[ValidationMessage, ...]:
        return tuple(msg for msg in self._messages if accept(msg))

    # ── Raising ──────────────────────────────────────────────────

    def to_exception(self) -> ValidationError:
        """Wrap this result in a :class:`ValidationError` without raising it."""
        return ValidationError(self)

    def raise_if_not_empty(self) -> ValidationResult:
        """Return ``self`` when empty, otherwise raise :class:`ValidationError`."""
        if self.is_not_empty:
            raise self.to_exception()
        return self

    # ── Serialisation ────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "messages": [msg.to_dict() for msg in self._messages],
        }

    # ── Dunder protocol ──────────────────────────────────────────

    def __iter__(self) -> Iterator[ValidationMessage]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, item: object) -> bool:
        return item in self._messages

    def __bool__(self) -> bool:
        return self.is_valid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return list(self._messages) == list(other._messages)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = [f"{type(self).__name__}["]
        lines.extend(f"\t{msg}" for msg in self._messages)
        lines.append("]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ValidationResult({', '.join(msg.key for msg in self._messages)})"


def _flatten(items: Iterable[MessageSource]) -> Iterator[ValidationMessage]:
    for item in items:
        if item is None:
            continue
        # checked first: pydantic models are themselves iterable
        if isinstance(item, ValidationMessage):
            yield item
        elif isinstance(item, ValidationResult):
            yield from tuple(item._messages)
        else:
            for msg in item:
                if msg is not None:
                    yield msg
