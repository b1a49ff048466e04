"""ValidationMessage — immutable failure descriptor."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """How serious a validation message is."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"


class ValidationMessage(BaseModel):
    """Describes a potential validation failure.

    Messages are value objects: two messages with the same key, severity and
    args are equal and collapse into one entry inside a
    :class:`~layered_validation.validation.result.ValidationResult`.
    Decoration never mutates; it returns a new message.

    Usage::

        IS_NOT_IN_RANGE = ValidationMessage.of("IS_NOT_IN_RANGE")
        msg = IS_NOT_IN_RANGE.with_prefix_and_args("order.total", "1", "10")
        # msg.key == "order.total.IS_NOT_IN_RANGE", msg.args == ("1", "10")
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    severity: Severity = Severity.ERROR
    args: tuple[str, ...] | None = None

    @classmethod
    def of(
        cls,
        key: str,
        *args: str,
        severity: Severity = Severity.ERROR,
    ) -> ValidationMessage:
        """Positional shortcut: ``ValidationMessage.of("KEY", "arg1", "arg2")``."""
        return cls(key=key, severity=severity, args=args or None)

    # ── Decoration ───────────────────────────────────────────────

    def with_prefix(self, prefix: str) -> ValidationMessage:
        """Return a copy whose key is ``prefix + "." + key``."""
        return ValidationMessage(
            key=f"{prefix}.{self.key}", severity=self.severity, args=self.args
        )

    def with_args(self, *args: str) -> ValidationMessage:
        """Return a copy carrying *args* instead of the current arguments."""
        return self.with_prefix_and_args(None, *args)

    def with_prefix_and_args(
        self, prefix: str | None, *args: str
    ) -> ValidationMessage:
        """Return a copy with an optional key prefix and replaced arguments."""
        key = f"{prefix}.{self.key}" if prefix is not None else self.key
        return ValidationMessage(key=key, severity=self.severity, args=args or None)

    def with_severity(self, severity: Severity) -> ValidationMessage:
        return ValidationMessage(key=self.key, severity=severity, args=self.args)

    def to_dict(self) -> dict[str, object]:
        return {
            "key": self.key,
            "severity": self.severity.value,
            "args": list(self.args) if self.args is not None else None,
        }

    def __str__(self) -> str:
        args = ", ".join(self.args) if self.args else ""
        return f"key={self.key},severity={self.severity.value},args={{{args}}}"
