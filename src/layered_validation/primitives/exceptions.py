"""Exception hierarchy for layered-validation.

Two channels exist: expected data-level failures travel as messages inside a
:class:`~layered_validation.validation.result.ValidationResult` and only become
:class:`ValidationError` on explicit request, while everything else below is a
fatal fault that aborts the running ``validate`` call.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


class LayeredValidationError(Exception):
    """Root exception for the entire layered-validation toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(LayeredValidationError):
    """Raised when a non-empty validation result is turned into an error.

    Carries the complete result so every failure can be reported at once.
    """

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        keys = ", ".join(msg.key for msg in result)
        super().__init__(f"Validation failed with {result.size} message(s): {keys}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            **self.result.to_dict(),
        }


class FieldResolutionError(LayeredValidationError, AttributeError):
    """A configured field does not exist on the validated object's type hierarchy.

    This is a configuration bug, not a data-quality issue. Close matches among
    the fields that do exist are offered as suggestions::

        Cannot resolve field 'nme' on 'Customer'.
        Did you mean one of these?
          • name

        Available fields: age, id, name
    """

    def __init__(
        self,
        field: str,
        type_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.field = field
        self.type_name = type_name
        self.available_fields = sorted(available_fields)
        self.suggestions = get_close_matches(
            field, self.available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"Cannot resolve field '{self.field}' on '{self.type_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        preview = ", ".join(self.available_fields[:15])
        if len(self.available_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview or '<none>'}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_RESOLVED",
            "field": self.field,
            "type": self.type_name,
            "suggestions": self.suggestions,
            "available_fields": self.available_fields,
        }


class ConfigurationError(LayeredValidationError, ValueError):
    """Raised when a validator or pattern is configured inconsistently."""
