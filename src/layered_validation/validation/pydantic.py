"""PydanticValidator — leverages Pydantic model validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..domain.message import ValidationMessage
from .result import ValidationResult


class PydanticValidator:
    """Validates pydantic models (or plain mappings) through their schema.

    Each pydantic error becomes a message keyed ``<loc>.<error type>`` with the
    pydantic error text as its only argument, e.g. ``age.greater_than``.
    Models are re-validated from ``model_dump()``, so instances built with
    ``model_construct()`` are checked too. ``None`` and values that are neither
    models nor mappings for *model_type* produce an empty result; pair the
    validator with a null check when presence matters.
    """

    def __init__(
        self,
        model_type: type[BaseModel] | None = None,
        prefix: str | None = None,
    ) -> None:
        self._model_type = model_type
        self._prefix = prefix

    def validate(self, value: Any) -> ValidationResult:
        result = ValidationResult()
        if isinstance(value, BaseModel):
            model_type = self._model_type or type(value)
            data: Any = value.model_dump()
        elif isinstance(value, Mapping) and self._model_type is not None:
            model_type = self._model_type
            data = value
        else:
            return result

        try:
            model_type.model_validate(data)
        except PydanticValidationError as exc:
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                msg = ValidationMessage(
                    key=f"{loc}.{error['type']}",
                    args=(str(error.get("msg", "validation error")),),
                )
                if self._prefix is not None:
                    result.add_with_prefix(self._prefix, msg)
                else:
                    result.add(msg)
        return result
