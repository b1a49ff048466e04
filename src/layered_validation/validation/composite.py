"""CompositeValidator — runs several validators, collects all messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.validation import IValidator

T = TypeVar("T")


class CompositeValidator(Generic[T]):
    """Runs a list of validators against the same value and merges their results.

    Unlike a hierarchical validator's field list, nothing short-circuits:
    every validator runs, which makes this the exhaustive-report option for a
    pre- or post-validation phase.

    Usage::

        validator = CompositeValidator([name_validator, price_validator])
        result = validator.validate(product)
    """

    def __init__(self, validators: Iterable[IValidator[T]] | None = None) -> None:
        self._validators: tuple[IValidator[T], ...] = tuple(validators or ())

    @property
    def validators(self) -> tuple[IValidator[T], ...]:
        return self._validators

    def with_validator(self, validator: IValidator[T]) -> CompositeValidator[T]:
        """Return a new composite with *validator* appended."""
        return CompositeValidator((*self._validators, validator))

    def validate(self, value: T) -> ValidationResult:
        combined = ValidationResult()
        for validator in self._validators:
            combined.add(validator.validate(value))
        return combined

    def __repr__(self) -> str:
        return f"CompositeValidator({len(self._validators)} validator(s))"
