"""Ports consumed by the validation core."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult

T = TypeVar("T", contravariant=True)

#: A pure predicate; ``False`` means the associated message is reported.
ValidationCheck = Callable[[T], bool]

#: Reads one field off an object, e.g. ``lambda order: order.total``.
FieldAccessor = Callable[[Any], Any]


@runtime_checkable
class IValidator(Protocol[T]):
    """Protocol for validators.

    Leaf validators, hierarchical validators and composites all satisfy it,
    so any of them can be nested inside another.
    """

    def validate(self, value: T) -> ValidationResult:
        """Validate *value* and return the collected messages.

        Validation failures are returned as data; only configuration faults
        raise.
        """
        ...


@runtime_checkable
class IFieldResolver(Protocol):
    """Reads a named field off an object for the hierarchical validator."""

    def resolve(self, obj: Any, field_name: str) -> Any:
        """Return the value of *field_name* on *obj*.

        Must return ``None`` when *obj* is ``None`` and raise
        :class:`~layered_validation.primitives.exceptions.FieldResolutionError`
        when the field is not declared anywhere on the object's type hierarchy.
        """
        ...
