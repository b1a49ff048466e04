"""HierarchicalValidator — pre / fields / post validation of object graphs.

A run walks three phases::

    PRE ──(failed and fields not forced)──────────────────────────► DONE
     │
     ▼
    FIELDS ──(failed and post-validation not forced)──────────────► DONE
     │
     ▼
    POST ─────────────────────────────────────────────────────────► DONE

Field validators may themselves be hierarchical validators, so arbitrarily
deep object graphs are validated by nesting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..ports.validation import IValidator
from ..primitives.exceptions import ConfigurationError
from .options import HierarchicalValidatorOptions
from .resolvers import AttributeFieldResolver
from .result import ValidationResult
from .validator import Validator

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.message import ValidationMessage
    from ..ports.validation import FieldAccessor, IFieldResolver

logger = logging.getLogger("layered_validation.hierarchical")

T = TypeVar("T")


class ValidationPhase(str, Enum):
    PRE = "pre"
    FIELDS = "fields"
    POST = "post"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class FieldValidation:
    """Validators attached to one named field, in evaluation order."""

    name: str
    validators: tuple[IValidator[Any], ...]
    accessor: FieldAccessor | None = None


class HierarchicalValidator(Generic[T]):
    """Validates an object and its named fields in three phases.

    1. **pre** — the pre-validator runs against the object itself. If it
       reports anything, the run ends there unless
       ``process_fields_if_pre_validator_fails`` is set.
    2. **fields** — fields are resolved and validated in the order they were
       configured. Within one field, validators run until the first one
       reports messages. With ``stop_on_first_invalid_field`` no further
       fields are visited once a field has failed.
    3. **post** — the post-validator runs only if nothing failed so far, or
       ``post_validate_if_field_validator_fails`` is set.

    Pre/post messages carry this validator's prefix; field messages carry
    ``prefix.field`` (or just ``field`` / just ``prefix``, see
    :class:`HierarchicalValidatorOptions`).

    Usage::

        validator = (
            HierarchicalValidator.builder()
            .with_prefix("order")
            .with_pre_checks(IS_REQUIRED, not_null())
            .add_field_checks("total", IS_NOT_IN_RANGE, in_range(1, 1000))
            .add_field_validator("customer", customer_validator)
            .build()
        )
        validator.validate(order).raise_if_not_empty()

    Resolution faults (unknown fields) and exceptions raised by checks
    propagate and abort the run; they are never folded into the result.
    """

    def __init__(
        self,
        *,
        fields: tuple[FieldValidation, ...] = (),
        pre_validator: IValidator[T] | None = None,
        post_validator: IValidator[T] | None = None,
        options: HierarchicalValidatorOptions | None = None,
        resolver: IFieldResolver | None = None,
    ) -> None:
        self._fields = fields
        self._pre_validator = pre_validator
        self._post_validator = post_validator
        self._options = options or HierarchicalValidatorOptions()
        self._resolver = resolver or AttributeFieldResolver()

    @classmethod
    def builder(cls) -> HierarchicalValidatorBuilder[Any]:
        return HierarchicalValidatorBuilder()

    # ── Introspection ────────────────────────────────────────────

    @property
    def options(self) -> HierarchicalValidatorOptions:
        return self._options

    @property
    def prefix(self) -> str | None:
        return self._options.prefix

    @property
    def fields(self) -> tuple[FieldValidation, ...]:
        return self._fields

    @property
    def pre_validator(self) -> IValidator[T] | None:
        return self._pre_validator

    @property
    def post_validator(self) -> IValidator[T] | None:
        return self._post_validator

    # ── Validation ───────────────────────────────────────────────

    def validate(self, obj: T) -> ValidationResult:
        result = ValidationResult()
        options = self._options

        self._merge(result, self.pre_validate(obj), options.prefix)
        if result.is_not_empty and not options.process_fields_if_pre_validator_fails:
            logger.debug(
                "%s phase failed with %d message(s), skipping %s and %s",
                ValidationPhase.PRE.value,
                result.size,
                ValidationPhase.FIELDS.value,
                ValidationPhase.POST.value,
            )
            return result

        self._validate_fields(obj, result)

        if result.is_empty or options.post_validate_if_field_validator_fails:
            self._merge(result, self.post_validate(obj), options.prefix)
        else:
            logger.debug(
                "Skipping %s phase after %d message(s)",
                ValidationPhase.POST.value,
                result.size,
            )

        logger.debug(
            "Validation of %s %s with %d message(s)",
            type(obj).__name__,
            ValidationPhase.DONE.value,
            result.size,
        )
        return result

    def pre_validate(self, obj: T) -> ValidationResult | None:
        """Run the pre-validator. Subclasses may override."""
        if self._pre_validator is not None:
            return self._pre_validator.validate(obj)
        return None

    def post_validate(self, obj: T) -> ValidationResult | None:
        """Run the post-validator. Subclasses may override."""
        if self._post_validator is not None:
            return self._post_validator.validate(obj)
        return None

    # -- internals -----------------------------------------------------------

    def _validate_fields(self, obj: T, result: ValidationResult) -> None:
        for field in self._fields:
            value = self._resolve(obj, field)
            field_prefix = self._field_prefix(field.name)
            for validator in field.validators:
                field_result = validator.validate(value)
                self._merge(result, field_result, field_prefix)
                if field_result.is_not_empty:
                    break

            if self._options.stop_on_first_invalid_field and result.is_not_empty:
                logger.debug(
                    "Field '%s' is invalid, stopping %s phase",
                    field.name,
                    ValidationPhase.FIELDS.value,
                )
                break

    def _resolve(self, obj: T, field: FieldValidation) -> Any:
        if field.accessor is None:
            return self._resolver.resolve(obj, field.name)
        if obj is None:
            return None
        return field.accessor(obj)

    def _field_prefix(self, field_name: str) -> str | None:
        prefix = self._options.prefix
        if not self._options.append_field_prefix:
            return prefix
        if prefix is None:
            return field_name
        return f"{prefix}.{field_name}"

    @staticmethod
    def _merge(
        result: ValidationResult,
        partial: ValidationResult | None,
        prefix: str | None,
    ) -> None:
        if prefix:
            result.add_with_prefix(prefix, partial)
        else:
            result.add(partial)

    def __repr__(self) -> str:
        return (
            f"HierarchicalValidator(prefix={self.prefix!r}, "
            f"fields={[f.name for f in self._fields]})"
        )


class HierarchicalValidatorBuilder(Generic[T]):
    """Fluent builder for :class:`HierarchicalValidator`.

    Example::

        validator = (
            HierarchicalValidatorBuilder()
            .with_prefix("bean")
            .with_pre_checks(IS_REQUIRED, not_null())
            .add_field_checks("id", IS_NOT_IN_RANGE.with_args("20", "100"), gte(20), lte(100))
            .add_field_checks("name", IS_NOT_ALPHA, alpha())
            .stop_on_first_invalid_field()
            .build()
        )

    Adding validators to a field that is already configured appends them to
    that field's list and keeps the field's original position.
    """

    def __init__(
        self,
        options: HierarchicalValidatorOptions | None = None,
        resolver: IFieldResolver | None = None,
    ) -> None:
        self._options = options or HierarchicalValidatorOptions()
        self._resolver = resolver
        self._pre_validator: IValidator[T] | None = None
        self._post_validator: IValidator[T] | None = None
        self._fields: dict[str, list[IValidator[Any]]] = {}
        self._accessors: dict[str, FieldAccessor] = {}

    # -- options -------------------------------------------------------------

    def with_prefix(self, prefix: str | None) -> HierarchicalValidatorBuilder[T]:
        self._options = replace(self._options, prefix=prefix)
        return self

    def process_fields_if_pre_validator_fails(
        self, enabled: bool = True
    ) -> HierarchicalValidatorBuilder[T]:
        self._options = replace(
            self._options, process_fields_if_pre_validator_fails=enabled
        )
        return self

    def post_validate_if_field_validator_fails(
        self, enabled: bool = True
    ) -> HierarchicalValidatorBuilder[T]:
        self._options = replace(
            self._options, post_validate_if_field_validator_fails=enabled
        )
        return self

    def stop_on_first_invalid_field(
        self, enabled: bool = True
    ) -> HierarchicalValidatorBuilder[T]:
        self._options = replace(self._options, stop_on_first_invalid_field=enabled)
        return self

    def without_field_prefix(self) -> HierarchicalValidatorBuilder[T]:
        self._options = replace(self._options, append_field_prefix=False)
        return self

    def with_field_resolver(
        self, resolver: IFieldResolver
    ) -> HierarchicalValidatorBuilder[T]:
        self._resolver = resolver
        return self

    # -- phases --------------------------------------------------------------

    def with_pre_validator(
        self, validator: IValidator[T]
    ) -> HierarchicalValidatorBuilder[T]:
        self._pre_validator = _require_validator(validator)
        return self

    def with_pre_checks(
        self, message: ValidationMessage, *checks: Callable[[T], bool]
    ) -> HierarchicalValidatorBuilder[T]:
        return self.with_pre_validator(Validator.of(message, *checks))

    def with_post_validator(
        self, validator: IValidator[T]
    ) -> HierarchicalValidatorBuilder[T]:
        self._post_validator = _require_validator(validator)
        return self

    def with_post_checks(
        self, message: ValidationMessage, *checks: Callable[[T], bool]
    ) -> HierarchicalValidatorBuilder[T]:
        return self.with_post_validator(Validator.of(message, *checks))

    def add_field_validator(
        self,
        field_name: str,
        *validators: IValidator[Any],
        accessor: FieldAccessor | None = None,
    ) -> HierarchicalValidatorBuilder[T]:
        """Attach *validators* to *field_name*.

        Args:
            field_name: Name of the field to read off the validated object.
            validators: Run in order until one reports messages.
            accessor: Optional function reading the field; replaces the
                field resolver for this field.
        """
        if not field_name:
            raise ConfigurationError("Field name must be a non-empty string")
        if not validators:
            msg = f"No validators given for field '{field_name}'"
            raise ConfigurationError(msg)
        self._fields.setdefault(field_name, []).extend(
            _require_validator(v) for v in validators
        )
        if accessor is not None:
            self._accessors[field_name] = accessor
        return self

    def add_field_checks(
        self,
        field_name: str,
        message: ValidationMessage,
        *checks: Callable[[Any], bool],
        accessor: FieldAccessor | None = None,
    ) -> HierarchicalValidatorBuilder[T]:
        """Attach a leaf validator reporting *message* for any of *checks*."""
        return self.add_field_validator(
            field_name, Validator.of(message, *checks), accessor=accessor
        )

    # -- build ---------------------------------------------------------------

    def build(self) -> HierarchicalValidator[T]:
        """Finalise and return an immutable :class:`HierarchicalValidator`.

        Raises:
            ConfigurationError: If neither a pre-validator, a post-validator
                nor any field validator was configured.
        """
        if (
            not self._fields
            and self._pre_validator is None
            and self._post_validator is None
        ):
            raise ConfigurationError("No validators added to hierarchical builder")

        fields = tuple(
            FieldValidation(name, tuple(validators), self._accessors.get(name))
            for name, validators in self._fields.items()
        )
        logger.debug(
            "Built hierarchical validator: fields=%s, options=%s",
            [f.name for f in fields],
            self._options,
        )
        return HierarchicalValidator(
            fields=fields,
            pre_validator=self._pre_validator,
            post_validator=self._post_validator,
            options=self._options,
            resolver=self._resolver,
        )


def _require_validator(validator: Any) -> Any:
    if not isinstance(validator, IValidator):
        msg = f"Expected an object with a validate() method, got {type(validator).__name__}"
        raise ConfigurationError(msg)
    return validator
