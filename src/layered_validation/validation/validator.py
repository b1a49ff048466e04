"""Validator — evaluates an ordered list of checks against a single value."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.exceptions import ConfigurationError
from .options import ValidatorOptions
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.message import ValidationMessage

logger = logging.getLogger("layered_validation.validator")

T = TypeVar("T")


class Validator(Generic[T]):
    """Binds checks, each with one message, to a value.

    Checks run in the order they were added. A failing check reports its
    message (prefixed when the validator has a prefix). With
    ``cancel_on_first_failure`` (the default) evaluation stops at the first
    failure; otherwise every check runs.

    Instances are immutable; configure them through :class:`ValidatorBuilder`
    or :meth:`of`::

        validator = Validator.of(IS_NOT_IN_RANGE.with_args("1", "10"), gte(1), lte(10))
        validator.validate(42).raise_if_not_empty()
    """

    __slots__ = ("_checks", "_options")

    def __init__(
        self,
        checks: tuple[tuple[Callable[[T], bool], ValidationMessage], ...],
        options: ValidatorOptions | None = None,
    ) -> None:
        self._checks = checks
        self._options = options or ValidatorOptions()

    @classmethod
    def builder(cls) -> ValidatorBuilder[Any]:
        return ValidatorBuilder()

    @classmethod
    def of(
        cls,
        message: ValidationMessage,
        *checks: Callable[[T], bool],
        prefix: str | None = None,
        cancel_on_first_failure: bool = True,
    ) -> Validator[T]:
        """Build a validator reporting *message* for any of *checks*."""
        return (
            ValidatorBuilder(
                ValidatorOptions(
                    cancel_on_first_failure=cancel_on_first_failure, prefix=prefix
                )
            )
            .add_checks(message, *checks)
            .build()
        )

    @property
    def checks(self) -> tuple[tuple[Callable[[T], bool], ValidationMessage], ...]:
        return self._checks

    @property
    def options(self) -> ValidatorOptions:
        return self._options

    @property
    def prefix(self) -> str | None:
        return self._options.prefix

    @property
    def cancel_on_first_failure(self) -> bool:
        return self._options.cancel_on_first_failure

    def validate(self, value: T) -> ValidationResult:
        result = ValidationResult()
        prefix = self._options.prefix
        for index, (check, message) in enumerate(self._checks):
            result.add_message_if_check_failed(value, check, message, prefix)
            if self._options.cancel_on_first_failure and result.is_not_empty:
                logger.debug(
                    "Cancelled after failed check %d/%d (%s)",
                    index + 1,
                    len(self._checks),
                    message.key,
                )
                break
        return result

    def __repr__(self) -> str:
        return (
            f"Validator(checks={len(self._checks)}, prefix={self.prefix!r}, "
            f"cancel_on_first_failure={self.cancel_on_first_failure})"
        )


class ValidatorBuilder(Generic[T]):
    """Fluent builder accumulating checks for a :class:`Validator`.

    Adding a check that is already configured replaces its message but keeps
    its original position. The builder is not thread-safe; :meth:`build`
    snapshots the configuration, so later changes never leak into validators
    that were already built.
    """

    def __init__(self, options: ValidatorOptions | None = None) -> None:
        self._options = options or ValidatorOptions()
        self._checks: dict[Callable[[T], bool], ValidationMessage] = {}

    def add_checks(
        self, message: ValidationMessage, *checks: Callable[[T], bool]
    ) -> ValidatorBuilder[T]:
        """Associate *message* with every check in *checks*."""
        for check in checks:
            if not callable(check):
                msg = f"Validation check must be callable, got {type(check).__name__}"
                raise ConfigurationError(msg)
            self._checks[check] = message
        return self

    def add_check(
        self, message: ValidationMessage, check: Callable[[T], bool]
    ) -> ValidatorBuilder[T]:
        return self.add_checks(message, check)

    def with_prefix(self, prefix: str | None) -> ValidatorBuilder[T]:
        self._options = replace(self._options, prefix=prefix)
        return self

    def cancel_on_first_failure(self, enabled: bool = True) -> ValidatorBuilder[T]:
        self._options = replace(self._options, cancel_on_first_failure=enabled)
        return self

    def build(self) -> Validator[T]:
        """Finalise and return an immutable :class:`Validator`.

        Raises:
            ConfigurationError: If no checks were added.
        """
        if not self._checks:
            raise ConfigurationError("No checks added to validator builder")
        logger.debug(
            "Built validator with %d check(s), options=%s",
            len(self._checks),
            self._options,
        )
        return Validator(tuple(self._checks.items()), self._options)
