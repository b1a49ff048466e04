"""Configuration objects for validators.

Options are frozen so a built validator can be shared between threads; the
builders derive new instances with :func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidatorOptions:
    """Configuration for a leaf :class:`~layered_validation.validation.validator.Validator`.

    Attributes:
        cancel_on_first_failure: Stop evaluating checks as soon as one fails.
        prefix: Prepended (``prefix + "."``) to every reported message key.
    """

    cancel_on_first_failure: bool = True
    prefix: str | None = None

    def __post_init__(self) -> None:
        _normalise_prefix(self)


@dataclass(frozen=True, slots=True)
class HierarchicalValidatorOptions:
    """Configuration for a :class:`~layered_validation.validation.hierarchical.HierarchicalValidator`.

    Attributes:
        process_fields_if_pre_validator_fails: Run the field phase even when
            the pre-validator reported messages.
        post_validate_if_field_validator_fails: Run the post-validator even
            when earlier phases reported messages.
        append_field_prefix: Prefix field messages with the field name.
        stop_on_first_invalid_field: Skip the remaining fields once one field
            (after running its whole validator list) reported messages.
        prefix: Prepended to every message this validator reports.
    """

    process_fields_if_pre_validator_fails: bool = False
    post_validate_if_field_validator_fails: bool = False
    append_field_prefix: bool = True
    stop_on_first_invalid_field: bool = False
    prefix: str | None = None

    def __post_init__(self) -> None:
        _normalise_prefix(self)


def _normalise_prefix(options: ValidatorOptions | HierarchicalValidatorOptions) -> None:
    # an empty prefix means no prefix
    if options.prefix == "":
        object.__setattr__(options, "prefix", None)
