"""Validation engine: results, leaf and hierarchical validators, resolvers."""

from __future__ import annotations

from .composite import CompositeValidator
from .hierarchical import (
    FieldValidation,
    HierarchicalValidator,
    HierarchicalValidatorBuilder,
    ValidationPhase,
)
from .options import HierarchicalValidatorOptions, ValidatorOptions
from .pydantic import PydanticValidator
from .resolvers import AccessorFieldResolver, AttributeFieldResolver
from .result import ValidationResult
from .validator import Validator, ValidatorBuilder

__all__ = [
    "AccessorFieldResolver",
    "AttributeFieldResolver",
    "CompositeValidator",
    "FieldValidation",
    "HierarchicalValidator",
    "HierarchicalValidatorBuilder",
    "HierarchicalValidatorOptions",
    "PydanticValidator",
    "ValidationPhase",
    "ValidationResult",
    "Validator",
    "ValidatorBuilder",
    "ValidatorOptions",
]
