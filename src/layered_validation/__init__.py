"""layered-validation — declarative object validation.

Checks are assembled into validators, validators into hierarchical
validators, and every run returns a :class:`ValidationResult` instead of
raising mid-check.
"""

from __future__ import annotations

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    AndCheck,
    BaseCheck,
    NotCheck,
    OrCheck,
    PredicateCheck,
    Severity,
    ValidationMessage,
    as_check,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import FieldAccessor, IFieldResolver, IValidator, ValidationCheck

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    ConfigurationError,
    FieldResolutionError,
    LayeredValidationError,
    ValidationError,
)

# ── Validation ───────────────────────────────────────────────────
from .validation import (
    AccessorFieldResolver,
    AttributeFieldResolver,
    CompositeValidator,
    FieldValidation,
    HierarchicalValidator,
    HierarchicalValidatorBuilder,
    HierarchicalValidatorOptions,
    PydanticValidator,
    ValidationPhase,
    ValidationResult,
    Validator,
    ValidatorBuilder,
    ValidatorOptions,
)

__all__ = [
    # Domain
    "AndCheck",
    "BaseCheck",
    "NotCheck",
    "OrCheck",
    "PredicateCheck",
    "Severity",
    "ValidationMessage",
    "as_check",
    # Ports
    "FieldAccessor",
    "IFieldResolver",
    "IValidator",
    "ValidationCheck",
    # Primitives
    "ConfigurationError",
    "FieldResolutionError",
    "LayeredValidationError",
    "ValidationError",
    # Validation
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
