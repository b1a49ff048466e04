from .exceptions import (
    ConfigurationError,
    FieldResolutionError,
    LayeredValidationError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "FieldResolutionError",
    "LayeredValidationError",
    "ValidationError",
]
