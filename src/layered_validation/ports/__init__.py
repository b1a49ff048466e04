from .validation import FieldAccessor, IFieldResolver, IValidator, ValidationCheck

__all__ = [
    "FieldAccessor",
    "IFieldResolver",
    "IValidator",
    "ValidationCheck",
]
