"""Field-level validation producing human-readable messages."""

from schema_types.validation.validator import field_model, humanize, validate, validate_field

__all__ = [
    "field_model",
    "humanize",
    "validate",
    "validate_field",
]
