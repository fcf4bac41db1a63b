"""Schema to runtime type transform.

Converts JSON Schema nodes into runtime types plus a parallel constraint tree
for field-level validation. Formats and custom type names are extended through
process-wide registries.
"""

from schema_types.schema.dispatcher import (
    KIND_TRANSFORMERS,
    SchemaKind,
    SchemaTransformer,
    register_format,
    register_type,
    reset_formats,
    reset_types,
    transform,
)
from schema_types.schema.errors import (
    DuplicateFormatError,
    DuplicateTypeError,
    MissingFormatError,
    PreconditionError,
    ReservedNameError,
    SchemaTypesError,
    UnsupportedSchemaError,
)
from schema_types.schema.registry import RESERVED_KINDS, Registry
from schema_types.schema.result import FieldValidator, TransformResult

__all__ = [
    # Dispatcher
    "KIND_TRANSFORMERS",
    "SchemaKind",
    "SchemaTransformer",
    "transform",
    "register_format",
    "reset_formats",
    "register_type",
    "reset_types",
    # Registry
    "RESERVED_KINDS",
    "Registry",
    # Results
    "FieldValidator",
    "TransformResult",
    # Errors
    "SchemaTypesError",
    "PreconditionError",
    "UnsupportedSchemaError",
    "MissingFormatError",
    "DuplicateFormatError",
    "DuplicateTypeError",
    "ReservedNameError",
]
