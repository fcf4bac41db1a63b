"""schema-types: JSON Schema documents as runtime types and constraint trees."""

from importlib.metadata import PackageNotFoundError, version

from loguru import logger

from schema_types.schema import (
    DuplicateFormatError,
    DuplicateTypeError,
    FieldValidator,
    MissingFormatError,
    PreconditionError,
    ReservedNameError,
    SchemaTransformer,
    SchemaTypesError,
    TransformResult,
    UnsupportedSchemaError,
    register_format,
    register_type,
    reset_formats,
    reset_types,
    transform,
)
from schema_types.validation import validate, validate_field

try:
    __version__ = version("schema-types")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Library logging stays quiet until the host calls logger.enable("schema_types")
logger.disable("schema_types")

__all__ = [
    "__version__",
    "transform",
    "register_format",
    "reset_formats",
    "register_type",
    "reset_types",
    "SchemaTransformer",
    "TransformResult",
    "FieldValidator",
    "validate",
    "validate_field",
    "SchemaTypesError",
    "PreconditionError",
    "UnsupportedSchemaError",
    "MissingFormatError",
    "DuplicateFormatError",
    "DuplicateTypeError",
    "ReservedNameError",
]
