"""Schema dispatcher for schema_types.

Classifies a node's ``type`` and routes it:
  1. No type            -> Any, no constraint
  2. Primitive kind     -> matching kind transformer
  3. List of kinds      -> union of each kind applied to the same node
  4. Registered name    -> the registered result, verbatim
  5. Anything else      -> UnsupportedSchemaError

The registries are passed in by reference, so one ``SchemaTransformer`` sees
every registration made after it was created.
"""

from collections.abc import Callable
from typing import TypeAlias
from enum import StrEnum

from loguru import logger

from schema_types.runtime import types as t
from schema_types.schema import registry
from schema_types.schema import transformers
from schema_types.schema.errors import PreconditionError, UnsupportedSchemaError
from schema_types.schema.registry import Registry
from schema_types.schema.result import TransformResult


class SchemaKind(StrEnum):
    """The seven primitive JSON Schema kinds."""

    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def parse(cls, value) -> "SchemaKind | None":
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


KindTransformer: TypeAlias = Callable[[dict, "SchemaTransformer"], TransformResult]

KIND_TRANSFORMERS: dict[SchemaKind, KindTransformer] = {
    SchemaKind.NULL: transformers.transform_null,
    SchemaKind.STRING: transformers.transform_string,
    SchemaKind.NUMBER: transformers.transform_number,
    SchemaKind.INTEGER: transformers.transform_integer,
    SchemaKind.BOOLEAN: transformers.transform_boolean,
    SchemaKind.OBJECT: transformers.transform_object,
    SchemaKind.ARRAY: transformers.transform_array,
}


class SchemaTransformer:
    """Transforms schema nodes using the given format and type registries."""

    def __init__(self, formats: Registry, types: Registry):
        self.formats = formats
        self.types = types

    def transform(self, schema: dict) -> TransformResult:
        """Transform a schema node into a runtime type and constraint tree.

        Args:
            schema: A JSON Schema node (dict).

        Returns:
            A TransformResult. Object nodes also carry per-field validators.

        Raises:
            PreconditionError: If schema is not a dict.
            UnsupportedSchemaError: If the type is neither a kind nor registered.
            MissingFormatError: If a string node uses an unregistered format.
        """
        if not t.is_plain_object(schema):
            raise PreconditionError(schema)

        if "type" not in schema:
            return TransformResult(type=t.Any)

        type_ = schema["type"]

        kind = SchemaKind.parse(type_)
        if kind is not None:
            return KIND_TRANSFORMERS[kind](schema, self)

        if t.is_array(type_):
            return self._transform_union(schema, type_)

        if isinstance(type_, str) and type_ in self.types:
            logger.debug(f"Using registered type '{type_}'")
            return self.types.get(type_)

        raise UnsupportedSchemaError(schema)

    def _transform_union(self, schema: dict, names) -> TransformResult:
        # Every alternative sees the whole node, keywords included
        alternatives = []
        constraints = []
        for name in names:
            kind = SchemaKind.parse(name)
            if kind is None:
                raise UnsupportedSchemaError(schema)
            result = KIND_TRANSFORMERS[kind](schema, self)
            alternatives.append(result.type)
            constraints.append(result.constraint)

        logger.debug(f"Transformed union of {list(names)}")
        return TransformResult(type=t.union(alternatives), constraint=constraints)


# --- Process-wide transform ---

_default = SchemaTransformer(registry.formats, registry.types)


def transform(schema: dict) -> TransformResult:
    """Transform a schema node using the process-wide registries."""
    return _default.transform(schema)


def register_format(name: str, predicate_or_type) -> None:
    """Register a string format as a predicate over strings or a runtime type."""
    registry.formats.register(name, predicate_or_type)


def reset_formats() -> None:
    registry.formats.reset()


def register_type(name: str, type_: t.RuntimeType) -> None:
    """Register a custom type name usable as a node's ``type``."""
    registry.types.register(name, TransformResult(type=type_))


def reset_types() -> None:
    registry.types.reset()


transform.register_format = register_format
transform.reset_formats = reset_formats
transform.register_type = register_type
transform.reset_types = reset_types
