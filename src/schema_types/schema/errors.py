"""
Exceptions raised while transforming schemas or registering extensions.
"""

import json


class SchemaTypesError(Exception):
    """Base exception for all schema transform errors."""

    pass


class PreconditionError(SchemaTypesError):
    """Raised when the input to transform is not a schema node (a dict)."""

    def __init__(self, node):
        self.node = node
        super().__init__(f"Invalid schema node {node!r} (expected a dict)")


class UnsupportedSchemaError(SchemaTypesError):
    """Raised when a node's type is neither a kind nor a registered type name."""

    def __init__(self, node: dict):
        self.node = node
        super().__init__(f"Unsupported json schema {_stringify(node)}")


class MissingFormatError(SchemaTypesError):
    """Raised when a string schema references an unregistered format."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing format {name}, use the (format, predicate) API")


class DuplicateFormatError(SchemaTypesError):
    """Raised when a format name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicated format {name}")


class DuplicateTypeError(SchemaTypesError):
    """Raised when a custom type name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicated type {name}")


class ReservedNameError(SchemaTypesError):
    """Raised when a custom type would shadow one of the primitive kinds."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Reserved type {name}")


def _stringify(node) -> str:
    try:
        return json.dumps(node, sort_keys=True, default=repr)
    except (TypeError, ValueError):
        return repr(node)
