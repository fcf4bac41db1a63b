"""Process-wide extension registries.

Two registries extend what a schema can say:
  formats -> name to a string predicate or a full runtime type (``format`` keyword)
  types   -> name to a pre-built runtime type (``type`` keyword)

A name may be registered once until the registry is reset. Registration is
expected to happen at startup; nothing here is synchronized.
"""

from collections.abc import Callable
from typing import Any

from loguru import logger

from schema_types.schema.errors import (
    DuplicateFormatError,
    DuplicateTypeError,
    ReservedNameError,
)

# The seven primitive kinds. Custom types may not use these names.
RESERVED_KINDS = frozenset({"null", "string", "number", "integer", "boolean", "object", "array"})


class Registry:
    """Name to entry table with register-once and reset semantics."""

    def __init__(
        self,
        label: str,
        duplicate_error: Callable[[str], Exception],
        reserved: frozenset[str] = frozenset(),
    ):
        self.label = label
        self._duplicate_error = duplicate_error
        self._reserved = reserved
        self._entries: dict[str, Any] = {}

    def register(self, name: str, entry: Any) -> None:
        if name in self._entries:
            raise self._duplicate_error(name)
        if name in self._reserved:
            raise ReservedNameError(name)
        self._entries[name] = entry
        logger.debug(f"Registered {self.label} '{name}'")

    def reset(self) -> None:
        logger.debug(f"Resetting {len(self)} registered {self.label}(s)")
        self._entries = {}

    def get(self, name: str) -> Any:
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


formats = Registry("format", DuplicateFormatError)
types = Registry("type", DuplicateTypeError, reserved=RESERVED_KINDS)
