"""Transform results and per-field error lookups."""

from dataclasses import dataclass
from functools import cached_property
from typing import Any

from pydantic import BaseModel

from schema_types.runtime.types import RuntimeType
from schema_types.validation.validator import field_model, validate_field


@dataclass(frozen=True)
class FieldValidator:
    """Error lookup for one object field.

    Holds the field's constraint fragment; ``error`` runs the field-level
    validator and returns the first message, if any. The one-field model is
    built on first use and reused for later lookups on the same field.
    """

    field: str
    constraint: Any = None

    @cached_property
    def model(self) -> type[BaseModel] | None:
        return field_model(self.field, self.constraint)

    def error(self, value: Any, path: list | tuple | None = None) -> str | None:
        field = path[0] if path else self.field
        model = self.model if field == self.field else None
        messages = validate_field(value, self.constraint, field, model=model)
        if messages:
            return messages[0]
        return None


@dataclass
class TransformResult:
    """A runtime type plus the parallel constraint tree derived from the same node.

    ``constraint`` is a fragment, a per-field mapping of fragments (objects), a
    per-alternative list (unions) or None. ``options`` is only set for objects:
    ``{"fields": {name: FieldValidator}}``.
    """

    type: RuntimeType
    constraint: Any = None
    options: dict[str, dict[str, FieldValidator]] | None = None
