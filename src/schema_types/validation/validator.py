"""Field-level validation of values against constraint fragments.

A fragment is translated into a one-field pydantic model and the value is run
through it. The validator only produces messages; it never decides which
runtime type a schema maps to.

  Fragment key                 Pydantic rule
  ---------------------------------------------------------------
  presence                     required (None and blank values count as missing)
  inclusion                    value must be one of the list
  minimum / maximum            strict str min_length / max_length
  format (+ message)           regex match, custom message if given
  greaterThan[OrEqualTo]       number (no bool or str) gt / ge
  lessThan[OrEqualTo]          number (no bool or str) lt / le
  onlyInteger                  int
  length.minimum / .maximum    list min_length / max_length
"""

import re
from collections.abc import Mapping
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    ValidationError,
    create_model,
)
from pydantic_core import PydanticCustomError

from schema_types.config import get_settings
from schema_types.runtime.types import MISSING, Number
from schema_types.schema.predicates import compile_pattern

_NUMERIC_KEYS = {
    "greaterThan": "gt",
    "greaterThanOrEqualTo": "ge",
    "lessThan": "lt",
    "lessThanOrEqualTo": "le",
}


# --- Fragment translation ---


def _check_inclusion(allowed: list):
    def check(value):
        if value not in allowed:
            expected = ", ".join(repr(v) for v in allowed)
            raise PydanticCustomError(
                "inclusion",
                "Input should be one of {expected}",
                {"expected": expected},
            )
        return value

    return check


def _check_pattern(pattern: str, message: str | None):
    compiled, sticky = compile_pattern(pattern)
    search = compiled.match if sticky else compiled.search

    def check(value):
        if search(value) is None:
            if message:
                raise PydanticCustomError("pattern_mismatch", message)
            raise PydanticCustomError(
                "pattern_mismatch",
                "String should match pattern '{pattern}'",
                {"pattern": pattern},
            )
        return value

    return check


def _require_number(value):
    # bool and numeric strings are not numbers here
    if value is not None and not Number.accepts(value):
        raise PydanticCustomError("number_type", "Input should be a valid number")
    return value


def _annotation_for(fragment: Mapping) -> tuple[Any, bool]:
    """Build the field annotation for a fragment. Returns (annotation, required)."""
    base: Any = Any
    field_kwargs: dict[str, Any] = {}
    validators: list = []

    if isinstance(fragment.get("inclusion"), (list, tuple)):
        validators.append(AfterValidator(_check_inclusion(list(fragment["inclusion"]))))

    if "minimum" in fragment or "maximum" in fragment:
        base = str
        field_kwargs["strict"] = True
        if "minimum" in fragment:
            field_kwargs["min_length"] = fragment["minimum"]
        if "maximum" in fragment:
            field_kwargs["max_length"] = fragment["maximum"]

    if isinstance(fragment.get("format"), str):
        base = str
        field_kwargs["strict"] = True
        validators.append(
            AfterValidator(_check_pattern(fragment["format"], fragment.get("message")))
        )

    numeric = {_NUMERIC_KEYS[k]: v for k, v in fragment.items() if k in _NUMERIC_KEYS}
    if numeric or fragment.get("onlyInteger"):
        base = int if fragment.get("onlyInteger") else float
        field_kwargs.pop("strict", None)
        field_kwargs.update(numeric)
        validators.insert(0, BeforeValidator(_require_number))

    length = fragment.get("length")
    if isinstance(length, Mapping):
        base = list
        if "minimum" in length:
            field_kwargs["min_length"] = length["minimum"]
        if "maximum" in length:
            field_kwargs["max_length"] = length["maximum"]

    required = bool(fragment.get("presence"))
    metadata = ([Field(**field_kwargs)] if field_kwargs else []) + validators
    annotation = Annotated[base, *metadata] if metadata else base
    if not required:
        annotation = Optional[annotation]
    return annotation, required


def field_model(field: str, fragment: Any) -> type[BaseModel] | None:
    """Build the one-field model for a fragment, or None if it imposes no rule."""
    if not isinstance(fragment, Mapping) or not fragment:
        return None
    annotation, required = _annotation_for(fragment)
    default = Field(..., alias=field) if required else Field(None, alias=field)
    return create_model("FieldRecord", value=(annotation, default))


def _is_blank(value: Any) -> bool:
    if value is None or value is MISSING:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return not value
    return False


# --- Messages ---


def humanize(field: str) -> str:
    """Turn a field name into a label: ``firstName`` / ``first_name`` -> ``First name``."""
    spaced = re.sub(r"(?<=[a-z0-9])([A-Z])", r" \1", field)
    spaced = re.sub(r"[_\-.]+", " ", spaced).strip().lower()
    return spaced[:1].upper() + spaced[1:]


def validate_field(
    value: Any,
    fragment: Any,
    field: str = "value",
    model: type[BaseModel] | None = None,
) -> list[str] | None:
    """Validate a single value against a constraint fragment.

    Args:
        value: The candidate value. ``MISSING`` means no value was provided.
        fragment: A constraint fragment. ``None`` and non-mapping fragments
            (per-alternative union sequences) impose no rule.
        field: The field name used in the single-field record and messages.
        model: A model already built by ``field_model`` for this field and
            fragment. Built on the fly when omitted.

    Returns:
        The list of messages for the field, or None if the value is valid.
    """
    if model is None:
        model = field_model(field, fragment)
    if model is None:
        return None

    # A required blank value counts as not provided
    if value is MISSING or (fragment.get("presence") and _is_blank(value)):
        record = {}
    else:
        record = {field: value}
    try:
        model.model_validate(record)
    except ValidationError as e:
        messages = [err["msg"] for err in e.errors() if err["loc"] and err["loc"][0] == field]
        if not messages:
            return None
        if get_settings().full_messages:
            label = humanize(field)
            messages = [f"{label}: {msg}" for msg in messages]
        return messages
    return None


def validate(attributes: Mapping, constraints: Mapping) -> dict[str, list[str]] | None:
    """Validate a record field by field.

    Returns a mapping of field name to messages for every failing field, or
    None when all fields pass.
    """
    errors: dict[str, list[str]] = {}
    for field, fragment in constraints.items():
        messages = validate_field(attributes.get(field, MISSING), fragment, field)
        if messages:
            errors[field] = messages
    return errors or None
