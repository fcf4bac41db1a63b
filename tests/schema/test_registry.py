"""Tests for schema_types.schema.registry -- custom formats and named types."""

import datetime

import pytest

from schema_types import (
    register_format,
    register_type,
    reset_formats,
    reset_types,
    transform,
)
from schema_types.runtime import types as t
from schema_types.schema.errors import (
    DuplicateFormatError,
    DuplicateTypeError,
    MissingFormatError,
    ReservedNameError,
    UnsupportedSchemaError,
)
from schema_types.schema.registry import RESERVED_KINDS, Registry


def _string10():
    return t.refine(t.String, lambda s: len(s) <= 10, "Str10")


# --- Registry ---


class TestRegistry:
    def test_register_and_lookup(self):
        registry = Registry("thing", DuplicateFormatError)
        registry.register("a", 1)
        assert "a" in registry
        assert registry.get("a") == 1
        assert len(registry) == 1

        registry.reset()
        assert "a" not in registry
        assert len(registry) == 0

    def test_get_missing_returns_none(self):
        assert Registry("thing", DuplicateFormatError).get("nope") is None

    def test_reset_allows_reregistration(self):
        registry = Registry("thing", DuplicateFormatError)
        registry.register("a", 1)
        registry.reset()
        assert "a" not in registry
        registry.register("a", 2)
        assert registry.get("a") == 2


# --- Formats ---


class TestRegisterFormat:
    def test_duplicate_format_fails(self, is_email):
        register_format("email", is_email)
        with pytest.raises(DuplicateFormatError) as exc_info:
            register_format("email", is_email)
        assert str(exc_info.value) == "Duplicated format email"

    def test_unknown_format_fails(self):
        with pytest.raises(MissingFormatError) as exc_info:
            transform({"type": "string", "format": "unknown"})
        assert str(exc_info.value) == "Missing format unknown, use the (format, predicate) API"

    def test_predicate_format(self, is_email):
        register_format("email", is_email)
        result = transform({"type": "string", "format": "email"})
        assert result.type.kind == "subtype"
        assert result.type.type is t.String
        assert result.type.predicate is is_email
        assert result.type.accepts("a@b") is True
        assert result.type.accepts("") is False

    def test_predicate_format_composes_with_length(self, is_email):
        register_format("email", is_email)
        result = transform({"type": "string", "format": "email", "maxLength": 5})
        assert result.type.accepts("a@b") is True
        assert result.type.accepts("abc@def") is False
        assert result.type.accepts("abc") is False

    def test_type_format_short_circuits(self):
        register_format("date", t.Date)
        result = transform(
            {
                "type": "string",
                "format": "date",
                "minLength": 20,
                "description": "Date of your departure",
            }
        )
        assert result.type is t.Date
        assert result.type.accepts(datetime.date(2000, 10, 23)) is True
        assert result.type.accepts("2000.10.23") is False

    def test_reset_formats_forgets_registration(self, is_email):
        register_format("email", is_email)
        transform({"type": "string", "format": "email"})
        reset_formats()
        with pytest.raises(MissingFormatError):
            transform({"type": "string", "format": "email"})

    def test_transform_attributes_expose_registration(self, is_email):
        transform.register_format("email", is_email)
        assert transform({"type": "string", "format": "email"}).type.accepts("a@b")
        transform.reset_formats()
        with pytest.raises(MissingFormatError):
            transform({"type": "string", "format": "email"})


# --- Types ---


class TestRegisterType:
    def test_duplicate_type_fails(self):
        register_type("string10", _string10())
        with pytest.raises(DuplicateTypeError) as exc_info:
            register_type("string10", _string10())
        assert str(exc_info.value) == "Duplicated type string10"

    @pytest.mark.parametrize("name", sorted(RESERVED_KINDS))
    def test_reserved_name_fails(self, name):
        with pytest.raises(ReservedNameError) as exc_info:
            register_type(name, _string10())
        assert str(exc_info.value) == f"Reserved type {name}"

    def test_registered_type_is_returned_verbatim(self):
        string10 = _string10()
        register_type("string10", string10)
        result = transform({"type": "string10", "minLength": 99})
        assert result.type is string10
        assert result.constraint is None
        assert result.type.accepts("abcdefghij") is True
        assert result.type.accepts("abcdefghijk") is False

    def test_registered_type_inside_object(self):
        register_type("string10", _string10())
        result = transform(
            {
                "type": "object",
                "properties": {"code": {"type": "string10"}},
                "required": ["code"],
            }
        )
        assert result.type.accepts({"code": "short"}) is True
        assert result.type.accepts({"code": "far too long"}) is False
        assert result.constraint == {"code": {"presence": True}}

    def test_reset_types_forgets_registration(self):
        register_type("string10", _string10())
        reset_types()
        with pytest.raises(UnsupportedSchemaError):
            transform({"type": "string10"})
        register_type("string10", _string10())
