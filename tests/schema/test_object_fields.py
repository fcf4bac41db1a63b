"""Tests for object constraint trees and per-field error lookups."""

from schema_types import FieldValidator, transform
from schema_types.schema.constraints import with_presence


class TestObjectConstraints:
    def test_constraint_tree_mirrors_properties(self, person_schema):
        result = transform(person_schema)
        assert result.constraint == {
            "name": {"minimum": 2, "presence": True},
            "age": {"greaterThanOrEqualTo": 0},
            "email": {"format": "/^.+@.+$/", "message": "Not an email"},
            "subscribed": None,
        }

    def test_required_field_without_constraint_gets_presence(self):
        result = transform(
            {"type": "object", "properties": {"a": {"type": "string"}}, "required": ["a"]}
        )
        assert result.constraint == {"a": {"presence": True}}

    def test_presence_overwrites_existing_key(self):
        assert with_presence({"presence": False, "minimum": 1}) == {
            "presence": True,
            "minimum": 1,
        }

    def test_required_union_field_keeps_presence_only(self):
        result = transform(
            {
                "type": "object",
                "properties": {"id": {"type": ["string", "integer"]}},
                "required": ["id"],
            }
        )
        assert result.constraint == {"id": {"presence": True}}

    def test_optional_union_field_keeps_alternative_constraints(self):
        result = transform(
            {"type": "object", "properties": {"id": {"type": ["string", "integer"], "minimum": 1}}}
        )
        assert result.constraint == {"id": [None, {"greaterThanOrEqualTo": 1}]}

    def test_required_name_not_in_properties_is_ignored(self):
        result = transform(
            {"type": "object", "properties": {"a": {"type": "string"}}, "required": ["b"]}
        )
        assert result.type.props["a"].kind == "maybe"
        assert set(result.constraint) == {"a"}


class TestFieldValidators:
    def test_options_hold_one_validator_per_field(self, person_schema):
        fields = transform(person_schema).options["fields"]
        assert set(fields) == {"name", "age", "email", "subscribed"}
        assert fields["name"] == FieldValidator(
            field="name", constraint={"minimum": 2, "presence": True}
        )

    def test_valid_value_has_no_error(self, person_schema):
        fields = transform(person_schema).options["fields"]
        assert fields["name"].error("Al", ["name"]) is None
        assert fields["age"].error(30, ["age"]) is None
        assert fields["email"].error("a@b", ["email"]) is None

    def test_missing_required_value(self, person_schema):
        fields = transform(person_schema).options["fields"]
        assert fields["name"].error(None, ["name"]) == "Field required"

    def test_too_short_value(self, person_schema):
        fields = transform(person_schema).options["fields"]
        message = fields["name"].error("A", ["name"])
        assert message is not None
        assert "at least 2" in message

    def test_custom_pattern_message(self, person_schema):
        fields = transform(person_schema).options["fields"]
        assert fields["email"].error("nope", ["email"]) == "Not an email"

    def test_optional_value_may_be_absent(self, person_schema):
        fields = transform(person_schema).options["fields"]
        assert fields["age"].error(None, ["age"]) is None
        assert fields["subscribed"].error(None) is None

    def test_numeric_bound_message(self, person_schema):
        fields = transform(person_schema).options["fields"]
        message = fields["age"].error(-1, ["age"])
        assert message is not None
        assert "greater than or equal to 0" in message

    def test_path_defaults_to_field_name(self, person_schema, monkeypatch):
        monkeypatch.setenv("SCHEMA_TYPES_FULL_MESSAGES", "true")
        fields = transform(person_schema).options["fields"]
        assert fields["name"].error(None) == "Name: Field required"

    def test_model_is_built_once_per_field(self, person_schema):
        name = transform(person_schema).options["fields"]["name"]
        assert name.model is name.model
        assert name.error("A", ["name"]) is not None
        assert name.error("Al", ["name"]) is None


class TestNestedObjectFields:
    def _schema(self):
        return {
            "type": "object",
            "properties": {
                "addr": {
                    "type": "object",
                    "properties": {
                        "format": {"type": "string"},
                        "zip": {"type": "string", "minLength": 5},
                    },
                    "required": ["zip"],
                },
                "meta": {"type": "object", "properties": {"message": {"type": "string"}}},
            },
            "required": ["addr"],
        }

    def test_constraint_tree_keeps_nested_mapping(self):
        result = transform(self._schema())
        assert result.constraint["addr"] == {
            "format": None,
            "zip": {"minimum": 5, "presence": True},
            "presence": True,
        }
        assert result.constraint["meta"] == {"message": None}

    def test_nested_object_validator_checks_presence_only(self):
        fields = transform(self._schema()).options["fields"]
        assert fields["addr"].constraint == {"presence": True}
        assert fields["meta"].constraint is None
        assert fields["addr"].error({"format": "x", "zip": "12345"}, ["addr"]) is None
        assert fields["addr"].error(None, ["addr"]) == "Field required"
        assert fields["meta"].error({"message": "hi"}, ["meta"]) is None
