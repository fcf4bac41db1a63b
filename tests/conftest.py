"""Shared pytest fixtures."""

import pytest

from schema_types import reset_formats, reset_types
from schema_types.config import get_settings


@pytest.fixture(autouse=True)
def clean_registries():
    """Registries are process-wide; every test starts and ends with them empty."""
    reset_formats()
    reset_types()
    get_settings.cache_clear()
    yield
    reset_formats()
    reset_types()
    get_settings.cache_clear()


@pytest.fixture
def is_email():
    def is_email(x):
        return "@" in x and not x.startswith("@") and not x.endswith("@")

    return is_email


@pytest.fixture
def person_schema():
    """Object schema with one required and several optional fields."""
    return {
        "type": "object",
        "description": "Person",
        "properties": {
            "name": {"type": "string", "minLength": 2},
            "age": {"type": "integer", "minimum": 0},
            "email": {"type": "string", "pattern": "/^.+@.+$/", "message": "Not an email"},
            "subscribed": {"type": "boolean"},
        },
        "required": ["name"],
    }
