"""Settings for schema_types, read from SCHEMA_TYPES_* environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaTypesSettings(BaseSettings):
    """Library-wide settings.

    Example:
        SCHEMA_TYPES_FULL_MESSAGES=true -> "First name: Field required"
    """

    model_config = SettingsConfigDict(env_prefix="SCHEMA_TYPES_", extra="ignore")

    full_messages: bool = Field(
        default=False,
        description="Prefix validation messages with the humanized field label",
    )
    default_struct_name: str = Field(
        default="Struct",
        description="Display name for object types whose schema has no description",
    )


@lru_cache
def get_settings() -> SchemaTypesSettings:
    return SchemaTypesSettings()
