"""Base pydantic model for centralized configuration of schema definitions."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model shared by all feed schemas.

    Documents from the store and REST payloads use camelCase keys
    (``createdAt``, ``fromUserName``); Python code uses snake_case names.
    Numeric IDs coming from the store are accepted as strings.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )
