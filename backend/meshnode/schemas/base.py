"""
Shared schema base using the dashboard's camelCase wire format.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys; accepts snake_case on input too."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
