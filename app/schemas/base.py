"""
Shared schema base.

The JSON API speaks camelCase (``imageUrl``, ``createdAt``) while Python
code uses snake_case; both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for request/response schemas."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
