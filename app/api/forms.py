"""
Multipart form helpers.

Admin forms send ``technologies`` / ``tags`` as JSON-encoded arrays
inside a text field.  They are decoded into an ordered list of strings
here, at the API boundary, and the assembled fields are validated
against the pydantic schema before any service is called.
"""

import json
from typing import Any, Optional, TypeVar

import pydantic
from fastapi.encoders import jsonable_encoder

from app.core.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def parse_string_list(raw: Optional[str], field: str) -> Optional[list[str]]:
    """
    Decode a JSON array of strings sent as a form field.

    Args:
        raw: The raw field value, or None if the field was not sent
        field: Field name used in error messages

    Returns:
        The decoded list, or None when the field was not sent

    Raises:
        ValidationError: Malformed JSON or not an array of strings
    """
    if raw is None:
        return None
    if not raw.strip():
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError(errors=[{"loc": ["body", field], "msg": f"{field} must be a JSON array",
                                       "type": "json_invalid"}])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationError(errors=[{"loc": ["body", field], "msg": f"{field} must be an array of strings",
                                       "type": "list_type"}])
    return value


def build_schema(schema: type[SchemaT], fields: dict[str, Any]) -> SchemaT:
    """
    Validate form fields against a schema.

    Fields whose value is None were not sent and are left out, so partial
    update schemas only mark what the client actually provided.
    """
    provided = {key: value for key, value in fields.items() if value is not None}
    try:
        return schema.model_validate(provided)
    except pydantic.ValidationError as e:
        raise ValidationError(errors=jsonable_encoder(e.errors(include_url=False, include_context=False,
                                                               include_input=False)))
