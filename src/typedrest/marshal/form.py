"""
Form field building for post_as_form.

Two explicit steps: a structured value becomes an ordered list of
(name, string) fields, then the fields are escaped and joined into a
form body. Keeping them apart lets ordering and escaping be checked
without going through a JSON library's mapping behaviour.
"""

import json
from typing import Any
from urllib.parse import quote

from pydantic_core import PydanticSerializationError, to_jsonable_python

from typedrest.errors import SerializationError
from typedrest.marshal.kinds import FormData


def _field_value(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        # JSON text: true/false, 1, 1.5
        return json.dumps(value)
    raise SerializationError(
        f"Form field '{name}' must be a scalar, got {type(value).__name__}"
    )


def form_fields(value: Any) -> list[tuple[str, str]]:
    """
    Flatten a JSON-serializable object into ordered form fields.

    Field order follows the mapping's insertion order (dataclass and model
    fields keep their declaration order).
    """
    try:
        data = to_jsonable_python(value)
    except PydanticSerializationError as e:
        raise SerializationError(f"Cannot serialize {type(value).__name__}: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(
            f"Form payload must serialize to an object, got {type(data).__name__}"
        )

    return [(str(name), _field_value(str(name), item)) for name, item in data.items()]


def escape_value(value: str) -> str:
    """Percent-escape everything outside the RFC 3986 unreserved set."""
    return quote(value, safe="")


def encode_fields(fields: list[tuple[str, str]]) -> str:
    """Join fields as name=escaped_value pairs separated by '&'."""
    return "&".join(f"{name}={escape_value(val)}" for name, val in fields)


def to_form_data(value: Any) -> FormData:
    """Build the FormData marker payload for a structured value."""
    return FormData(data=encode_fields(form_fields(value)))
