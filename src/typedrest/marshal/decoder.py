"""
Response decoder.

Turns a response body into a value of the declared response type. The
response kind alone decides how; the server's Content-Type is ignored.
"""

from functools import lru_cache
from typing import Any
import xml.etree.ElementTree as ET

from pydantic import TypeAdapter, ValidationError

from typedrest.errors import ParseError
from typedrest.marshal.kinds import ResponseKind, infer_response_kind


@lru_cache(maxsize=128)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_xml(text: str) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(f"Malformed XML response: {e}", body=text) from e


def decode_json(text: str, response_type: Any = Any) -> Any:
    try:
        adapter = _adapter(response_type)
    except TypeError:
        # unhashable generic alias, skip the cache
        adapter = TypeAdapter(response_type)
    try:
        return adapter.validate_json(text)
    except ValidationError as e:
        name = getattr(response_type, "__name__", repr(response_type))
        raise ParseError(f"Response does not decode as {name}: {e}", body=text) from e


def decode_response(
    text: str,
    response_type: Any = Any,
    kind: ResponseKind | None = None,
) -> Any:
    """
    Decode a response body.

    Args:
        text: Full response body as text
        response_type: Declared response type (JSON targets only)
        kind: Explicit response kind, inferred from response_type when omitted

    Returns:
        Element for XML, the text unchanged for TEXT, else a response_type value

    Raises:
        ParseError: If the body is malformed or does not fit response_type
    """
    if kind is None:
        kind = infer_response_kind(response_type)

    if kind is ResponseKind.XML:
        return decode_xml(text)
    if kind is ResponseKind.TEXT:
        return text
    return decode_json(text, response_type)
