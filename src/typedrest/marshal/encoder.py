"""
Payload encoder.

Turns a request value into bytes plus the content type that goes with
them. The payload kind alone decides which serializer runs.
"""

from dataclasses import dataclass
from typing import Any
import xml.etree.ElementTree as ET

from pydantic_core import PydanticSerializationError, to_json

from typedrest.errors import SerializationError
from typedrest.marshal.kinds import FormData, PayloadKind, infer_payload_kind


JSON_CONTENT_TYPE = "application/json; charset=utf-8"
XML_CONTENT_TYPE = "text/xml"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class EncodedBody:
    """Encoded request body and its content type."""
    content: bytes
    content_type: str

    @property
    def content_length(self) -> int:
        return len(self.content)

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "Content-Length": str(self.content_length),
        }


def encode_json(value: Any) -> EncodedBody:
    # to_json emits UTF-8 without a BOM
    try:
        content = to_json(value)
    except PydanticSerializationError as e:
        raise SerializationError(f"Cannot encode {type(value).__name__} as JSON: {e}") from e
    return EncodedBody(content=content, content_type=JSON_CONTENT_TYPE)


def encode_xml(value: Any) -> EncodedBody:
    if isinstance(value, ET.ElementTree):
        value = value.getroot()
    if not isinstance(value, ET.Element):
        raise SerializationError(
            f"XML payload must be an Element or ElementTree, got {type(value).__name__}"
        )
    content = ET.tostring(value, encoding="utf-8", xml_declaration=True)
    return EncodedBody(content=content, content_type=XML_CONTENT_TYPE)


def encode_form(value: Any) -> EncodedBody:
    if isinstance(value, FormData):
        value = value.data
    if not isinstance(value, str):
        raise SerializationError(
            f"Form payload must be FormData or str, got {type(value).__name__}"
        )
    return EncodedBody(content=value.encode("utf-8"), content_type=FORM_CONTENT_TYPE)


_ENCODERS = {
    PayloadKind.JSON: encode_json,
    PayloadKind.XML: encode_xml,
    PayloadKind.FORM: encode_form,
}


def encode_payload(value: Any, kind: PayloadKind | None = None) -> EncodedBody | None:
    """
    Encode a request payload.

    Args:
        value: The request value; None means no body
        kind: Explicit payload kind, inferred from the value when omitted

    Returns:
        The encoded body, or None when there is nothing to send
    """
    if value is None:
        return None
    if kind is None:
        kind = infer_payload_kind(value)
    return _ENCODERS[kind](value)
