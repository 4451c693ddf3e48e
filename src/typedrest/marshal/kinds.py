"""
Wire kinds for request payloads and declared response types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
import xml.etree.ElementTree as ET


class PayloadKind(Enum):
    """Encoding used for an outgoing request body."""
    JSON = "json"
    XML = "xml"
    FORM = "form"


class ResponseKind(Enum):
    """Decoding used for a successful response body."""
    JSON = "json"
    XML = "xml"
    TEXT = "text"


@dataclass
class FormData:
    """Marker payload: a pre-joined key=value&key=value string sent verbatim."""
    data: str


XML_DOCUMENT_TYPES = (ET.Element, ET.ElementTree)


def infer_payload_kind(value: Any) -> PayloadKind:
    """Pick the payload kind for a request value."""
    if isinstance(value, XML_DOCUMENT_TYPES):
        return PayloadKind.XML
    if isinstance(value, FormData):
        return PayloadKind.FORM
    return PayloadKind.JSON


def infer_response_kind(response_type: Any) -> ResponseKind:
    """Pick the response kind for a declared response type."""
    if response_type in XML_DOCUMENT_TYPES:
        return ResponseKind.XML
    if response_type is str:
        return ResponseKind.TEXT
    return ResponseKind.JSON
