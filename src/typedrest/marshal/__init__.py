"""
Request/response marshaling: wire kinds, payload encoding, form fields
and response decoding.
"""

from typedrest.marshal.kinds import (
    FormData,
    PayloadKind,
    ResponseKind,
    infer_payload_kind,
    infer_response_kind,
)
from typedrest.marshal.encoder import EncodedBody, encode_payload
from typedrest.marshal.decoder import decode_response
from typedrest.marshal.form import encode_fields, form_fields, to_form_data

__all__ = [
    "FormData",
    "PayloadKind",
    "ResponseKind",
    "infer_payload_kind",
    "infer_response_kind",
    "EncodedBody",
    "encode_payload",
    "decode_response",
    "form_fields",
    "encode_fields",
    "to_form_data",
]
