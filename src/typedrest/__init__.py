"""
typedrest - Typed REST Client Base

A small base for building strongly-typed HTTP REST clients: pick a wire
format from the declared payload kind, perform one HTTP exchange, and
decode the response into the declared type.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from typedrest.client import RESTClientBase, RESTResponse
from typedrest.config import ClientConfig
from typedrest.errors import (
    ConfigurationError,
    ParseError,
    ProtocolError,
    RESTClientError,
    SerializationError,
    TransportError,
)
from typedrest.marshal import FormData, PayloadKind, ResponseKind

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"

__all__ = [
    "RESTClientBase",
    "RESTResponse",
    "ClientConfig",
    "FormData",
    "PayloadKind",
    "ResponseKind",
    "RESTClientError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "ParseError",
    "SerializationError",
]
