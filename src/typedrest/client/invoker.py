"""
HTTP invoker: one request/response cycle per call.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import time
from typing import Any

import httpx

from typedrest.client.envelope import RESTResponse, SUCCESS_STATUSES
from typedrest.config import ClientConfig
from typedrest.errors import ConfigurationError, ProtocolError, TransportError
from typedrest.marshal.decoder import decode_response
from typedrest.marshal.encoder import EncodedBody
from typedrest.marshal.kinds import ResponseKind

logger = logging.getLogger(__name__)

# Methods that never carry a body or a Content-Length of their own
BODYLESS_METHODS = frozenset({"GET", "HEAD"})


def build_headers(
    method: str,
    body: EncodedBody | None,
    config: ClientConfig,
) -> dict[str, str]:
    """Merge configured default headers with the encoder's headers."""
    headers = dict(config.default_headers)
    if body is not None:
        headers.update(body.headers())
    elif method not in BODYLESS_METHODS:
        headers["Content-Length"] = "0"
    return headers


def invoke(
    uri: str | None,
    method: str,
    body: EncodedBody | None = None,
    *,
    config: ClientConfig,
    response_type: Any = Any,
    response_kind: ResponseKind | None = None,
    decode: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> RESTResponse:
    """
    Perform exactly one HTTP request/response cycle.

    Args:
        uri: Resource URI
        method: HTTP method name
        body: Pre-encoded request body, or None
        config: Timeout, default headers and TLS verification
        response_type: Declared type for the decoded body
        response_kind: Explicit response kind, inferred from response_type when omitted
        decode: Whether a 200/201 body should be decoded at all
        transport: Optional transport, e.g. httpx.MockTransport in tests

    Returns:
        RESTResponse; value is only set for 200/201

    Raises:
        ConfigurationError: If uri is empty or malformed
        TransportError: If no HTTP response was received
        ProtocolError: If the response status is 4xx or 5xx
        ParseError: If a 200/201 body does not decode
    """
    if not uri:
        raise ConfigurationError("resource URI must be set before invoking a REST call")
    try:
        httpx.URL(uri)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"invalid resource URI {uri!r}: {e}") from e

    method = method.upper()
    headers = build_headers(method, body, config)
    content = body.content if body is not None else None

    logger.debug(f"{method} {uri} ({len(content) if content else 0} bytes)")
    start_time = time.time()

    try:
        with httpx.Client(
            timeout=httpx.Timeout(config.timeout_seconds),
            verify=config.verify_ssl,
            follow_redirects=False,
            transport=transport,
        ) as client:
            response = client.request(method, uri, content=content, headers=headers)
    except httpx.TransportError as e:
        logger.debug(f"{method} {uri} failed: {e!r}")
        raise TransportError(f"{method} {uri} failed: {e}") from e

    elapsed_ms = (time.time() - start_time) * 1000
    logger.debug(f"{method} {uri} -> {response.status_code} in {elapsed_ms:.1f}ms")

    if response.is_client_error or response.is_server_error:
        raise ProtocolError(
            f"{method} {uri} returned HTTP {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            headers=response.headers,
            body=response.text,
            method=method,
            uri=uri,
        )

    value = None
    if decode and method != "HEAD" and response.status_code in SUCCESS_STATUSES:
        value = decode_response(response.text, response_type, response_kind)

    return RESTResponse(
        status_code=response.status_code,
        value=value,
        headers=response.headers,
    )
