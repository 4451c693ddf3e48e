"""
Error types raised by the REST client base.

Nothing here is retried or recovered internally; every failure reaches
the caller of the verb method.
"""

from typing import Any

import httpx


class RESTClientError(Exception):
    """Base class for all typedrest errors."""


class ConfigurationError(RESTClientError):
    """The client was invoked before it was fully configured."""


class TransportError(RESTClientError):
    """No HTTP response was received (DNS, connect, timeout, read)."""


class SerializationError(RESTClientError):
    """The request payload could not be encoded in the selected format."""


class ParseError(RESTClientError):
    """The response body could not be decoded into the declared type."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class ProtocolError(RESTClientError):
    """An HTTP response was received with a 4xx or 5xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        headers: httpx.Headers | None = None,
        body: str = "",
        method: str | None = None,
        uri: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers if headers is not None else httpx.Headers()
        self.body = body
        self.method = method
        self.uri = uri

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    def to_dict(self) -> dict[str, Any]:
        """Summary of the failed exchange, for display or logging."""
        return {
            "method": self.method,
            "uri": self.uri,
            "status_code": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
