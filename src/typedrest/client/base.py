"""
REST client base.

Subclass RESTClientBase (or use it directly), set resource_uri, and call
the verb methods with a payload and the type the response should decode
into:

    class UserClient(RESTClientBase):
        def fetch(self, user_id: int) -> User:
            self.resource_uri = f"https://api.example.com/users/{user_id}"
            return self.get(User).value

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import copy
from typing import Any, TypeVar, overload

import httpx

from typedrest.client.envelope import RESTResponse
from typedrest.client.invoker import invoke
from typedrest.config import ClientConfig, get_config
from typedrest.marshal.encoder import encode_payload
from typedrest.marshal.form import to_form_data
from typedrest.marshal.kinds import PayloadKind, ResponseKind


T = TypeVar("T")


class RESTClientBase:
    """Typed verb methods over a single configurable resource URI."""

    def __init__(
        self,
        resource_uri: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.resource_uri = resource_uri
        self.config = config or copy.deepcopy(get_config())
        self.transport = transport

    @property
    def timeout_ms(self) -> int:
        return self.config.timeout_ms

    @timeout_ms.setter
    def timeout_ms(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"timeout_ms must be positive, got {value}")
        self.config.timeout_ms = value

    def _invoke(
        self,
        method: str,
        data: Any = None,
        response_type: Any = Any,
        *,
        payload_kind: PayloadKind | None = None,
        response_kind: ResponseKind | None = None,
        decode: bool = True,
    ) -> RESTResponse:
        # No encoding without a URI; invoke() raises ConfigurationError
        uri = self.resource_uri
        body = encode_payload(data, payload_kind) if uri else None
        return invoke(
            uri,
            method,
            body,
            config=self.config,
            response_type=response_type,
            response_kind=response_kind,
            decode=decode,
            transport=self.transport,
        )

    def get(
        self,
        response_type: type[T] | Any = Any,
        *,
        response_kind: ResponseKind | None = None,
    ) -> RESTResponse[T]:
        """GET the resource and decode the body into response_type."""
        return self._invoke("GET", None, response_type, response_kind=response_kind)

    @overload
    def put(self, data: Any) -> None: ...

    @overload
    def put(
        self,
        data: Any,
        response_type: type[T],
        *,
        payload_kind: PayloadKind | None = None,
        response_kind: ResponseKind | None = None,
    ) -> RESTResponse[T]: ...

    def put(self, data, response_type=None, *, payload_kind=None, response_kind=None):
        """
        PUT data to the resource.

        Without a response_type the response is discarded and None is
        returned; error statuses still raise.
        """
        if response_type is None:
            self._invoke("PUT", data, payload_kind=payload_kind, decode=False)
            return None
        return self._invoke(
            "PUT", data, response_type,
            payload_kind=payload_kind,
            response_kind=response_kind,
        )

    @overload
    def post(self, data: Any) -> None: ...

    @overload
    def post(
        self,
        data: Any,
        response_type: type[T],
        *,
        payload_kind: PayloadKind | None = None,
        response_kind: ResponseKind | None = None,
    ) -> RESTResponse[T]: ...

    def post(self, data, response_type=None, *, payload_kind=None, response_kind=None):
        """
        POST data to the resource.

        Without a response_type the response is discarded and None is
        returned; error statuses still raise.
        """
        if response_type is None:
            self._invoke("POST", data, payload_kind=payload_kind, decode=False)
            return None
        return self._invoke(
            "POST", data, response_type,
            payload_kind=payload_kind,
            response_kind=response_kind,
        )

    def post_as_form(
        self,
        data: Any,
        response_type: type[T] | Any = Any,
        *,
        response_kind: ResponseKind | None = None,
    ) -> RESTResponse[T]:
        """
        POST a structured value as application/x-www-form-urlencoded.

        The value is flattened to name/value fields (scalars only), each
        value is percent-escaped, and the pairs are joined with '&'.
        """
        form = to_form_data(data) if self.resource_uri else None
        return self._invoke(
            "POST", form, response_type,
            payload_kind=PayloadKind.FORM,
            response_kind=response_kind,
        )

    def delete(
        self,
        data: Any = None,
        response_type: type[T] | Any = Any,
        *,
        payload_kind: PayloadKind | None = None,
        response_kind: ResponseKind | None = None,
    ) -> RESTResponse[T]:
        """DELETE the resource, optionally sending data as the body."""
        return self._invoke(
            "DELETE", data, response_type,
            payload_kind=payload_kind,
            response_kind=response_kind,
        )

    def head(self) -> RESTResponse[None]:
        """HEAD the resource. Only status_code and headers are populated."""
        return self._invoke("HEAD", decode=False)
