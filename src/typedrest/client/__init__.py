"""
Typed REST client module.

Provides the client base and its building blocks:
- RESTClientBase verb methods (get, put, post, post_as_form, delete, head)
- RESTResponse envelope (status code, decoded value, headers)
- invoke() for a single HTTP exchange

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from typedrest.client.base import RESTClientBase
from typedrest.client.envelope import RESTResponse
from typedrest.client.invoker import invoke

__all__ = [
    "RESTClientBase",
    "RESTResponse",
    "invoke",
]
