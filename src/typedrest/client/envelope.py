"""
Uniform response envelope returned by the verb methods.
"""

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Generic, TypeVar

import httpx


T = TypeVar("T")

SUCCESS_STATUSES = frozenset({HTTPStatus.OK, HTTPStatus.CREATED})


@dataclass(frozen=True)
class RESTResponse(Generic[T]):
    """Status code, decoded body and headers of one exchange."""
    status_code: int
    value: T | None = None
    headers: httpx.Headers = field(default_factory=httpx.Headers)

    @property
    def status(self) -> HTTPStatus | None:
        """Named status, or None for codes HTTPStatus does not define (e.g. 299)."""
        try:
            return HTTPStatus(self.status_code)
        except ValueError:
            return None

    @property
    def is_success(self) -> bool:
        """True for the statuses whose body gets decoded (200 and 201)."""
        return self.status_code in SUCCESS_STATUSES

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")
