"""Shared fixtures for typedrest tests."""

import logging

import httpx
import pytest

from typedrest.client.base import RESTClientBase
from typedrest.config import ClientConfig, set_config
from typedrest.logging_config import INVOKER_LOGGER, PACKAGE_LOGGER


RESOURCE_URI = "https://api.example.com/users"


@pytest.fixture(autouse=True)
def default_config():
    """Isolate every test from the environment and any .env file."""
    config = ClientConfig()
    set_config(config)
    yield config
    set_config(None)


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code=200, content=b"", headers=None, exc=None):
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"simulated {self.exc.__name__}", request=request)
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client():
    """Build a client whose transport replays the given recorder."""
    def _make(rec: Recorder, uri: str | None = RESOURCE_URI, config: ClientConfig | None = None):
        return RESTClientBase(uri, config=config, transport=httpx.MockTransport(rec))
    return _make


@pytest.fixture
def clean_logging():
    """Remove handlers and levels set on the typedrest loggers."""
    yield
    for name in (PACKAGE_LOGGER, INVOKER_LOGGER):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
    logging.getLogger(PACKAGE_LOGGER).propagate = True
