"""
Shared pytest fixtures for Intervals.icu gateway testing.
"""
import json
import pytest
from unittest.mock import Mock, patch

import httpx

from intervals_gateway.config import Credentials
from intervals_gateway.sdk.client import IntervalsClient


BASE_URL = "https://intervals.test/api/v1"
API_PREFIX = "/api/v1"
API_KEY = "test-api-key"


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def respond(status=200, **kwargs):
    """Response factory for FakeUpstream routes."""
    return lambda request: httpx.Response(status, **kwargs)


class FakeUpstream:
    """
    Intervals.icu stand-in behind httpx.MockTransport.

    Routes map (method, path) to a list of response factories used in order;
    the last one repeats. Every request is recorded.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, *responses):
        self.routes[(method, API_PREFIX + path)] = list(responses)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        factory = queue.pop(0) if len(queue) > 1 else queue[0]
        return factory(request)

    def calls(self, method=None, path=None):
        return [
            r for r in self.requests
            if (method is None or r.method == method)
            and (path is None or r.url.path == API_PREFIX + path)
        ]

    def client(self, sleep=None) -> IntervalsClient:
        kwargs = {"sleep": sleep} if sleep is not None else {}
        return IntervalsClient(
            Credentials(api_key=API_KEY, base_url=BASE_URL),
            transport=httpx.MockTransport(self.handler),
            **kwargs,
        )


def request_json(request: httpx.Request):
    return json.loads(request.content) if request.content else None


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def mock_client():
    """Opaque client handed to tools; the sdk/api functions are patched per test."""
    return Mock(spec=IntervalsClient)


@pytest.fixture(autouse=True)
def mock_get_client(mock_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Yields the mock function (not the client) so tests can set side_effect
    for error scenarios like missing configuration.
    """
    get_client_fn = Mock(return_value=mock_client)

    modules_to_patch = [
        "intervals_gateway.athlete",
        "intervals_gateway.activities",
        "intervals_gateway.events",
        "intervals_gateway.workouts",
        "intervals_gateway.wellness",
        "intervals_gateway.overview",
        "intervals_gateway.webhook",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_client", get_client_fn)
        p.start()
        patchers.append(p)

    yield get_client_fn

    for p in patchers:
        p.stop()
