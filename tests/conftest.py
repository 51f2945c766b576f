"""Pytest configuration and fixtures."""

import json

import httpx
import pytest


class Recorder:
    """Fake Events API endpoint that records requests and answers with a fixed status."""

    def __init__(self, status_code: int = 202, body: dict | None = None):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        payload = json.loads(request.content)
        body = self.body
        if body is None:
            body = {
                "status": "success",
                "message": "Event processed",
                "dedup_key": payload["dedup_key"],
            }
        return httpx.Response(self.status_code, json=body)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recorder():
    """Endpoint accepting every event with 202."""
    return Recorder()


@pytest.fixture
def http_client(recorder):
    """Blocking httpx client routed to the recorder."""
    client = httpx.Client(transport=httpx.MockTransport(recorder))
    yield client
    client.close()


@pytest.fixture
def temp_config(tmp_path):
    """Path for a throwaway config file."""
    return tmp_path / "pager" / "config.yaml"
