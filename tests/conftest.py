"""Shared fixtures for Orbitrace tests."""

import json
from typing import Dict, List

import pytest

from orbitrace import TransportResponse


class RecordingTransport:
    """Transport that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, text: str = '{"ok": true}'):
        self.status_code = status_code
        self.text = text
        self.requests: List[Dict] = []

    async def send(self, url, content, headers):
        self.requests.append({"url": url, "content": content, "headers": headers})
        return TransportResponse(status_code=self.status_code, text=self.text)

    @property
    def bodies(self):
        return [json.loads(request["content"]) for request in self.requests]


@pytest.fixture
def base_config():
    """Minimal valid configuration with only the required fields."""
    return {
        "apiKey": "k",
        "orgId": "o",
        "projectId": "p",
        "endpoint": "https://collect.example/v1",
    }


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def transport_factory():
    """Build a recording transport with a custom response."""
    return RecordingTransport
