"""
Pytest configuration and fixtures for onboarding tests.

The backend is simulated with httpx.MockTransport; no network access is needed.
"""

import json
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Ensure the grindflow package is importable
import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

API_BASE = "https://api.grindflow.test/api"


class RecordingBackend:
    """Fake backend that records requests and answers with canned responses."""

    def __init__(self):
        self.requests = []
        self.responses = {}  # (method, path) -> response factory or exception

    def respond(self, method: str, path: str, status_code: int = 200, **kwargs):
        """Answer every matching request with a fresh response built from kwargs."""
        self.responses[(method, path)] = lambda: httpx.Response(status_code, **kwargs)

    def fail(self, method: str, path: str, error: Exception):
        """Raise the given transport error for every matching request."""
        self.responses[(method, path)] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"message": "Not found"})
        if isinstance(response, Exception):
            raise response
        return response()

    def sent_json(self, index: int = -1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def backend():
    """Create an empty fake backend."""
    return RecordingBackend()


@pytest_asyncio.fixture
async def http(backend):
    """Create an AsyncClient routed to the fake backend."""
    client = httpx.AsyncClient(
        base_url=API_BASE,
        transport=httpx.MockTransport(backend.handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
def onboarding_client(http):
    """Create an OnboardingClient for testing."""
    from grindflow.onboarding.services.onboarding_service import OnboardingClient
    return OnboardingClient(http)


@pytest.fixture
def full_payload():
    """Wire payload with every field filled in."""
    return {
        "primaryGoal": "build_habits",
        "biggestChallenge": "no_motivation",
        "workStyle": "team",
        "focusArea": "health",
        "firstGoal": "Run 5k three times a week",
        "wantsBuddy": True,
        "buddyEmail": "buddy@example.com",
    }


@pytest.fixture
def sample_data(full_payload):
    """OnboardingData with every field filled in."""
    from grindflow.onboarding.models.onboarding_data import OnboardingData
    return OnboardingData.from_dict(full_payload)
