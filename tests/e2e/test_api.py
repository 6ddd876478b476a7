"""
End-to-end tests against a deployed API Gateway stage.

Set ``API_BASE_URL`` to the stage URL to run them; they are skipped otherwise.
"""

import os
import re

import httpx
import pytest

API_BASE_URL = os.environ.get("API_BASE_URL")
TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

pytestmark = pytest.mark.skipif(not API_BASE_URL, reason="API_BASE_URL is not set")


@pytest.fixture(scope="module")
def integration_client():
    """HTTP client for the deployed API."""
    with httpx.Client(base_url=API_BASE_URL, timeout=30.0) as client:
        yield client


@pytest.mark.e2e
class TestHelloAPI:
    """End-to-end tests for GET /hello."""

    def test_hello(self, integration_client: httpx.Client):
        response = integration_client.get("/hello")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["x-correlation-id"] == response.headers["x-request-id"]

        body = response.json()
        assert body["message"] == "Hello from TypeScript Lambda with Powertools!"
        assert body["version"] == "v1.0.0"
        assert body["requestId"] != "unknown"
        assert TIMESTAMP_PATTERN.match(body["timestamp"])


@pytest.mark.e2e
class TestUsersAPI:
    """End-to-end tests for GET /users."""

    def test_users(self, integration_client: httpx.Client):
        response = integration_client.get("/users")

        assert response.status_code == 200
        assert response.headers["cache-control"] == "max-age=300"

        body = response.json()
        assert body["count"] == len(body["users"]) == 3
        assert [user["name"] for user in body["users"]] == ["John Doe", "Jane Smith", "Alice Johnson"]
