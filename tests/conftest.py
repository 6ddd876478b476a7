"""
Pytest configuration and shared fixtures for the Lambda handlers.

This module provides the Powertools test environment, API Gateway events,
Lambda contexts and mock observability collaborators used across unit,
end-to-end and benchmark tests.
"""

import os
from typing import Any, Dict
from unittest.mock import Mock

import pytest

# Handler modules build their Powertools collaborators at import time, which
# happens during collection, before any fixture runs.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "ENVIRONMENT": "test",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})
os.environ.pop("POWERTOOLS_SERVICE_NAME", None)
os.environ.pop("_X_AMZN_TRACE_ID", None)

from shared.utils.observability import Observability  # noqa: E402


@pytest.fixture
def api_gateway_event() -> Dict[str, Any]:
    """Create a sample API Gateway event for testing."""
    return {
        "resource": "/hello",
        "path": "/hello",
        "httpMethod": "GET",
        "headers": {
            "Accept": "application/json",
            "User-Agent": "pytest/test-agent",
        },
        "multiValueHeaders": {},
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "requestId": "test-request-id-123",
            "accountId": "123456789012",
            "stage": "test",
            "resourcePath": "/hello",
            "httpMethod": "GET",
            "apiId": "testapi123",
            "requestTime": "20/Sep/2024:12:05:00 +0000",
            "requestTimeEpoch": 1726833900,
        },
        "body": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 256
    context.aws_request_id = "lambda-request-id-456"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def mock_observability() -> Observability:
    """Observability bundle whose logger, tracer and metrics are mocks."""
    return Observability(logger=Mock(), tracer=Mock(), metrics=Mock())


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line("markers", "benchmark: Performance benchmark tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path or path.endswith("test_lambda_function.py"):
            item.add_marker(pytest.mark.unit)
        elif "e2e" in path:
            item.add_marker(pytest.mark.e2e)
        elif "benchmark" in path:
            item.add_marker(pytest.mark.benchmark)
