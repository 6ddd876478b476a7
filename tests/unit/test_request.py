"""Unit tests for request normalization helpers."""

from unittest.mock import Mock

import pytest

from shared.utils.request import (
    UNKNOWN_REQUEST_ID,
    resolve_correlation_id,
    resolve_path,
    resolve_request_id,
    resolve_trace_id,
    resolve_user_agent,
)


class TestResolvePath:
    """Test cases for resolve_path."""

    def test_returns_path_verbatim(self):
        assert resolve_path({"path": "/hello/world"}, "/hello") == "/hello/world"

    @pytest.mark.parametrize("event", [{}, {"path": ""}, {"path": None}, None])
    def test_missing_or_empty_path_uses_default(self, event):
        assert resolve_path(event, "/users") == "/users"


class TestResolveRequestId:
    """Test cases for resolve_request_id."""

    def test_returns_request_context_id(self):
        event = {"requestContext": {"requestId": "abc-123"}}
        assert resolve_request_id(event) == "abc-123"

    @pytest.mark.parametrize(
        "event",
        [
            {},
            {"requestContext": None},
            {"requestContext": {}},
            {"requestContext": {"requestId": None}},
            None,
        ],
    )
    def test_missing_request_id_is_unknown(self, event):
        assert resolve_request_id(event) == UNKNOWN_REQUEST_ID == "unknown"


def test_resolve_correlation_id_uses_lambda_request_id():
    context = Mock(aws_request_id="lambda-id")
    assert resolve_correlation_id(context) == "lambda-id"


class TestResolveTraceId:
    """Test cases for resolve_trace_id."""

    def test_reads_environment_at_call_time(self, monkeypatch):
        monkeypatch.setenv("_X_AMZN_TRACE_ID", "Root=1-5759e988-bd862e3fe1be46a994272793")
        assert resolve_trace_id() == "Root=1-5759e988-bd862e3fe1be46a994272793"

        monkeypatch.setenv("_X_AMZN_TRACE_ID", "Root=1-other")
        assert resolve_trace_id() == "Root=1-other"

    def test_unset_is_empty_string(self, monkeypatch):
        monkeypatch.delenv("_X_AMZN_TRACE_ID", raising=False)
        assert resolve_trace_id() == ""


def test_resolve_user_agent_is_case_sensitive():
    assert resolve_user_agent({"headers": {"User-Agent": "curl/8.0"}}) == "curl/8.0"
    assert resolve_user_agent({"headers": {"user-agent": "curl/8.0"}}) is None
    assert resolve_user_agent({"headers": None}) is None
