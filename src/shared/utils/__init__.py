from shared.utils.observability import Observability, bind_invocation, create_observability, flush_metrics
from shared.utils.request import (
    UNKNOWN_REQUEST_ID,
    resolve_correlation_id,
    resolve_path,
    resolve_request_id,
    resolve_trace_id,
    resolve_user_agent,
)
from shared.utils.response import CORS_HEADERS, build_error_response, build_response, utc_timestamp

__all__ = [
    "Observability",
    "bind_invocation",
    "create_observability",
    "flush_metrics",
    "UNKNOWN_REQUEST_ID",
    "resolve_correlation_id",
    "resolve_path",
    "resolve_request_id",
    "resolve_trace_id",
    "resolve_user_agent",
    "CORS_HEADERS",
    "build_error_response",
    "build_response",
    "utc_timestamp",
]
