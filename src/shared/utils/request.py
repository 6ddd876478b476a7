"""
Request normalization helpers.

API Gateway events are loosely structured: any field may be missing, and
``requestContext`` or ``headers`` may be ``None`` rather than absent. These
helpers always return a usable value and never raise.
"""

import os
from typing import Any, Dict, Optional

UNKNOWN_REQUEST_ID = 'unknown'
TRACE_ID_ENV = '_X_AMZN_TRACE_ID'


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def resolve_path(event: Optional[Dict[str, Any]], default: str) -> str:
    """Return the request path, or ``default`` when it is missing or empty."""
    path = _as_dict(event).get('path')
    if isinstance(path, str) and path:
        return path
    return default


def resolve_request_id(event: Optional[Dict[str, Any]]) -> str:
    """Return ``requestContext.requestId``, or ``"unknown"`` when absent."""
    request_context = _as_dict(_as_dict(event).get('requestContext'))
    request_id = request_context.get('requestId')
    if isinstance(request_id, str) and request_id:
        return request_id
    return UNKNOWN_REQUEST_ID


def resolve_correlation_id(context: Any) -> str:
    """The Lambda request id is the correlation anchor for logs, traces and headers."""
    return context.aws_request_id


def resolve_trace_id() -> str:
    # set per invocation by the Lambda runtime, so it is never cached
    return os.environ.get(TRACE_ID_ENV, '')


def resolve_user_agent(event: Optional[Dict[str, Any]]) -> Optional[str]:
    return _as_dict(_as_dict(event).get('headers')).get('User-Agent')
