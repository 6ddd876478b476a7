"""
Response builders for API Gateway proxy integrations.

Every response, success or fallback, carries ``Content-Type: application/json``
and the CORS headers so browsers can read error bodies too.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

JSON_CONTENT_TYPE = 'application/json'

CORS_HEADERS: Dict[str, str] = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': (
        'Content-Type,X-Amz-Date,Authorization,X-Api-Key,'
        'X-Amz-Security-Token'
    ),
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
}

Body = Union[BaseModel, Dict[str, Any]]


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    now = datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f'{now.microsecond // 1000:03d}Z'


def _to_json(body: Body, pretty: bool) -> str:
    if isinstance(body, BaseModel):
        body = body.model_dump(mode='json', by_alias=True)
    return json.dumps(body, indent=2 if pretty else None)


def _headers(extra: Optional[Dict[str, str]]) -> Dict[str, str]:
    headers = {'Content-Type': JSON_CONTENT_TYPE, **CORS_HEADERS}
    if extra:
        headers.update(extra)
    return headers


def build_response(
    status_code: int,
    body: Body,
    headers: Optional[Dict[str, str]] = None,
    pretty: bool = True,
) -> Dict[str, Any]:
    """
    Build an API Gateway proxy result.

    Args:
        status_code: HTTP status code
        body: Pydantic model (dumped by alias) or plain dict
        headers: Extra headers merged over the JSON and CORS defaults
        pretty: Indent the JSON body by two spaces

    Returns:
        Dict with ``statusCode``, ``headers`` and a JSON string ``body``
    """
    return {
        'statusCode': status_code,
        'headers': _headers(headers),
        'body': _to_json(body, pretty),
    }


def build_error_response(body: Body, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Build the 500 fallback response with a compact JSON body."""
    return build_response(500, body, headers=headers, pretty=False)
