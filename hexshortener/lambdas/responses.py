"""API Gateway (Lambda Proxy) response builders shared by all handlers."""

import json
from typing import Any

from hexshortener.exceptions import ShortenerError
from hexshortener.types import LambdaResponse, HttpHeaders


CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Origin, Content-Type, Accept',
    'Access-Control-Allow-Methods': 'GET,POST',
}


def response_json(status_code: int, body: Any, headers: HttpHeaders | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_error(error: ShortenerError) -> LambdaResponse:
    """Respond with the error's status code and a short reason."""
    return response_json(error.status_code, {'error': error.message, 'error_code': error.error_code})


def response_302(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location, **CORS_HEADERS},
        'body': json.dumps({}),  # no body needed for redirects
    }
