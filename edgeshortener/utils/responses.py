"""API Gateway Lambda Proxy responses

Every response is a dict with `statusCode`, `headers` and `body` keys. Error
bodies are plain text; the only JSON body is the one returned on creation.
"""

import json

from edgeshortener.constants import ALLOWED_METHODS, ContentType
from edgeshortener.types import HttpHeaders, LambdaResponse


CORS_ORIGIN_HEADERS: HttpHeaders = {'Access-Control-Allow-Origin': '*'}

CORS_PREFLIGHT_HEADERS: HttpHeaders = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': '*',
    'Access-Control-Allow-Methods': '*',
}


def text_response(status_code: int, message: str, headers: HttpHeaders | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': ContentType.TEXT, **(headers or {})},
        'body': message,
    }


def response_200_html(*, body: str, set_cookie: str) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': ContentType.HTML, 'Set-Cookie': set_cookie},
        'body': body,
    }


def response_201(*, shortcode: str) -> LambdaResponse:
    return {
        'statusCode': 201,
        'headers': {'Content-Type': ContentType.JSON, **CORS_ORIGIN_HEADERS},
        'body': json.dumps({'short': shortcode}),
    }


def response_204_preflight() -> LambdaResponse:
    return {
        'statusCode': 204,
        'headers': {'Allow': ALLOWED_METHODS, **CORS_PREFLIGHT_HEADERS},
        'body': '',
    }


def response_301(*, location: str, cors: bool = True) -> LambdaResponse:
    headers = {'Location': location}
    if cors:
        headers.update(CORS_ORIGIN_HEADERS)
    return {
        'statusCode': 301,
        'headers': headers,
        'body': '',  # no body needed for redirects
    }


def response_404(message: str) -> LambdaResponse:
    return text_response(404, message)


def response_405() -> LambdaResponse:
    return text_response(405, 'This method is not allowed\n', headers={'Allow': ALLOWED_METHODS})


def response_406(message: str) -> LambdaResponse:
    return text_response(406, message)


def response_500(message: str | None = None) -> LambdaResponse:
    return text_response(500, message or 'Internal Server Error')
