"""Accessors for API Gateway Lambda Proxy events

Both payload formats are supported:
    - REST API (v1): `httpMethod`, `path`, `headers`, `multiValueHeaders`
    - HTTP API (v2): `requestContext.http.method`, `rawPath`, `headers`, `cookies`

Header names are matched case-insensitively, since API Gateway forwards them
as sent by the client (v1) or lower-cased (v2).
"""

import base64
import binascii

from edgeshortener.exceptions import MalformedRequestError
from edgeshortener.types import LambdaEvent


def get_method(event: LambdaEvent) -> str:
    method = event.get('httpMethod') or event.get('requestContext', {}).get('http', {}).get('method') or ''
    return method.upper()


def get_path(event: LambdaEvent) -> str:
    path = event.get('path')
    if path is None:
        path = event.get('rawPath', '')
    return path


def get_header(event: LambdaEvent, name: str) -> str | None:
    """Return the value of header `name`, or None if the request doesn't carry it."""
    name = name.lower()
    for key, value in (event.get('headers') or {}).items():
        if key.lower() == name:
            return value
    for key, values in (event.get('multiValueHeaders') or {}).items():
        if key.lower() == name and values:
            return ', '.join(values)
    return None


def get_cookie_header(event: LambdaEvent) -> str | None:
    """Return the raw Cookie header.

    HTTP API (v2) events move cookies out of the headers into a `cookies` list,
    which is joined back with ';' here.
    """
    if event.get('cookies'):
        return ';'.join(event['cookies'])
    return get_header(event, 'Cookie')


def get_content_type(event: LambdaEvent) -> str | None:
    """Return the request's media type without parameters (e.g. '; charset=utf-8')."""
    content_type = get_header(event, 'Content-Type')
    if not content_type:
        return None
    return content_type.split(';', 1)[0].strip().lower()


def get_body(event: LambdaEvent) -> str:
    """Return the request body as text, decoding base64-encoded payloads."""
    body = event.get('body') or ''
    if not event.get('isBase64Encoded'):
        return body

    try:
        return base64.b64decode(body, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        raise MalformedRequestError('mal-formatted request body') from e
