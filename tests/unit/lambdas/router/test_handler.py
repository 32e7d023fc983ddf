"""Unit tests for the router lambda handler.

Requests are routed end-to-end through the real handlers, with the Redis and
Secrets Manager DAOs swapped for in-memory fakes.

Test coverage includes:

1. Method dispatch (GET /, GET /<shortcode>, POST, OPTIONS, others)
2. CORS preflight responses
3. Create-then-redirect round trips
4. Authorization failures perform no writes
5. Shortcode asymmetry: stored verbatim on create, validated on lookup
6. Unexpected errors are turned into 500 responses
"""

import json
import string
from typing import cast
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from edgeshortener.types import LambdaEvent, LambdaContext
from edgeshortener.lambdas.router import app
from edgeshortener.lambdas.editor import app as editor_app
from edgeshortener.lambdas.redirect_url import app as redirect_url_app
from edgeshortener.lambdas.shorten_url import app as shorten_url_app


def request(method: str, path: str, body: str | None = None, headers: dict[str, str] | None = None) -> LambdaEvent:
    return cast(
        LambdaEvent,
        {
            'resource': '/{proxy+}',
            'httpMethod': method,
            'path': path,
            'headers': {'User-Agent': 'pytest', **(headers or {})},
            'body': body,
            'isBase64Encoded': False,
            'requestContext': {'domainName': 'testhost:1000', 'stage': 'test'},
        },
    )


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'router'})


@pytest.fixture(autouse=True)
def _patch_dependencies(monkeypatch: MonkeyPatch, memory_dao, memory_secrets) -> None:
    monkeypatch.delenv('APP_ENV', raising=False)
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    for module in (redirect_url_app, shorten_url_app):
        monkeypatch.setattr(module, 'redis_config', lambda: {})
        monkeypatch.setattr(module, 'ShortURLRedisDAO', lambda *a, **kw: memory_dao)
    for module in (editor_app, shorten_url_app):
        monkeypatch.setattr(module, 'SecretsManagerDAO', lambda *a, **kw: memory_secrets)


@pytest.fixture
def cookie(passcode: str) -> dict[str, str]:
    return {'Cookie': f'passcode={passcode}'}


def create(context, url: str, short: str | None = None, headers: dict[str, str] | None = None) -> dict:
    payload = {'url': url} if short is None else {'short': short, 'url': url}
    return app.lambda_handler(request('POST', '/', json.dumps(payload), headers), context)


# -------------------------------
# 1. Method dispatch
# -------------------------------


def test_get_root_serves_editor(context, passcode):
    response = app.lambda_handler(request('GET', '/'), context)

    assert response['statusCode'] == 200
    assert response['headers']['Set-Cookie'] == f'passcode={passcode}; Secure; HttpOnly; SameSite=Strict'


def test_get_root_with_missing_passcode(context, memory_secrets):
    memory_secrets.secrets.clear()

    response = app.lambda_handler(request('GET', '/'), context)

    assert response['statusCode'] == 500
    assert response['body'] == 'Missing configuration'


def test_get_shortcode_redirects(context, memory_dao):
    memory_dao.links['abc12345'] = 'https://example.com/page'

    response = app.lambda_handler(request('GET', '/abc12345'), context)

    assert response['statusCode'] == 301
    assert response['headers']['Location'] == 'https://example.com/page'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'


def test_get_api_redirects_to_docs(context, memory_dao):
    memory_dao.links['api'] = 'https://example.com/shadowed'

    response = app.lambda_handler(request('GET', '/api'), context)

    assert response['statusCode'] == 301
    assert response['headers']['Location'] == 'https://developer.fastly.com/reference/api/'
    assert memory_dao.reads == 0


@pytest.mark.parametrize('path', ['/', '/anything', '/a/b/c'])
def test_post_accepts_any_path(context, cookie, memory_dao, path):
    event = request('POST', path, json.dumps({'short': 'custom1', 'url': 'https://example.com'}), cookie)

    response = app.lambda_handler(event, context)

    assert response['statusCode'] == 201
    assert memory_dao.links == {'custom1': 'https://example.com'}


@pytest.mark.parametrize('method', ['PUT', 'DELETE', 'PATCH', 'HEAD', 'TRACE'])
def test_other_methods_are_not_allowed(context, method):
    response = app.lambda_handler(request(method, '/abc12345'), context)

    assert response['statusCode'] == 405
    assert response['headers']['Allow'] == 'GET, POST, OPTIONS'
    assert response['headers']['Content-Type'] == 'text/plain; charset=utf-8'
    assert response['body'] == 'This method is not allowed\n'


def test_http_api_event_is_routed(context, memory_dao):
    memory_dao.links['abc12345'] = 'https://example.com/page'
    event = {'rawPath': '/abc12345', 'headers': {}, 'requestContext': {'http': {'method': 'GET', 'path': '/abc12345'}}}

    response = app.lambda_handler(event, context)

    assert response['statusCode'] == 301
    assert response['headers']['Location'] == 'https://example.com/page'


# -------------------------------
# 2. CORS preflight
# -------------------------------


@pytest.mark.parametrize('path, body', [('/', None), ('/anything', 'ignored'), ('/abc12345', '{"url": 1}')])
def test_options_preflight(context, memory_dao, memory_secrets, path, body):
    memory_secrets.secrets.clear()

    response = app.lambda_handler(request('OPTIONS', path, body), context)

    assert response['statusCode'] == 204
    assert response['headers'] == {
        'Allow': 'GET, POST, OPTIONS',
        'Access-Control-Allow-Origin': '*',
        'Access-Control-Allow-Headers': '*',
        'Access-Control-Allow-Methods': '*',
    }
    assert response['body'] == ''
    assert memory_dao.reads == 0
    assert memory_dao.writes == 0


# -------------------------------
# 3. Create-then-redirect round trips
# -------------------------------


def test_create_then_redirect(context, cookie):
    response = create(context, 'https://example.com', headers=cookie)

    assert response['statusCode'] == 201
    assert response['headers']['Access-Control-Allow-Origin'] == '*'
    short = json.loads(response['body'])['short']
    assert len(short) == 8
    assert set(short) <= set(string.ascii_letters + string.digits)

    redirect = app.lambda_handler(request('GET', f'/{short}'), context)

    assert redirect['statusCode'] == 301
    assert redirect['headers']['Location'] == 'https://example.com'


def test_create_with_custom_shortcode_then_redirect(context, cookie):
    response = create(context, 'https://example.com', short='custom1', headers=cookie)
    assert json.loads(response['body']) == {'short': 'custom1'}

    redirect = app.lambda_handler(request('GET', '/custom1'), context)

    assert redirect['statusCode'] == 301
    assert redirect['headers']['Location'] == 'https://example.com'


def test_second_create_with_same_shortcode_wins(context, cookie):
    create(context, 'https://example.com/first', short='custom1', headers=cookie)
    create(context, 'https://example.com/second', short='custom1', headers=cookie)

    redirect = app.lambda_handler(request('GET', '/custom1'), context)

    assert redirect['headers']['Location'] == 'https://example.com/second'


# -------------------------------
# 4. Authorization failures
# -------------------------------


@pytest.mark.parametrize('headers', [None, {'Cookie': 'passcode=wrong'}, {'Cookie': 'other=s3cr3t-passcode'}])
def test_create_without_valid_passcode(context, memory_dao, headers):
    response = create(context, 'https://example.com', short='custom1', headers=headers)

    assert response['statusCode'] == 406
    assert response['body'] == 'passcode not matching'
    assert memory_dao.writes == 0

    lookup = app.lambda_handler(request('GET', '/custom1'), context)
    assert lookup['statusCode'] == 404
    assert lookup['body'] == 'redirect location not found'


def test_create_after_passcode_rotation(context, cookie, memory_secrets):
    memory_secrets.secrets['passcode'] = 'rotated'

    response = create(context, 'https://example.com', headers=cookie)

    assert response['statusCode'] == 406


# -------------------------------
# 5. Shortcode asymmetry
# -------------------------------


def test_non_alphanumeric_shortcode_is_stored_but_unreachable(context, cookie, memory_dao):
    response = create(context, 'https://example.com', short='a-b', headers=cookie)

    assert response['statusCode'] == 201
    assert memory_dao.links == {'a-b': 'https://example.com'}

    lookup = app.lambda_handler(request('GET', '/a-b'), context)

    assert lookup['statusCode'] == 404
    assert lookup['body'] == 'mal-formatted short id'
    assert memory_dao.reads == 0


@pytest.mark.parametrize('path', ['/a.b', '/a%2Fb', '/ab/', '/ä1'])
def test_malformed_shortcode_never_touches_store(context, memory_dao, path):
    response = app.lambda_handler(request('GET', path), context)

    assert response['statusCode'] == 404
    assert memory_dao.reads == 0


# -------------------------------
# 6. Unexpected errors
# -------------------------------


def test_unexpected_error_responds_500(monkeypatch: MonkeyPatch, context):
    monkeypatch.setattr(app.redirect_url, 'lambda_handler', MagicMock(side_effect=RuntimeError('boom')))

    response = app.lambda_handler(request('GET', '/abc12345'), context)

    assert response['statusCode'] == 500
    assert response['body'] == 'Internal Server Error'
