from typing import cast

import pytest
from pytest import MonkeyPatch

from edgeshortener.types import LambdaContext
from edgeshortener.lambdas.editor import app
from edgeshortener.dao.exceptions import DataStoreError


@pytest.fixture
def event():
    return {'httpMethod': 'GET', 'path': '/', 'headers': {'User-Agent': 'pytest'}}


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'editor'})


@pytest.fixture(autouse=True)
def _patch_secret_dao(monkeypatch: MonkeyPatch, memory_secrets):
    monkeypatch.setattr(app, 'SecretsManagerDAO', lambda *a, **kw: memory_secrets)


def test_lambda_handler(event, context, passcode):
    response = app.lambda_handler(event, context)
    headers = response['headers']

    assert response['statusCode'] == 200
    assert headers['Content-Type'] == 'text/html; charset=utf-8'
    assert headers['Set-Cookie'] == f'passcode={passcode}; Secure; HttpOnly; SameSite=Strict'
    assert '<form id="editor">' in response['body']


def test_lambda_handler_picks_up_rotated_passcode(event, context, memory_secrets):
    memory_secrets.secrets['passcode'] = 'rotated'

    response = app.lambda_handler(event, context)

    assert response['headers']['Set-Cookie'].startswith('passcode=rotated;')


def test_lambda_handler_with_missing_passcode(event, context, memory_secrets):
    memory_secrets.secrets.clear()

    response = app.lambda_handler(event, context)

    assert response['statusCode'] == 500
    assert response['headers']['Content-Type'] == 'text/plain; charset=utf-8'
    assert response['body'] == 'Missing configuration'
    assert 'Set-Cookie' not in response['headers']


def test_lambda_handler_with_unreachable_secret_store(monkeypatch: MonkeyPatch, event, context):
    def unreachable(*args, **kwargs):
        raise DataStoreError("Can't read secret 'edgeshortener/test/passcode' from Secrets Manager.")

    monkeypatch.setattr(app, 'SecretsManagerDAO', unreachable)

    response = app.lambda_handler(event, context)

    assert response['statusCode'] == 500
    assert response['body'] == 'Missing configuration'


def test_editor_page_is_packaged():
    assert app.editor_page().lstrip().startswith('<!DOCTYPE html>')
