"""Shared fixtures: in-memory fakes of the data store and secret store DAOs."""

from typing import cast

import pytest

from edgeshortener.models import ShortURLModel
from edgeshortener.dao.base import ShortURLBaseDAO, SecretBaseDAO
from edgeshortener.dao.exceptions import ShortURLNotFoundError


class InMemoryShortURLDAO(ShortURLBaseDAO):
    def __init__(self):
        self.links: dict[str, str] = {}
        self.writes = 0
        self.reads = 0

    def insert(self, short_url: ShortURLModel, **kwargs) -> 'InMemoryShortURLDAO':
        self.writes += 1
        self.links[short_url.shortcode] = short_url.target
        return self

    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        self.reads += 1
        if shortcode not in self.links:
            raise ShortURLNotFoundError('redirect location not found')
        return ShortURLModel(target=self.links[shortcode], shortcode=shortcode)


class InMemorySecretDAO(SecretBaseDAO):
    def __init__(self, secrets: dict[str, str] | None = None):
        self.secrets = dict(secrets or {})

    def get(self, name: str, **kwargs) -> str | None:
        return self.secrets.get(name)


@pytest.fixture
def passcode() -> str:
    return 's3cr3t-passcode'


@pytest.fixture
def memory_dao() -> InMemoryShortURLDAO:
    return InMemoryShortURLDAO()


@pytest.fixture
def memory_secrets(passcode: str) -> InMemorySecretDAO:
    return InMemorySecretDAO({'passcode': passcode})


@pytest.fixture
def short_url_dao_factory(memory_dao: InMemoryShortURLDAO):
    return lambda: cast(ShortURLBaseDAO, memory_dao)


@pytest.fixture
def secret_dao_factory(memory_secrets: InMemorySecretDAO):
    return lambda: cast(SecretBaseDAO, memory_secrets)
