"""Secret provider DAO backed by AWS Secrets Manager

The shared passcode is stored as a JSON secret:

    {
        "passcode": "<shared passcode>"
    }

The secret is fetched on every `get()` call. Nothing is cached between
requests, so rotating the secret in Secrets Manager takes effect immediately.

Environment variables used:
    PASSCODE_SECRET      : Secrets Manager secret name (or ARN) holding the JSON document
    LOCALSTACK_ENDPOINT  : LocalStack endpoint URL for local development

Example:
    >>> from edgeshortener.dao.secrets import SecretsManagerDAO
    >>> dao = SecretsManagerDAO(secret_id='edgeshortener/dev/passcode')
    >>> dao.get('passcode')
    's3cr3t'
"""

import os
import json
import logging

import boto3
from beartype import beartype
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from edgeshortener.constants import ENV
from edgeshortener.dao.base import SecretBaseDAO
from edgeshortener.dao.exceptions import DataStoreError
from edgeshortener.exceptions import MalformedResponseError
from edgeshortener.types import SecretPayload
from edgeshortener.utils.helpers import require_environment
from edgeshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


class SecretsManagerDAO(SecretBaseDAO):
    """AWS Secrets Manager implementation of SecretBaseDAO.

    Attributes:
        secret_id (str):
            Name or ARN of the JSON secret.
        client (BaseClient):
            boto3 Secrets Manager client.
    """

    def __init__(self, secret_id: str | None = None, secrets_client: BaseClient | None = None):
        self.secret_id = secret_id or self._resolve_secret_id()

        # fmt: off
        secrets_client_kwargs = {
            'endpoint_url': os.environ.get(ENV.LocalStack.ENDPOINT, 'http://localhost:4566'),
        } if running_locally() else {}
        # fmt: on
        self.client = secrets_client or boto3.client('secretsmanager', **secrets_client_kwargs)

    @staticmethod
    @require_environment(ENV.Secrets.PASSCODE_SECRET)
    def _resolve_secret_id() -> str:
        return os.environ[ENV.Secrets.PASSCODE_SECRET]

    @beartype
    def get(self, name: str, **kwargs) -> str | None:
        """Read `name` from the JSON secret.

        Returns:
            str | None: The value, or None if the secret or the key doesn't exist.

        Raises:
            DataStoreError:
                If Secrets Manager can't be reached or denies access.
            MalformedResponseError:
                If the secret isn't a JSON object.
        """
        payload = self._payload()
        if payload is None:
            return None

        value = payload.get(name)
        if value is None:
            logger.debug('Secret value is not set.', extra={'secretId': self.secret_id, 'secretKey': name})
            return None
        return str(value)

    def _payload(self) -> SecretPayload | None:
        try:
            raw = self.client.get_secret_value(SecretId=self.secret_id).get('SecretString')
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') == 'ResourceNotFoundException':
                logger.warning('Secret not found in Secrets Manager.', extra={'secretId': self.secret_id})
                return None
            raise DataStoreError(f"Can't read secret '{self.secret_id}' from Secrets Manager.") from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't connect to Secrets Manager to read secret '{self.secret_id}'.") from e

        try:
            payload = json.loads(raw or '{}')
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Invalid JSON in secret '{self.secret_id}'") from e

        if not isinstance(payload, dict):
            raise MalformedResponseError(f"Secret '{self.secret_id}' must be a JSON object")
        return payload
