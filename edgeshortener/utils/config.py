"""Utility functions for application configuration management.

Configuration is read from environment variables set on the Lambda function
(see `edgeshortener.constants.ENV`). The shared passcode is NOT part of the
configuration: it lives in AWS Secrets Manager and is read per request
(see `edgeshortener.dao.secrets`).

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    redis_config() -> dict
        Return keyword arguments for Redis-backed DAOs.

Example:
    Typical usage inside a Lambda handler:

        >>> from edgeshortener.utils.config import redis_config, app_prefix
        >>> dao = ShortURLRedisDAO(**redis_config(), prefix=app_prefix())
"""

import os
from typing import Any

from edgeshortener.constants import ENV
from edgeshortener.exceptions import BadConfigurationError
from edgeshortener.utils.helpers import require_environment


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'edgeshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'edgeshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


@require_environment(ENV.Redis.HOST)
def redis_config() -> dict[str, Any]:
    """Return Redis connection parameters as DAO keyword arguments.

    Environment variables used:
        REDIS_HOST      : required
        REDIS_PORT      : optional (default: 6379)
        REDIS_DB        : optional (default: 0)
        REDIS_USERNAME  : optional
        REDIS_PASSWORD  : optional

    Raises:
        MissingEnvironmentVariableError:
            If REDIS_HOST is not set.
        BadConfigurationError:
            If REDIS_PORT or REDIS_DB are not integers.
    """
    port_str = os.environ.get(ENV.Redis.PORT, '6379')
    db_str = os.environ.get(ENV.Redis.DB, '0')
    try:
        port = int(port_str)
        db = int(db_str)
    except ValueError as e:
        raise BadConfigurationError(f'Invalid Redis port/db values: port={port_str!r} db={db_str!r}') from e

    return {
        'redis_host': os.environ[ENV.Redis.HOST],
        'redis_port': port,
        'redis_db': db,
        'redis_username': os.environ.get(ENV.Redis.USERNAME) or None,
        'redis_password': os.environ.get(ENV.Redis.PASSWORD) or None,
    }
