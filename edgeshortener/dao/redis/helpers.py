import functools
from typing import Any
from collections.abc import Callable

import redis

from edgeshortener.dao.exceptions import DataStoreError


__all__ = []


# Connectivity failures worth reporting as an unavailable data store
REDIS_CONNECTION_ERRORS = (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)


def redis_location(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' of the server a Redis client points to."""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error[F: Callable[..., Any]](method: F) -> F:
    """Turn Redis connectivity errors raised by a DAO method into DataStoreError

    The wrapped method's instance must expose its client as `self.redis`.

    Example:
        >>> @handle_redis_connection_error
        ... def get(self, shortcode):
        ...     return self.redis.get(shortcode)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except REDIS_CONNECTION_ERRORS as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e

    return wrapper
