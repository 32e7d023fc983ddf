"""Shared Redis client setup for Redis-backed DAOs.

Classes:
    - RedisClientMixin: builds (or adopts) a Redis client, a key schema, and
      pings the server once on construction.

Example:
    >>> class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    ...     pass
    ...
    >>> dao = ShortURLRedisDAO(redis_host='redis', prefix='edgeshortener:prod')
    >>> dao._healthcheck()
    True
"""

import redis

from edgeshortener.dao.redis.helpers import REDIS_CONNECTION_ERRORS, redis_location
from edgeshortener.dao.redis.redis_key_schema import RedisKeySchema
from edgeshortener.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Redis client and key schema for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis): client used by subclasses.
        keys (RedisKeySchema): builds namespaced key names.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int = 6379,
        redis_db: int = 0,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """Adopt `redis_client`, or connect with the redis_* parameters when it is None.

        Raises:
            DataStoreError:
                If the server doesn't answer the initial PING.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis. Return False on failure, or raise DataStoreError if `raise_error`."""
        try:
            self.redis.ping()
        except REDIS_CONNECTION_ERRORS as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to Redis at {redis_location(self.redis)}. Check the provided configuration parameters."
                ) from e
            return False
        return True
