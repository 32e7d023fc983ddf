"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO.

Responsibilities:
    - Store and retrieve short URL mappings in Redis;
    - Raise appropriate DAO exceptions on missing keys and connectivity issues.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from edgeshortener.models import ShortURLModel
    >>> from edgeshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix='edgeshortener:dev')
    >>> dao.insert(ShortURLModel(target='https://example.com/page', shortcode='abc12345'))
    <ShortURLRedisDAO>
    >>> dao.get('abc12345').target
    'https://example.com/page'
"""

from beartype import beartype

from edgeshortener.models import ShortURLModel
from edgeshortener.dao.base import ShortURLBaseDAO
from edgeshortener.dao.redis.mixins import RedisClientMixin
from edgeshortener.dao.redis.helpers import handle_redis_connection_error
from edgeshortener.dao.exceptions import ShortURLNotFoundError


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLRedisDAO:
            Store a short URL mapping, overwriting an existing one with the same shortcode.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLRedisDAO':
        """Store a short URL mapping in Redis

        NOTE: A plain SET without NX. Two concurrent inserts for the same
              shortcode are not coordinated and the last write wins.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If a Redis connection issue occurs.
        """
        self.redis.set(self.keys.link_url_key(short_url.shortcode), short_url.target)
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        target = self.redis.get(self.keys.link_url_key(shortcode))
        if target is None:
            raise ShortURLNotFoundError('redirect location not found')

        if isinstance(target, bytes):
            target = target.decode('utf-8')
        return ShortURLModel(target=target, shortcode=shortcode)
