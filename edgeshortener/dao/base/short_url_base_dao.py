"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB, Fastly KV).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from edgeshortener.models import ShortURLModel
        >>> from edgeshortener.dao.redis import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)
        >>> dao.insert(ShortURLModel(target='https://example.com/blog/article-123', shortcode='a1b2c3d4'))

        >>> dao.get('a1b2c3d4').target
        'https://example.com/blog/article-123'
"""

from abc import ABC, abstractmethod

from edgeshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Store a ShortURLModel, overwriting any mapping with the same shortcode.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Mappings never expire and are never merged. The DAO does not provide
          an interface to delete entries (administrative deletion happens
          directly against the data store).
        - No uniqueness check is made on insert: last write wins.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Store a ShortURLModel, overwriting any existing mapping.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be stored.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The stored mapping.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
