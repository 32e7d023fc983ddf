"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortURLModel is not found in the data store.

    DataStoreError:
        Raised when the data store is unreachable or misconfigured
        (e.g., connection issues, timeouts, denied AWS calls, etc.).

Example:
    >>> from edgeshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError('redirect location not found')
    Traceback (most recent call last):
        ...
    edgeshortener.dao.exceptions.ShortURLNotFoundError: redirect location not found
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass
