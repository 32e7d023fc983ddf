"""Abstract base class for secret/config provider DAOs.

Secrets (e.g. the shared passcode) are distributed out-of-band and read at
request time. Implementations must not cache values across requests, so that
rotating a secret takes effect immediately.
"""

from abc import ABC, abstractmethod


class SecretBaseDAO(ABC):
    """Interface for secret provider data access objects (DAOs).

    Methods:
        get(name: str, **kwargs) -> str | None:
            Return the secret value stored under `name`, or None if it isn't set.
            Raises DataStoreError if the secret store can't be reached.
    """

    @abstractmethod
    def get(self, name: str, **kwargs) -> str | None:
        """Retrieve a secret value by name.

        Args:
            name (str):
                Name of the secret value (e.g. 'passcode').

            **kwargs:
                Additional keyword arguments, used by secret store.

        Returns:
            str | None: The secret value, or None if it doesn't exist.

        Raises:
            DataStoreError:
                If there is an error in the secret store.
        """
        pass
