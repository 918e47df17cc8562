"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism, as long as it supports
per-key expiry (TTL).

Responsibilities:
    - Provide an atomic "set-if-absent with expiry" primitive.
    - Provide a read primitive which never extends a mapping's TTL.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from hexshortener.models import ShortURLModel
        >>> from hexshortener.dao.redis import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)

        >>> short_url = ShortURLModel(
        ...     target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==',
        ...     shortcode='dca7568',
        ... )
        >>> dao.insert_if_absent(short_url, ttl=60)
        True
        >>> dao.insert_if_absent(short_url, ttl=60)
        False

        >>> dao.get('dca7568').target
        'aHR0cHM6Ly9leGFtcGxlLmNvbQ=='
"""

from abc import ABC, abstractmethod

from hexshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert_if_absent(short_url: ShortURLModel, ttl: int, **kwargs) -> bool:
            Atomically store a mapping with a TTL unless its shortcode exists.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Mappings expire automatically. The DAO does not provide an
          interface to manually delete entries.
    """

    @abstractmethod
    def insert_if_absent(self, short_url: ShortURLModel, ttl: int, **kwargs) -> bool:
        """Store a ShortURLModel with an expiry only if its shortcode is free.

        The check and the write must be a single atomic operation against the
        data store, so that concurrent writers of the same shortcode can't both
        succeed.

        Args:
            short_url (ShortURLModel):
                The mapping to be inserted.

            ttl (int):
                Time-To-Live of the mapping in seconds.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if the mapping was written, False if the shortcode
                  already existed (existing value and TTL are left untouched).

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Reading a mapping never extends or resets its TTL.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The stored mapping.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists (or it expired).

            DataStoreError:
                If there is an error in the data store.
        """
        pass
