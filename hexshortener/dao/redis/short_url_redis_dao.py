"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO.

Responsibilities:
    - Atomically insert short URL mappings with a TTL unless they exist;
    - Retrieve short URL mappings together with their remaining TTL;
    - Raise appropriate DAO exceptions.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from hexshortener.models import ShortURLModel
    >>> from hexshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(redis_url='redis://localhost:6379/0')

    >>> short_url = ShortURLModel(
    ...     target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==',
    ...     shortcode='dca7568'
    ... )
    >>> dao.insert_if_absent(short_url, ttl=60)
    True

    >>> retrieved = dao.get('dca7568')
    >>> retrieved.target
    'aHR0cHM6Ly9leGFtcGxlLmNvbQ=='
    >>> retrieved.expires_at
    <datetime>
"""

from datetime import datetime, timedelta, UTC

from beartype import beartype

from hexshortener.models import ShortURLModel
from hexshortener.dao.base import ShortURLBaseDAO
from hexshortener.dao.redis.mixins import RedisClientMixin
from hexshortener.dao.redis.helpers import handle_redis_connection_error
from hexshortener.dao.exceptions import ShortURLNotFoundError


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert_if_absent(short_url: ShortURLModel, ttl: int, **kwargs) -> bool:
            SET NX EX a short URL mapping.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping and its expiry by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert_if_absent(self, short_url: ShortURLModel, ttl: int, **kwargs) -> bool:
        """Insert a short URL mapping into Redis unless the shortcode exists

        The write is a single `SET <key> <value> NX EX <ttl>` command, so two
        concurrent writers of the same shortcode can't both succeed. A second
        writer leaves the existing value and TTL untouched.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the mapping.
            ttl (int):
                Time-To-Live of the mapping in seconds (must be positive).
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            bool: True if the mapping was written, False if it already existed.

        Raises:
            ValueError:
                If ttl is not a positive number of seconds.
            DataStoreError:
                If a Redis connection issue occurs.

        Example:
            >>> dao.insert_if_absent(ShortURLModel(target='aHR0cHM6Ly9hLmNvbQ==', shortcode='abc1234'), ttl=60)
            True
        """
        if ttl <= 0:
            raise ValueError(f'TTL must be a positive number of seconds (given value: {ttl}).')

        link_key = self.keys.link_key(short_url.shortcode)
        written = self.redis.set(link_key, short_url.target, nx=True, ex=ttl)
        return bool(written)

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Fetches the stored value and its remaining TTL using a single Redis
        transaction (so both describe the same key state). Neither GET nor
        TTL extend the key's expiry.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance if found.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('dca7568')
            ShortURLModel(target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==', shortcode='dca7568', expires_at=...)
        """
        link_key = self.keys.link_key(shortcode)

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.get(link_key)
            pipe.ttl(link_key)
            value, ttl = pipe.execute()

        if value is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        # TTL -1 means the key has no expiry (not written by this DAO)
        expires_at = datetime.now(UTC) + timedelta(seconds=ttl) if ttl is not None and ttl >= 0 else None
        return ShortURLModel(target=value, shortcode=shortcode, expires_at=expires_at)
