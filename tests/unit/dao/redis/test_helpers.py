"""Unit tests for Redis DAO helpers.

Test coverage includes:

1. handle_redis_connection_error() converts connectivity errors to DataStoreError.
2. Non-connectivity errors propagate unchanged.
"""

from unittest.mock import MagicMock

import pytest
import redis

from hexshortener.dao.exceptions import DataStoreError
from hexshortener.dao.redis.helpers import handle_redis_connection_error, describe_redis


class _FakeDAO:
    def __init__(self, error):
        self.redis = MagicMock(spec=redis.Redis)
        self.redis.connection_pool = MagicMock(connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 1})
        self.error = error

    @handle_redis_connection_error
    def call(self):
        raise self.error


def test_describe_redis():
    """Ensure Redis connection details are rendered as host:port/db."""
    assert describe_redis(_FakeDAO(None).redis) == 'redis.test:6379/1'


@pytest.mark.parametrize('error', [redis.exceptions.ConnectionError('down'), redis.exceptions.TimeoutError('slow')])
def test_handle_redis_connection_error(error):
    """Ensure connectivity errors are converted into DataStoreError."""
    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/1.") as exc_info:
        _FakeDAO(error).call()
    assert exc_info.value.__cause__ is error


def test_handle_redis_connection_error_ignores_other_errors():
    """Ensure non-connectivity Redis errors propagate unchanged."""
    with pytest.raises(redis.exceptions.ResponseError):
        _FakeDAO(redis.exceptions.ResponseError('WRONGTYPE')).call()
