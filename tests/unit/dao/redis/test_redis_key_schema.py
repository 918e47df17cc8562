"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Default prefix behavior
   - Confirms the shortcode itself is the key when no prefix is provided.

2. Custom prefix behavior
   - Confirms keys are correctly prefixed when a valid prefix is provided.

3. Invalid prefix types
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from hexshortener.dao.redis.redis_key_schema import RedisKeySchema


@pytest.mark.parametrize('shortcode', ['dca7568', 'AbC1234'])
def test_link_key_without_prefix(shortcode):
    """Ensure link_key() returns the bare shortcode without prefix."""
    assert RedisKeySchema().link_key(shortcode) == shortcode


@pytest.mark.parametrize(
    'prefix, expected',
    [
        ('hexshortener:prod', 'hexshortener:prod:dca7568'),
        ('app', 'app:dca7568'),
    ],
)
def test_link_key_with_prefix(prefix, expected):
    """Ensure link_key() namespaces keys with the prefix."""
    assert RedisKeySchema(prefix=prefix).link_key('dca7568') == expected


@pytest.mark.parametrize('prefix', [123, ['app'], b'app'])
def test_invalid_prefix_type(prefix):
    """Ensure non-string prefixes raise TypeError."""
    with pytest.raises(TypeError, match='Prefix must be of type string'):
        RedisKeySchema(prefix=prefix)
