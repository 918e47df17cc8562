"""Unit tests for the resolution workflow.

Test coverage includes:

1. Successful resolution
   - Ensures a stored shortcode resolves to the original URL.

2. Identifier validation
   - Ensures identifiers other than 7 alphanumeric characters are rejected
     before the store is queried.

3. Lookup failures
   - Unknown shortcodes raise KeyNotFoundError.
   - Corrupted values raise DecodeError.
   - Store outages raise StoreUnavailableError.
"""

from unittest.mock import MagicMock

import pytest

from hexshortener.models import ShortURLModel
from hexshortener.dao.base import ShortURLBaseDAO
from hexshortener.dao.exceptions import DataStoreError
from hexshortener.exceptions import InvalidIdFormatError, KeyNotFoundError, DecodeError, StoreUnavailableError
from hexshortener.workflows import ShortenWorkflow, ResolveWorkflow


# -------------------------------
# 1. Successful resolution
# -------------------------------


def test_resolve_shortened_url(memory_dao):
    """Ensure a shortened URL resolves back to the extracted URL."""
    ShortenWorkflow(dao=memory_dao, host='https://sho.rt').shorten('see https://example.com/a?b=1 now', 60)

    assert ResolveWorkflow(dao=memory_dao).resolve('897f904') == 'https://example.com/a?b=1'


# -------------------------------
# 2. Identifier validation
# -------------------------------


@pytest.mark.parametrize('identifier', ['abc', 'abcdefgh', 'abc-123', 'abc123\n', '', None, 1234567])
def test_resolve_with_invalid_identifier(identifier):
    """Ensure malformed identifiers never reach the store."""
    dao = MagicMock(spec=ShortURLBaseDAO)

    with pytest.raises(InvalidIdFormatError, match='id format is not supported'):
        ResolveWorkflow(dao=dao).resolve(identifier)
    dao.get.assert_not_called()


# -------------------------------
# 3. Lookup failures
# -------------------------------


def test_resolve_unknown_identifier(memory_dao):
    """Ensure unknown shortcodes raise KeyNotFoundError."""
    with pytest.raises(KeyNotFoundError, match='key not found'):
        ResolveWorkflow(dao=memory_dao).resolve('zzzzzzz')


def test_resolve_corrupted_value():
    """Ensure undecodable stored values raise DecodeError."""
    dao = MagicMock(spec=ShortURLBaseDAO)
    dao.get.return_value = ShortURLModel(target='%%%corrupted%%%', shortcode='abc1234')

    with pytest.raises(DecodeError):
        ResolveWorkflow(dao=dao).resolve('abc1234')


def test_resolve_with_store_unavailable():
    """Ensure store outages raise StoreUnavailableError."""
    dao = MagicMock(spec=ShortURLBaseDAO)
    dao.get.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")

    with pytest.raises(StoreUnavailableError):
        ResolveWorkflow(dao=dao).resolve('abc1234')
