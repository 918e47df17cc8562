"""Unit tests for the user-facing error taxonomy."""

import pytest

from hexshortener.exceptions import (
    ShortenerError,
    InvalidParamsError,
    DurationTooHighError,
    UrlNotSupportedError,
    InvalidIdFormatError,
    KeyNotFoundError,
    DecodeError,
    StoreUnavailableError,
    NoUrlsError,
    TooManyUrlsError,
    MalformedBatchError,
)


@pytest.mark.parametrize(
    'error_cls, error_code, status_code, message',
    [
        (InvalidParamsError, 'INVALID_PARAMS', 400, 'invalid params structure'),
        (DurationTooHighError, 'DURATION_TOO_HIGH', 400, 'High Duration (max 3600)!'),
        (UrlNotSupportedError, 'URL_NOT_SUPPORTED', 400, 'url format not supported'),
        (InvalidIdFormatError, 'INVALID_ID_FORMAT', 400, 'id format is not supported'),
        (KeyNotFoundError, 'KEY_NOT_FOUND', 404, 'key not found'),
        (DecodeError, 'DECODE_ERROR', 500, 'error while getting url'),
        (StoreUnavailableError, 'STORE_UNAVAILABLE', 503, 'store unavailable'),
        (NoUrlsError, 'NO_URLS', 400, 'no urls'),
        (TooManyUrlsError, 'TOO_MANY_URLS', 400, 'max allowed urls is 50'),
        (MalformedBatchError, 'MALFORMED_BATCH', 400, 'invalid data structure'),
    ],
)
def test_error_taxonomy(error_cls, error_code, status_code, message):
    err = error_cls()

    assert isinstance(err, ShortenerError)
    assert err.error_code == error_code
    assert err.status_code == status_code
    assert err.message == message
    assert str(err) == message


def test_error_with_custom_message():
    err = UrlNotSupportedError('no http(s) url found')

    assert err.message == 'no http(s) url found'
    assert err.error_code == 'URL_NOT_SUPPORTED'
