"""User-facing error taxonomy of the shortener.

Every error carries a stable `error_code`, a short human-readable `message`
and the HTTP `status_code` the transport layer should answer with. Handlers
never expose anything beyond these three values.

Classes:
    ShortenerError:
        Base class for all application-specific errors.

    InvalidParamsError, DurationTooHighError, UrlNotSupportedError:
        Shortening request validation failures.

    InvalidIdFormatError, KeyNotFoundError, DecodeError:
        Short code resolution failures.

    StoreUnavailableError:
        Redis could not be reached.

    NoUrlsError, TooManyUrlsError, MalformedBatchError:
        Batch-level failures of bulk shortening.

Example:
    >>> from hexshortener.exceptions import DurationTooHighError
    >>> err = DurationTooHighError()
    >>> err.error_code, err.status_code
    ('DURATION_TOO_HIGH', 400)
    >>> str(err)
    'High Duration (max 3600)!'
"""

from hexshortener.constants import MAX_TTL_SECONDS, MAX_BULK_URLS


class ShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'SHORTENER_ERROR'
    status_code = 500
    default_message = 'Internal Server Error'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidParamsError(ShortenerError):
    """Raised when request parameters can't be parsed."""

    error_code = 'INVALID_PARAMS'
    status_code = 400
    default_message = 'invalid params structure'


class DurationTooHighError(ShortenerError):
    """Raised when the requested TTL exceeds the allowed maximum."""

    error_code = 'DURATION_TOO_HIGH'
    status_code = 400
    default_message = f'High Duration (max {MAX_TTL_SECONDS})!'


class UrlNotSupportedError(ShortenerError):
    """Raised when no URL can be extracted from the input."""

    error_code = 'URL_NOT_SUPPORTED'
    status_code = 400
    default_message = 'url format not supported'


class InvalidIdFormatError(ShortenerError):
    """Raised when a short code is not exactly 7 alphanumeric characters."""

    error_code = 'INVALID_ID_FORMAT'
    status_code = 400
    default_message = 'id format is not supported'


class KeyNotFoundError(ShortenerError):
    """Raised when a short code does not exist (never created or expired)."""

    error_code = 'KEY_NOT_FOUND'
    status_code = 404
    default_message = 'key not found'


class DecodeError(ShortenerError):
    """Raised when a stored value can't be decoded back into a URL."""

    error_code = 'DECODE_ERROR'
    status_code = 500
    default_message = 'error while getting url'


class StoreUnavailableError(ShortenerError):
    """Raised when the key-value store can't be reached."""

    error_code = 'STORE_UNAVAILABLE'
    status_code = 503
    default_message = 'store unavailable'


class NoUrlsError(ShortenerError):
    """Raised when a bulk request holds no URLs."""

    error_code = 'NO_URLS'
    status_code = 400
    default_message = 'no urls'


class TooManyUrlsError(ShortenerError):
    """Raised when a bulk request holds more URLs than allowed."""

    error_code = 'TOO_MANY_URLS'
    status_code = 400
    default_message = f'max allowed urls is {MAX_BULK_URLS}'


class MalformedBatchError(ShortenerError):
    """Raised when a bulk request body can't be parsed."""

    error_code = 'MALFORMED_BATCH'
    status_code = 400
    default_message = 'invalid data structure'
