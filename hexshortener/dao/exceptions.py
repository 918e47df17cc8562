"""Storage-level failures raised by the short URL DAOs.

Workflows translate these into the user-facing errors of
`hexshortener.exceptions`: a miss becomes KeyNotFoundError and an
unreachable store becomes StoreUnavailableError.

Example:
    >>> raise ShortURLNotFoundError("Short URL with code 'abc1234' not found.")
    Traceback (most recent call last):
        ...
    hexshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc1234' not found.
"""


class DAOError(Exception):
    """Base class of storage-level failures."""


class ShortURLNotFoundError(DAOError):
    """No mapping is stored under the shortcode (never written or expired)."""


class DataStoreError(DAOError):
    """The store can't be reached (connection refused, timeout, failed PING)."""
