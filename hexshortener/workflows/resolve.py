"""Short code resolution workflow

Example:
    >>> ResolveWorkflow(dao=dao).resolve('dca7568')
    'https://example.com'
"""

import re
import logging
from typing import Any

from hexshortener.constants import SHORTCODE_LENGTH
from hexshortener.dao.base import ShortURLBaseDAO
from hexshortener.dao.exceptions import DataStoreError, ShortURLNotFoundError
from hexshortener.exceptions import InvalidIdFormatError, KeyNotFoundError, StoreUnavailableError
from hexshortener.utils.shortener import decode_url


logger = logging.getLogger(__name__)

SHORTCODE_PATTERN = re.compile(rf'[A-Za-z0-9]{{{SHORTCODE_LENGTH}}}')


class ResolveWorkflow:
    def __init__(self, dao: ShortURLBaseDAO):
        self.dao = dao

    def resolve(self, identifier: Any) -> str:
        """Return the original URL a shortcode maps to.

        Raises:
            InvalidIdFormatError: identifier is not 7 alphanumeric characters.
            KeyNotFoundError: shortcode never existed or already expired.
            DecodeError: stored value is not a valid base64 URL.
            StoreUnavailableError: the key-value store can't be reached.
        """
        if not isinstance(identifier, str) or SHORTCODE_PATTERN.fullmatch(identifier) is None:
            raise InvalidIdFormatError()

        try:
            short_url = self.dao.get(identifier)
        except ShortURLNotFoundError as e:
            raise KeyNotFoundError() from e
        except DataStoreError as e:
            logger.warning('Key-value store unavailable while resolving shortcode.', extra={'shortcode': identifier, 'reason': str(e)})
            raise StoreUnavailableError() from e

        return decode_url(short_url.target)
