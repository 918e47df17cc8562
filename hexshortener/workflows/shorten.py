"""Single-request shortening workflow

Validation order is part of the contract (callers rely on which error
fires first):

    1. duration must be a non-negative integer      -> InvalidParamsError
    2. duration must not exceed MAX_TTL_SECONDS     -> DurationTooHighError
    3. input must hold an http(s) URL               -> UrlNotSupportedError
    4. derive shortcode + base64 value
    5. SET NX EX the mapping                        -> StoreUnavailableError
    6. build {host}/{shortcode}

Example:
    >>> workflow = ShortenWorkflow(dao=dao, host='https://sho.rt')
    >>> workflow.shorten('see https://example.com', '120')
    ShortenResult(short_url='https://sho.rt/dca7568', duration=120, already_existed=False, ...)
"""

import re
import logging
from typing import Any

from hexshortener.constants import MAX_TTL_SECONDS, DEFAULT_TTL_SECONDS
from hexshortener.dao.base import ShortURLBaseDAO
from hexshortener.dao.exceptions import DataStoreError
from hexshortener.exceptions import InvalidParamsError, DurationTooHighError, StoreUnavailableError
from hexshortener.models import ShortURLModel, ShortenResult
from hexshortener.utils.extractor import extract_url
from hexshortener.utils.helpers import get_short_url
from hexshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)

DURATION_PATTERN = re.compile(r'[+-]?[0-9]+', re.ASCII)


def parse_duration(value: Any) -> int:
    """Parse a TTL given as int or decimal string into a non-negative int.

    Raises:
        InvalidParamsError: for negative numbers, booleans, floats or non-numeric strings.
    """
    if isinstance(value, bool):
        raise InvalidParamsError()
    if isinstance(value, int):
        duration = value
    elif isinstance(value, str) and DURATION_PATTERN.fullmatch(value):
        duration = int(value)
    else:
        raise InvalidParamsError()

    if duration < 0:
        raise InvalidParamsError()
    return duration


class ShortenWorkflow:
    """Shorten one URL and store its mapping with a TTL.

    Attributes:
        dao (ShortURLBaseDAO):
            Store adapter shared by all requests of the process.
        host (str):
            Public host prepended to shortcodes.
    """

    def __init__(self, dao: ShortURLBaseDAO, host: str):
        self.dao = dao
        self.host = host

    def shorten(self, url_input: Any, duration: Any) -> ShortenResult:
        """Shorten a URL-bearing input for `duration` seconds.

        Args:
            url_input (Any):
                Free-form text holding a URL.
            duration (Any):
                TTL in seconds, as int or decimal string (0..3600).

        Returns:
            ShortenResult: short_url, applied duration and already_existed flag.

        Raises:
            InvalidParamsError, DurationTooHighError, UrlNotSupportedError,
            StoreUnavailableError
        """
        ttl = parse_duration(duration)
        return self.store(url_input, ttl)

    def store(self, url_input: Any, ttl: int) -> ShortenResult:
        """Validate the TTL bound, extract, generate and conditionally store."""
        if ttl > MAX_TTL_SECONDS:
            raise DurationTooHighError()
        if ttl == 0:
            ttl = DEFAULT_TTL_SECONDS

        url = extract_url(url_input)
        shortcode, encoded = generate_shortcode(url)

        try:
            written = self.dao.insert_if_absent(ShortURLModel(target=encoded, shortcode=shortcode), ttl=ttl)
        except DataStoreError as e:
            logger.warning('Key-value store unavailable while shortening URL.', extra={'shortcode': shortcode, 'reason': str(e)})
            raise StoreUnavailableError() from e

        logger.debug(
            'Stored short URL mapping.' if written else 'Short URL mapping already existed.',
            extra={'shortcode': shortcode, 'ttl': ttl, 'written': written},
        )
        return ShortenResult(
            short_url=get_short_url(shortcode, self.host),
            duration=ttl,
            already_existed=not written,
        )
