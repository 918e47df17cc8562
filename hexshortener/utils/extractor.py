"""URL extraction utility

Users may paste a URL surrounded by arbitrary text ("check this out: https://...").
This module searches the input for the first well-formed http(s) URL.

Functions:
    extract_url(text: str) -> str
        Return the first http(s) URL found anywhere in the input.

Example:
    >>> from hexshortener.utils import extract_url
    >>> extract_url('click here: https://example.com/a?b=1 thanks')
    'https://example.com/a?b=1'
    >>> extract_url('not a url')
    Traceback (most recent call last):
        ...
    hexshortener.exceptions.UrlNotSupportedError: url format not supported
"""

import re

from hexshortener.exceptions import UrlNotSupportedError


# scheme, optional www., dotted host ending in a 2-6 char label, then path/query characters.
# NOTE: ASCII semantics so \w and \b don't match unicode letters
URL_PATTERN = re.compile(
    r'https?://(?:www\.)?([-\d\w.]{2,256}[\d\w]{2,6}\b)*(/[?/\d\w=+&#.-]*)*',
    re.ASCII,
)


def extract_url(text: str) -> str:
    """Extract the first http(s) URL embedded in free-form text.

    Trailing characters outside the path character class (spaces, commas,
    quotes, ...) terminate the match.

    Args:
        text (str): free-form input holding a URL somewhere.

    Returns:
        str: the first matching URL substring.

    Raises:
        UrlNotSupportedError: if the input holds no URL.
    """
    if not isinstance(text, str):
        raise UrlNotSupportedError()

    match = URL_PATTERN.search(text)
    if match is None:
        raise UrlNotSupportedError()
    return match.group(0)
