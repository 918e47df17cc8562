"""Shortcode generation utility

This module derives a short, deterministic identifier for a URL together
with the reversible encoding stored under that identifier.

Functions:
    generate_shortcode(url, length=7) -> tuple[str, str]:
        Derive (shortcode, encoded URL) for a URL.
    encode_url(url) -> str:
        Base64-encode a URL (standard alphabet, padded).
    decode_url(encoded) -> str:
        Decode a base64-encoded URL.

Example:
    >>> from hexshortener.utils import generate_shortcode, decode_url
    >>> shortcode, encoded = generate_shortcode('https://example.com')
    >>> shortcode
    'dca7568'
    >>> encoded
    'aHR0cHM6Ly9leGFtcGxlLmNvbQ=='
    >>> decode_url(encoded)
    'https://example.com'
"""

import base64
import binascii
import hashlib

from hexshortener.constants import SHORTCODE_LENGTH
from hexshortener.exceptions import DecodeError


# Number of digest bytes rendered as hex before truncation
DIGEST_SLICE_BYTES = 6


def encode_url(url: str) -> str:
    return base64.b64encode(url.encode('utf-8')).decode('ascii')


def decode_url(encoded: str) -> str:
    """Decode a base64-encoded URL back into its original string.

    Raises:
        DecodeError: if the value is not valid base64 or not UTF-8 text.
    """
    try:
        return base64.b64decode(encoded, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise DecodeError() from e


def generate_shortcode(url: str, length: int = SHORTCODE_LENGTH) -> tuple[str, str]:
    """Generate a short, deterministic shortcode for a URL.

    The shortcode is the hex representation of 6 bytes taken from the middle
    of the URL's SHA-256 digest, truncated to `length` characters. The same
    URL always yields the same shortcode, so re-shortening a URL reuses its
    existing mapping instead of creating a duplicate.

    Args:
        url (str):
            The (already extracted) URL to shorten.

        length (int, optional):
            Number of hex characters kept. Defaults to 7.

    Returns:
        tuple[str, str]: (shortcode, base64-encoded URL)

    Example:
        >>> generate_shortcode('https://example.com')[0]
        'dca7568'

    NOTE:
        - Different URLs may share a 7-character prefix. The store's
          conditional write resolves this as "first writer wins"; the
          generator never retries or perturbs the code.
    """
    if not isinstance(url, str):
        raise TypeError(f'URL must be of type string (given type: {type(url)}).')
    if not 0 < length <= 2 * DIGEST_SLICE_BYTES:
        raise ValueError(f'Length must be between 1 and {2 * DIGEST_SLICE_BYTES} (given value: {length}).')

    digest = hashlib.sha256(url.encode('utf-8')).digest()
    start = len(digest) // 2
    shortcode = digest[start : start + DIGEST_SLICE_BYTES].hex()[:length]
    return shortcode, encode_url(url)
