from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a stored short URL mapping.

    Attributes:
        target (str):
            The stored value the short code maps to. This is the
            base64-encoded original URL, so it can be decoded without
            a second lookup.
        shortcode (str):
            The 7-character identifier used as the store key.
        expires_at (Optional[datetime]):
            Time-To-Live(TTL) as Python datetime, after which the mapping
            is removed by the store. None when not yet persisted.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> url = ShortURLModel(
        ...     target='aHR0cHM6Ly9leGFtcGxlLmNvbQ==',
        ...     shortcode='3f1c0a2',
        ...     expires_at=datetime.now(UTC) + timedelta(seconds=60)
        ... )
        >>> url.shortcode
        '3f1c0a2'
    """
    target: str
    shortcode: str
    expires_at: Optional[datetime] = None
