"""Request and result models of the shortening workflows.

Classes:
    ShortenRequest:
        One URL + duration pair to be shortened.
    ShortenResult:
        Tagged outcome of shortening one URL (success fields or error).
"""

from dataclasses import dataclass, asdict
from typing import Any, Optional


# fmt: off
@dataclass(frozen=True)
class ShortenRequest:
    url: Any                    # URL-bearing free-form input
    duration: Any = 0           # TTL in seconds (0 means default TTL in bulk)


@dataclass(frozen=True)
class ShortenResult:
    short_url: Optional[str] = None         # {host}/{shortcode}
    duration: Optional[int] = None          # TTL in seconds applied to the mapping
    original_url: Optional[str] = None      # Originating input (bulk results only)
    already_existed: Optional[bool] = None  # True if the shortcode was already stored
    error: Optional[str] = None             # Human-readable failure reason
    error_code: Optional[str] = None        # Stable failure code
# fmt: on

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize result, omitting unset fields."""
        return {k: v for k, v in asdict(self).items() if v is not None}
