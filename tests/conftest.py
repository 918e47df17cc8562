import threading

import pytest

from hexshortener.models import ShortURLModel
from hexshortener.dao.base import ShortURLBaseDAO
from hexshortener.dao.exceptions import ShortURLNotFoundError
from hexshortener.lambdas.dependencies import reset_short_url_daos


class InMemoryShortURLDAO(ShortURLBaseDAO):
    """Thread-safe in-memory stand-in for a TTL key-value store."""

    def __init__(self):
        self.records: dict[str, tuple[str, int]] = {}
        self.insert_calls = 0
        self._lock = threading.Lock()

    def insert_if_absent(self, short_url: ShortURLModel, ttl: int, **kwargs) -> bool:
        with self._lock:
            self.insert_calls += 1
            if short_url.shortcode in self.records:
                return False
            self.records[short_url.shortcode] = (short_url.target, ttl)
            return True

    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        with self._lock:
            if shortcode not in self.records:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            target, _ = self.records[shortcode]
            return ShortURLModel(target=target, shortcode=shortcode)


@pytest.fixture
def memory_dao():
    return InMemoryShortURLDAO()


@pytest.fixture(autouse=True)
def _reset_daos():
    """Forget DAOs cached by lambda handlers between tests."""
    reset_short_url_daos()
    yield
    reset_short_url_daos()
