"""Bulk shortening pipeline

Shortens up to MAX_BULK_URLS URLs concurrently. Batch-level problems (bad
body, empty, too many URLs) fail the whole request before any item runs;
item-level problems only fail that item.

Concurrency model:
    Every item runs as its own task on a thread pool sized to the batch
    (the batch is capped, so the pool is too). The pipeline waits for all
    tasks at a single fan-in barrier and never hands out partial results.
    Items share the DAO's thread-safe Redis connection pool; two items with
    the same URL race on `SET NX` and exactly one of them writes.

Example:
    >>> requests = parse_bulk_body('{"data": [{"url": "https://example.com", "duration": 0}]}')
    >>> BulkShortenWorkflow(dao=dao, host='https://sho.rt').shorten_bulk(requests)
    [ShortenResult(short_url='https://sho.rt/dca7568', duration=60, original_url='https://example.com', ...)]
"""

import json
import logging
import dataclasses
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, wait

from hexshortener.constants import MAX_BULK_URLS
from hexshortener.dao.base import ShortURLBaseDAO
from hexshortener.exceptions import ShortenerError, NoUrlsError, TooManyUrlsError, MalformedBatchError, UrlNotSupportedError
from hexshortener.models import ShortenRequest, ShortenResult
from hexshortener.workflows.shorten import ShortenWorkflow, parse_duration


logger = logging.getLogger(__name__)


def parse_bulk_body(body: str | bytes | None) -> list[ShortenRequest]:
    """Parse and validate a bulk request body in a single step.

    Expected shape: {"data": [{"url": <str>, "duration": <int>}, ...]}.
    A missing or null "data" is an empty batch. Missing or null item fields
    default to an empty URL and a zero duration and fail (or default) per
    item. Any other value of the wrong type fails the whole batch.

    Raises:
        MalformedBatchError: body is not JSON or doesn't follow the shape above.
    """
    try:
        payload = json.loads(body or '{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedBatchError() from e

    if not isinstance(payload, dict):
        raise MalformedBatchError()

    items = _get_or_default(payload, 'data', [])
    if not isinstance(items, list):
        raise MalformedBatchError()

    requests = []
    for item in items:
        if not isinstance(item, dict):
            raise MalformedBatchError()

        url = _get_or_default(item, 'url', '')
        duration = _get_or_default(item, 'duration', 0)
        if not isinstance(url, str) or isinstance(duration, bool) or not isinstance(duration, int):
            raise MalformedBatchError()

        requests.append(ShortenRequest(url=url, duration=duration))
    return requests


def _get_or_default(mapping: dict, key: str, default):
    value = mapping.get(key)
    return default if value is None else value


class BulkShortenWorkflow:
    """Shorten a batch of URLs concurrently.

    Attributes:
        workflow (ShortenWorkflow):
            Single-request workflow executed for every item.
        max_urls (int):
            Largest accepted batch.
    """

    def __init__(self, dao: ShortURLBaseDAO, host: str, max_urls: int = MAX_BULK_URLS):
        self.workflow = ShortenWorkflow(dao=dao, host=host)
        self.max_urls = max_urls

    def shorten_bulk(self, requests: Sequence[ShortenRequest]) -> list[ShortenResult]:
        """Shorten every request; return exactly one result per request.

        Results are returned in the order of `requests`, each tagged with its
        originating URL.

        Raises:
            NoUrlsError: empty batch.
            TooManyUrlsError: more than `max_urls` requests.
        """
        if not requests:
            raise NoUrlsError()
        if len(requests) > self.max_urls:
            raise TooManyUrlsError()

        with ThreadPoolExecutor(max_workers=len(requests), thread_name_prefix='bulk-shorten') as executor:
            futures = [executor.submit(self._shorten_item, request) for request in requests]
            # Fan-in barrier: every item must have reported
            wait(futures)

        results = [future.result() for future in futures]
        failed = sum(1 for result in results if not result.ok)
        logger.info('Bulk shortening finished.', extra={'total': len(results), 'failed': failed})
        return results

    def _shorten_item(self, request: ShortenRequest) -> ShortenResult:
        duration = request.duration
        try:
            ttl = parse_duration(duration)
            result = self.workflow.store(request.url, ttl)
        except UrlNotSupportedError as e:
            # Nothing was shortened, so no duration is reported
            return ShortenResult(original_url=request.url, error=e.message, error_code=e.error_code)
        except ShortenerError as e:
            return ShortenResult(
                original_url=request.url,
                duration=duration if isinstance(duration, int) else None,
                error=e.message,
                error_code=e.error_code,
            )
        return dataclasses.replace(result, original_url=request.url)
