"""Process-wide resources shared by handler invocations.

A Lambda execution environment serves many invocations. The Redis-backed DAO
is built once per environment (cold start) and then handed to the workflows
of every invocation. A failed build is not remembered: the next invocation
tries to connect again.
"""

import logging

from hexshortener.dao.base import ShortURLBaseDAO
from hexshortener.dao.redis import ShortURLRedisDAO
from hexshortener.utils.config import load_config, app_prefix


logger = logging.getLogger(__name__)

_short_url_daos: dict[str, ShortURLBaseDAO] = {}


def get_short_url_dao(lambda_name: str) -> ShortURLBaseDAO:
    """Return the short URL DAO of this process, connecting on first use.

    Raises:
        DataStoreError: Redis is unreachable (healthcheck failed).
    """
    dao = _short_url_daos.get(lambda_name)
    if dao is None:
        app_config = load_config(lambda_name)
        logger.debug('Assuming Redis as the backend database for short URLs')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
        dao = _short_url_daos[lambda_name] = ShortURLRedisDAO(**redis_config, prefix=app_prefix())
    return dao


def reset_short_url_daos() -> None:
    _short_url_daos.clear()
