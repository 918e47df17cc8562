"""Check that the Redis backing the shortener is reachable

Connection details are taken from REDIS_URL (default: redis://localhost:6379/0).

Expect to see "Redis reachable at <host>:<port>/<db>" printed in your local
console. Exits with status 1 when Redis can't be reached.
"""

import os
import sys

from hexshortener.constants import REDIS_URL_ENV
from hexshortener.dao.exceptions import DataStoreError
from hexshortener.dao.redis import ShortURLRedisDAO
from hexshortener.dao.redis.helpers import describe_redis


def main() -> int:
    redis_url = os.getenv(REDIS_URL_ENV, 'redis://localhost:6379/0')
    try:
        dao = ShortURLRedisDAO(redis_url=redis_url)
    except DataStoreError as e:
        print(e, file=sys.stderr)
        return 1

    print(f'Redis reachable at {describe_redis(dao.redis)}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
