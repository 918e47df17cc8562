"""Detect where a handler is running

Local runs (`sam local`, `APP_ENV=local`) let unexpected exceptions reach the
developer instead of being turned into a generic 500.

Example:
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
"""

import os

from hexshortener.constants import APP_ENV_ENV, AWS_SAM_LOCAL_ENV


def running_locally() -> bool:
    """Return True under SAM local invoke/api or when APP_ENV is 'local'."""
    env = os.getenv(APP_ENV_ENV, '').lower()
    return env == 'local' or os.getenv(AWS_SAM_LOCAL_ENV) == 'true'
