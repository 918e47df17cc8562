"""Utility functions for application configuration management.

Lambda functions read their Redis connection settings from one of two
sources:

1. The `REDIS_URL` environment variable (local development, containers,
   tests). When set, it always wins.
2. **AWS AppConfig**. Each environment (`APP_ENV`) has a dedicated AppConfig
   *Environment* within the shared AppConfig *Application*. Configuration
   data is stored as a JSON document:

    {
        "build": 7,
        "active_backend": "redis",
        "configs": {
            "shorten_url": {
                "redis": {"host": "...", "port": 6379, "db": 0}
            },
            "bulk_shorten_url": {
                "redis": { ... }
            },
            "redirect_url": {
                "redis": { ... }
            }
        }
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the Redis key prefix, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the absolute path to the project root directory.

    load_config(lambda_name: str) -> dict
        Load configuration for a given Lambda and return it as a Python dictionary.

Example:
    >>> from hexshortener.utils.config import load_config
    >>> os.environ['REDIS_URL'] = 'redis://localhost:6379/0'
    >>> load_config('shorten_url')
    {'redis': {'url': 'redis://localhost:6379/0'}}
"""

import os
import json
import functools
import logging
from pathlib import Path
from collections.abc import Callable

import boto3

from hexshortener.types import LambdaConfiguration
from hexshortener.utils.helpers import require_environment
from hexshortener.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    PROJECT_ROOT_ENV,
    REDIS_URL_ENV,
    APPCONFIG_APP_ID_ENV,
    APPCONFIG_ENV_ID_ENV,
    APPCONFIG_PROFILE_ID_ENV,
)


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(APP_NAME_ENV)


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Finds the project root via the environment variable PROJECT_ROOT.
    Falls back to the directory of the current file.
    """
    return Path(os.environ.get(PROJECT_ROOT_ENV, os.path.dirname(__file__)))


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'hexshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'hexshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def redis_url_override(func: Callable[[str], LambdaConfiguration]) -> Callable[[str], LambdaConfiguration]:
    """Decorator: serve Redis settings from `REDIS_URL` when it is set

    Behavior:
        - If `REDIS_URL` is set, return `{'redis': {'url': REDIS_URL}}` without
          contacting AWS.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).
    """

    @functools.wraps(func)
    def wrapper(lambda_name: str, *args, **kwargs) -> LambdaConfiguration:
        redis_url = os.getenv(REDIS_URL_ENV)
        if not redis_url:
            return func(lambda_name, *args, **kwargs)

        logger.debug('Loaded Redis configuration from environment.', extra={'lambdaName': lambda_name})
        return {'redis': {'url': redis_url}}

    return wrapper


@redis_url_override
@require_environment(APPCONFIG_APP_ID_ENV, APPCONFIG_ENV_ID_ENV, APPCONFIG_PROFILE_ID_ENV)
def load_config(lambda_name: str) -> LambdaConfiguration:
    """Load configuration for a given Lambda from AWS AppConfig

    Fetches the AppConfig JSON once and returns the section relevant
    to the requested Lambda function (e.g. 'shorten_url', 'redirect_url').

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        lambda_name (str):
            Name of the Lambda (e.g. "shorten_url" or "redirect_url").

    Returns:
        dict: The lambda's config section as a Python dictionary.

    Example:
        >>> app_config = load_config('shorten_url')
        >>> app_config['redis']['host']
        'redis-15501.host.docker.internal'
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name})

    appconfig = boto3.client('appconfigdata')

    # Start an AppConfig data session
    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[APPCONFIG_APP_ID_ENV],
        EnvironmentIdentifier=os.environ[APPCONFIG_ENV_ID_ENV],
        ConfigurationProfileIdentifier=os.environ[APPCONFIG_PROFILE_ID_ENV],
    )['InitialConfigurationToken']

    # Fetch the configuration
    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    config = json.loads(content.decode('utf-8'))

    # Extract the active backend config for this lambda
    backend = config['active_backend']
    data = {backend: config['configs'][lambda_name][backend]}
    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': config.get('build')})
    return data
