"""Utility functions for application configuration management.

Deployed lambdas read their configuration from **AWS AppConfig**. Each
environment (`APP_ENV`) has a dedicated AppConfig *Environment* within the
shared AppConfig *Application*. The configuration is a JSON document deployed
to the corresponding environment.

When running locally (SAM or plain `APP_ENV=local`), the same document is
read from a YAML file instead:

    config/
    ├── local.yml
    └── test.yml

The configuration document follows this structure:

    {
        "active_backend": "mongodb",
        "shortcode": {"length": 6, "max_attempts": 5},
        "configs": {
            "mongodb": {"uri": "...", "database": "urlshortener", "collection": "urls"},
            "redis": {"host": "...", "port": 6379, "db": 0}
        }
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    load_config() -> dict
        Load the configuration document and narrow it down to the active
        durable backend.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['active_backend']
    'mongodb'
    >>> config['mongodb']['database']
    'urlshortener'
"""

import os
import json
import logging
import functools
from pathlib import Path
from collections.abc import Callable

import boto3
import yaml

from linkshortener.exceptions import BadConfigurationError
from linkshortener.utils.helpers import require_environment
from linkshortener.utils.runtime import running_locally
from linkshortener.utils.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    PROJECT_ROOT_ENV,
    APPCONFIG_APP_ID_ENV,
    APPCONFIG_ENV_ID_ENV,
    APPCONFIG_PROFILE_ID_ENV,
    MONGODB_BACKEND,
    REDIS_BACKEND,
)


logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = frozenset({MONGODB_BACKEND, REDIS_BACKEND})


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

    Reads the PROJECT_ROOT environment variable. Falls back to the directory
    containing the `linkshortener` package.
    """
    return Path(os.environ.get(PROJECT_ROOT_ENV, Path(__file__).resolve().parents[2]))


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'linkshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'linkshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def select_backend(document: dict) -> dict:
    """Narrow a configuration document down to its active backend

    Args:
        document (dict):
            Full configuration document (see module docstring).

    Returns:
        dict: {'active_backend': <name>, <name>: {...}, 'shortcode': {...}}

    Raises:
        BadConfigurationError:
            If the document misses required keys or names an unknown backend.
    """
    try:
        backend = document['active_backend']
        backend_config = document['configs'][backend]
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f'Configuration document is missing required key: {e}') from e

    if backend not in SUPPORTED_BACKENDS:
        raise BadConfigurationError(f"Unsupported durable backend '{backend}' (supported: {sorted(SUPPORTED_BACKENDS)}).")

    return {
        'active_backend': backend,
        backend: backend_config or {},
        'shortcode': document.get('shortcode') or {},
    }


def _load_local_config(func: Callable[[], dict]) -> Callable[[], dict]:
    """Decorator: load configuration from a local YAML file when running locally

    Behavior:
        - If the application is running locally, read
          `<project root>/config/<APP_ENV>.yml`.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> dict:
        if not running_locally():
            return func(*args, **kwargs)

        path = project_root() / 'config' / f'{app_env()}.yml'
        logger.debug('Trying to load configuration from local file.', extra={'path': str(path)})
        with open(path, encoding='utf-8') as f:
            document = yaml.safe_load(f)

        data = select_backend(document)
        logger.debug('Loaded configuration from local file.', extra={'path': str(path), 'backend': data['active_backend']})
        return data

    return wrapper


@_load_local_config
@require_environment(APPCONFIG_APP_ID_ENV, APPCONFIG_ENV_ID_ENV, APPCONFIG_PROFILE_ID_ENV)
def load_config() -> dict:
    """Load application configuration from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Returns:
        dict: configuration narrowed down to the active backend.

    Raises:
        MissingEnvironmentVariableError:
            If any AppConfig identifier is missing.
        BadConfigurationError:
            If the fetched document is malformed.
        botocore.exceptions.ClientError:
            If AppConfig rejects the request.

    Example:
        >>> app_config = load_config()
        >>> app_config['redis']['host']
        'redis.internal'
    """
    logger.debug('Trying to load configuration from AWS AppConfig.')

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
    document = json.loads(content.decode('utf-8'))

    data = select_backend(document)
    logger.debug('Loaded configuration from AWS AppConfig.', extra={'backend': data['active_backend']})
    return data
