"""Build the process-wide mapping store from configuration

Functions:
    durable_dao(app_config) -> ShortURLBaseDAO
        Instantiate the durable DAO named by `active_backend`.

    build_store(app_config) -> MappingStore
        Wire the durable DAO, a fresh in-memory tier and shortcode settings.

    default_store() -> MappingStore
        Load configuration and build the store once per process.

    init_store() -> MappingStore | None
        Build the store eagerly when imported inside a Lambda execution environment.

Example:
    >>> app_config = {
    ...     'active_backend': 'mongodb',
    ...     'mongodb': {'uri': 'mongodb://localhost:27017', 'database': 'urlshortener'},
    ...     'shortcode': {'length': 6, 'max_attempts': 5},
    ... }
    >>> store = build_store(app_config)
    >>> store.shortcode_length
    6
"""

import functools
import logging

from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.mongo import ShortURLMongoDAO
from linkshortener.dao.redis import ShortURLRedisDAO
from linkshortener.exceptions import BadConfigurationError
from linkshortener.store.mapping_store import MappingStore
from linkshortener.utils.config import load_config, app_prefix
from linkshortener.utils.runtime import running_in_lambda
from linkshortener.utils.constants import (
    MONGODB_BACKEND,
    REDIS_BACKEND,
    DEFAULT_SHORTCODE_LENGTH,
    DEFAULT_SHORTCODE_MAX_ATTEMPTS,
)


logger = logging.getLogger(__name__)

# backend name -> (DAO class, keyword argument prefix)
BACKENDS: dict[str, tuple[type[ShortURLBaseDAO], str]] = {
    MONGODB_BACKEND: (ShortURLMongoDAO, 'mongo'),
    REDIS_BACKEND: (ShortURLRedisDAO, 'redis'),
}


def durable_dao(app_config: dict) -> ShortURLBaseDAO:
    """Instantiate the durable DAO for the active backend

    Raises:
        BadConfigurationError: If the backend is unknown or its section is missing.
        DataStoreError: If the data store is unreachable.
    """
    backend = app_config.get('active_backend')
    if backend not in BACKENDS or backend not in app_config:
        raise BadConfigurationError(f"No configuration for durable backend '{backend}'.")

    dao_class, arg_prefix = BACKENDS[backend]
    dao_config = {f'{arg_prefix}_{k}': v for k, v in app_config[backend].items()}
    logger.debug('Connecting to durable backend.', extra={'backend': backend})
    return dao_class(**dao_config, prefix=app_prefix())


def build_store(app_config: dict) -> MappingStore:
    shortcode_config = app_config.get('shortcode') or {}
    return MappingStore(
        durable=durable_dao(app_config),
        shortcode_length=int(shortcode_config.get('length', DEFAULT_SHORTCODE_LENGTH)),
        max_attempts=int(shortcode_config.get('max_attempts', DEFAULT_SHORTCODE_MAX_ATTEMPTS)),
    )


@functools.cache
def default_store() -> MappingStore:
    """Return the process-wide mapping store, building it on first use

    A connection failure propagates, so a process that can't reach its
    durable tier never serves a request.
    """
    store = build_store(load_config())
    logger.info('Mapping store ready.', extra={'durable': repr(store.durable)})
    return store


def init_store() -> MappingStore | None:
    """Build the mapping store during the Lambda init phase

    Handler modules call this at import time. Inside a Lambda execution
    environment the store is built before the first request, so an
    unreachable durable tier fails the container's init instead of a
    request. Outside Lambda (tests, tooling) nothing is built.

    Raises:
        DataStoreError: If the durable tier is unreachable.
        ConfigurationError: If the configuration can't be loaded.
    """
    if not running_in_lambda():
        return None
    return default_store()
