"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO. It is an
alternative durable tier, selected with `active_backend: redis`. The Redis
server is expected to run with persistence (AOF or RDB) enabled.

Each mapping is a single string key without TTL:

    <prefix>:links:<shortcode>:url -> <original url>

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from linkshortener.models import ShortURLModel
    >>> from linkshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="app:dev")
    >>> dao.insert(ShortURLModel(target="https://example.com/page", shortcode="abc123"))
    <ShortURLRedisDAO>
    >>> dao.get("abc123").target
    'https://example.com/page'
"""

from beartype import beartype

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.redis.mixins import RedisClientMixin
from linkshortener.dao.redis.helpers import handle_redis_connection_error
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLRedisDAO:
            Insert a short URL mapping.
            Raises ShortURLAlreadyExistsError when a URL with the same shortcode exists.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLRedisDAO':
        """Insert a short URL mapping into Redis

        Uses a single `SET ... NX` so the existence check and the write are
        one atomic command.

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        link_url_key = self.keys.link_url_key(short_url.shortcode)
        if not self.redis.set(link_url_key, short_url.target, nx=True):
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        original_url = self.redis.get(self.keys.link_url_key(shortcode))

        if original_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        if isinstance(original_url, bytes):
            original_url = original_url.decode('utf-8')

        return ShortURLModel(target=original_url, shortcode=shortcode)

    def __repr__(self) -> str:
        return '<ShortURLRedisDAO>'
