"""Unit tests for the ShortURLRedisDAO

Test coverage includes:

1. Insertion behavior
   - Validates inserting valid short URLs issues a single SET NX without TTL.
   - Confirms duplicate shortcodes raise ShortURLAlreadyExistsError.
   - Confirms Redis connection errors raise DataStoreError.
   - Ensures invalid types raise TypeError or BeartypeCallHintParamViolation.

2. Retrieval behavior
   - Ensures fetching valid shortcodes returns a populated ShortURLModel.
   - Confirms missing keys raise ShortURLNotFoundError.
   - Confirms Redis connection errors raise DataStoreError.
"""

import pytest
import redis
from beartype.roar import BeartypeCallHintParamViolation

from linkshortener.models import ShortURLModel
from linkshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError
from linkshortener.dao.redis import ShortURLRedisDAO


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def dao(redis_client, app_prefix):
    return ShortURLRedisDAO(redis_client=redis_client, prefix=app_prefix)


@pytest.fixture
def short_url():
    return ShortURLModel(target='https://example.com/test', shortcode='abc123')


# -------------------------------
# 1. Insertion behavior
# -------------------------------


def test_insert_short_url(dao, redis_client, short_url):
    """Ensure valid short URL insertion stores the URL atomically and without expiry."""
    assert dao.insert(short_url) is dao
    redis_client.set.assert_called_once_with('testapp:test:links:abc123:url', 'https://example.com/test', nx=True)


def test_insert_duplicate_short_url(dao, redis_client, short_url):
    """SET NX answers None when the key exists."""
    redis_client.set.return_value = None

    with pytest.raises(ShortURLAlreadyExistsError, match='abc123'):
        dao.insert(short_url)


def test_insert_short_url_with_redis_connection_error(dao, redis_client, short_url):
    redis_client.set.side_effect = redis.exceptions.ConnectionError('Connection error')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        dao.insert(short_url)


def test_insert_short_url_with_invalid_type(dao, redis_client):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.insert('https://example.com/notamodel')
    redis_client.set.assert_not_called()


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


@pytest.mark.parametrize('stored', ['https://example.com/test', b'https://example.com/test'])
def test_get_short_url(dao, redis_client, stored):
    redis_client.get.return_value = stored

    result = dao.get('abc123')

    assert result == ShortURLModel(target='https://example.com/test', shortcode='abc123')
    redis_client.get.assert_called_once_with('testapp:test:links:abc123:url')


def test_get_missing_short_url(dao, redis_client):
    redis_client.get.return_value = None

    with pytest.raises(ShortURLNotFoundError, match='abc123'):
        dao.get('abc123')


def test_get_short_url_with_redis_connection_error(dao, redis_client):
    redis_client.get.side_effect = redis.exceptions.TimeoutError('Timeout')

    with pytest.raises(DataStoreError):
        dao.get('abc123')


def test_get_short_url_with_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.get(123)
