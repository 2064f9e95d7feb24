from unittest.mock import MagicMock

import pytest

from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.dao.exceptions import DataStoreError
from linkshortener.store import MappingStore


@pytest.fixture
def durable() -> ShortURLMemoryDAO:
    """A working durable tier (in-memory stand-in for MongoDB/Redis)."""
    return ShortURLMemoryDAO()


@pytest.fixture
def failing_durable() -> ShortURLBaseDAO:
    """A durable tier that fails every call."""
    dao = MagicMock(spec=ShortURLBaseDAO)
    dao.insert.side_effect = DataStoreError('MongoDB is down')
    dao.get.side_effect = DataStoreError('MongoDB is down')
    return dao


@pytest.fixture
def store(durable) -> MappingStore:
    return MappingStore(durable=durable)
