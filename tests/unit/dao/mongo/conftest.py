from unittest.mock import MagicMock

import pytest
from pymongo.collection import Collection


@pytest.fixture
def collection() -> Collection:
    """Mock the `urlshortener.urls` collection."""
    _collection = MagicMock(spec=Collection)
    _collection.full_name = 'urlshortener.urls'
    _collection.find_one.return_value = None
    return _collection


@pytest.fixture
def mongo_client(collection: Collection) -> MagicMock:
    """Mock a MongoClient whose client[db][collection] resolves to `collection`."""
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = collection
    client.admin.command.return_value = {'ok': 1.0}
    return client
