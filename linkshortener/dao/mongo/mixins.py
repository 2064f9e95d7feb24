"""MongoDB mixin providing shared client initialization and connectivity checks.

Responsibilities:
    - Initialize MongoDB client and resolve the mappings collection
    - Healthcheck MongoDB client

Classes:
    - MongoClientMixin: Base mixin to inject MongoDB client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLMongoDAO(MongoClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLMongoDAO(mongo_uri='mongodb://localhost:27017')
        >>> dao._healthcheck()
        True
"""

from typing import Optional

import pymongo
from pymongo.errors import PyMongoError

from linkshortener.dao.exceptions import DataStoreError
from linkshortener.utils.constants import (
    DEFAULT_MONGO_URI,
    DEFAULT_MONGO_DATABASE,
    DEFAULT_MONGO_COLLECTION,
    DEFAULT_MONGO_TIMEOUT_MS,
)


class MongoClientMixin:
    """Mixin MongoDB client setup and health check for MongoDB-backed DAOs.

    Attributes:
        mongo (pymongo.MongoClient):
            Active MongoDB client instance used by subclasses.

        collection (pymongo.collection.Collection):
            Collection holding the `{code, url}` documents.

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            Ping MongoDB to verify connectivity.
            Optionally raise a DataStoreError if unreachable.
    """

    def __init__(
        self,
        mongo_uri: Optional[str] = DEFAULT_MONGO_URI,
        mongo_database: Optional[str] = DEFAULT_MONGO_DATABASE,
        mongo_collection: Optional[str] = DEFAULT_MONGO_COLLECTION,
        mongo_timeout_ms: Optional[int] = DEFAULT_MONGO_TIMEOUT_MS,
        mongo_client: Optional[pymongo.MongoClient] = None,
        prefix: Optional[str] = None,
    ):
        """Initialize a MongoDB-based DAO for short URL management

        The option is given to either use an existing MongoDB client instance or
        create one from a connection string.

        Args:
            mongo_uri (Optional[str]):
                MongoDB connection string. Defaults to 'mongodb://localhost:27017'.

            mongo_database (Optional[str]):
                Database name. Defaults to 'urlshortener'.

            mongo_collection (Optional[str]):
                Collection name. Defaults to 'urls'.

            mongo_timeout_ms (Optional[int]):
                Server selection and socket timeout in milliseconds. Defaults to 5000.

            mongo_client (Optional[pymongo.MongoClient]):
                Pre-initialized MongoDB client. If None, a new client is created.

            prefix (Optional[str]):
                Accepted for parity with other DAOs. MongoDB namespaces by database instead.

        Raises:
            DataStoreError:
                If MongoDB healthcheck fails (connectivity issues).
        """
        if mongo_client is None:
            mongo_client = pymongo.MongoClient(
                mongo_uri,
                serverSelectionTimeoutMS=int(mongo_timeout_ms),
                socketTimeoutMS=int(mongo_timeout_ms),
            )

        self.mongo = mongo_client
        self.collection = mongo_client[mongo_database][mongo_collection]

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING MongoDB to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if MongoDB is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If MongoDB connection cannot be established and raise_error=True.
        """
        try:
            self.mongo.admin.command('ping')
        except PyMongoError as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to MongoDB for {self.collection.full_name}. Check the provided configuration parameters."
                ) from e
            return False
        else:
            return True
