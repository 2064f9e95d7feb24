"""Data Access Object (DAO) implementation for managing shortened URLs in MongoDB

This module provides a MongoDB-based implementation of ShortURLBaseDAO. It is
the default durable tier of the mapping store.

Each mapping is stored as one document in a single collection:

    {"code": "abc123", "url": "https://example.com/page"}

A unique index on `code` lets the data store itself reject duplicate
shortcodes, so the mapping store can retry with a fresh code.

Classes:
    ShortURLMongoDAO:
        DAO for storing and retrieving ShortURLModel in a MongoDB collection.

Example:
    >>> from linkshortener.models import ShortURLModel
    >>> from linkshortener.dao.mongo import ShortURLMongoDAO

    >>> dao = ShortURLMongoDAO(mongo_uri='mongodb://localhost:27017')
    >>> dao.insert(ShortURLModel(target='https://example.com/page', shortcode='abc123'))
    <ShortURLMongoDAO>
    >>> dao.get('abc123').target
    'https://example.com/page'
"""

from beartype import beartype
from pymongo.errors import DuplicateKeyError

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.mongo.mixins import MongoClientMixin
from linkshortener.dao.mongo.helpers import handle_mongo_error
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


CODE_FIELD = 'code'
URL_FIELD = 'url'


class ShortURLMongoDAO(MongoClientMixin, ShortURLBaseDAO):
    """MongoDB-based Data Access Object (DAO) for managing short URL mappings

    Attributes (see MongoClientMixin):
        mongo (pymongo.MongoClient):
            MongoDB client used to communicate with the server.
        collection (pymongo.collection.Collection):
            Collection holding the mapping documents.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLMongoDAO:
            Insert a short URL mapping document.
            Raises ShortURLAlreadyExistsError when a document with the same code exists.
            Raises DataStoreError on MongoDB failures.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on MongoDB failures.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._ensure_indexes()

    @handle_mongo_error
    def _ensure_indexes(self) -> None:
        self.collection.create_index(CODE_FIELD, unique=True)

    @handle_mongo_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMongoDAO':
        """Insert a short URL mapping into MongoDB

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMongoDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a document with the same code already exists.
            DataStoreError:
                If MongoDB fails to accept the write.
        """
        document = {CODE_FIELD: short_url.shortcode, URL_FIELD: short_url.target}
        try:
            self.collection.insert_one(document)
        except DuplicateKeyError as e:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.") from e
        return self

    @handle_mongo_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Raises:
            ShortURLNotFoundError:
                If no document matches the shortcode.
            DataStoreError:
                If MongoDB fails to answer the query.
        """
        document = self.collection.find_one({CODE_FIELD: shortcode}, projection={'_id': False})

        if document is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return ShortURLModel(target=document[URL_FIELD], shortcode=shortcode)

    def __repr__(self) -> str:
        return '<ShortURLMongoDAO>'
