from linkshortener.dao.mongo.mixins import MongoClientMixin
from linkshortener.dao.mongo.short_url_mongo_dao import ShortURLMongoDAO


__all__ = [
    'MongoClientMixin',
    'ShortURLMongoDAO',
]
