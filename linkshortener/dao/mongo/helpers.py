import functools
from typing import TypeVar, Any
from collections.abc import Callable

from pymongo.errors import PyMongoError

from linkshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_mongo_error[F](method: F) -> F:
    """Wrap MongoDB-interacting DAO methods to handle driver errors

    Any pymongo error that escapes the wrapped method (server selection
    timeouts, network errors, write concerns, etc.) is translated into a
    DataStoreError. DAO-level exceptions pass through untouched.

    Args:
        method (Callable[..., Any]):
            DAO method performing MongoDB operations which may raise pymongo.errors.PyMongoError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on MongoDB failures.

    Example:
        >>> @handle_mongo_error
        ... def find(self, shortcode):
        ...     return self.collection.find_one({'code': shortcode})
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except PyMongoError as e:
            raise DataStoreError(
                f"MongoDB error on {self.collection.full_name} during {method.__name__}(): {e}"
            ) from e

    return wrapper
