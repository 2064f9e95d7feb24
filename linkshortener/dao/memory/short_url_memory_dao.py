"""In-process Data Access Object (DAO) for short URL mappings

This module provides the fast, volatile tier of the mapping store: a plain
dictionary guarded by a single mutual-exclusion lock. Its contents are lost
when the process exits.

Responsibilities:
    - Insert and retrieve short URLs from process memory;
    - Refuse to overwrite an existing shortcode;
    - Drop a reservation whose durable write failed;
    - Hand out consistent snapshots of all mappings.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in a Python dictionary.

Example:
    >>> from linkshortener.models import ShortURLModel
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.insert(ShortURLModel(target='https://example.com/page', shortcode='abc123'))
    <ShortURLMemoryDAO>
    >>> dao.get('abc123').target
    'https://example.com/page'
    >>> dao.snapshot()
    {'abc123': 'https://example.com/page'}
"""

import threading

from beartype import beartype

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """Lock-guarded in-memory DAO for short URL mappings

    Every read and write of the underlying dictionary happens while holding
    `self.lock`, so each operation is atomic with respect to the others.
    No I/O is ever performed under the lock.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLMemoryDAO:
            Store a mapping. Raises ShortURLAlreadyExistsError when the shortcode is taken.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a mapping. Raises ShortURLNotFoundError when the shortcode is unknown.

        discard(short_url: ShortURLModel) -> bool:
            Remove a mapping, but only if the stored target still matches.

        snapshot() -> dict[str, str]:
            Copy of all shortcode -> target mappings.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self._urls: dict[str, str] = {}

    def __len__(self) -> int:
        with self.lock:
            return len(self._urls)

    def __contains__(self, shortcode: object) -> bool:
        with self.lock:
            return shortcode in self._urls

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a short URL mapping into memory

        The existence check and the write happen under the same lock, so two
        concurrent inserts of the same shortcode can't both succeed.

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
        """
        with self.lock:
            if short_url.shortcode in self._urls:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
            self._urls[short_url.shortcode] = short_url.target
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Raises:
            ShortURLNotFoundError:
                If the short URL is not held in memory.
        """
        with self.lock:
            target = self._urls.get(shortcode)

        if target is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return ShortURLModel(target=target, shortcode=shortcode)

    @beartype
    def discard(self, short_url: ShortURLModel) -> bool:
        """Remove a mapping if (and only if) it still points at the same target

        Used to roll back a reservation whose durable write failed. Comparing
        the target keeps a rollback from removing someone else's mapping.

        Returns:
            bool: True if the mapping was removed, False otherwise.
        """
        with self.lock:
            if self._urls.get(short_url.shortcode) != short_url.target:
                return False
            del self._urls[short_url.shortcode]
            return True

    def snapshot(self) -> dict[str, str]:
        with self.lock:
            return dict(self._urls)

    def __repr__(self) -> str:
        return '<ShortURLMemoryDAO>'
