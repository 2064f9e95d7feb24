"""Two-tier store for short URL mappings

The mapping store fronts a durable DAO (MongoDB or Redis) with a volatile
in-process DAO. Lookups prefer the in-process tier; writes go to both.

Consistency rules:
    - The in-process tier is guarded by its own lock. Durable calls never
      run while that lock is held.
    - create() reserves the shortcode in memory first, then writes it to
      the durable tier. A failed durable write removes the reservation
      again, so a failed create() leaves nothing resolvable behind.
    - Between the reservation and the durable write, resolve() in this
      process may already return the new URL. If the durable tier then
      reports the code as taken (written by another process with another
      URL), the reservation is discarded and resolve() falls through to
      the durable tier's URL from then on. The two tiers only disagree
      for the duration of that one insert.
    - resolve() promotes durable hits into memory, so every code costs at
      most one durable round trip per process lifetime.
    - Durable lookup failures are logged and reported as NotFoundError:
      callers can't tell "absent" from "unreachable".

Classes:
    MappingStore:
        create(url) -> shortcode, resolve(shortcode) -> url, mappings() -> dict.

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO
    >>> store = MappingStore(durable=ShortURLMemoryDAO())
    >>> code = store.create('https://example.com/page')
    >>> store.resolve(code)
    'https://example.com/page'
"""

import logging
from collections.abc import Callable

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError
from linkshortener.exceptions import DurableWriteError, NotFoundError, ValidationError
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.constants import DEFAULT_SHORTCODE_LENGTH, DEFAULT_SHORTCODE_MAX_ATTEMPTS


logger = logging.getLogger(__name__)


class MappingStore:
    """Fast in-memory tier backed by a durable tier

    Attributes:
        fast (ShortURLMemoryDAO):
            Volatile tier, lost on process restart.
        durable (ShortURLBaseDAO):
            Persistent tier, survives restarts.
        shortcode_length (int):
            Length of generated shortcodes.
        max_attempts (int):
            How many fresh shortcodes create() tries before giving up on collisions.
    """

    def __init__(
        self,
        durable: ShortURLBaseDAO,
        fast: ShortURLMemoryDAO | None = None,
        generator: Callable[[int], str] = generate_shortcode,
        shortcode_length: int = DEFAULT_SHORTCODE_LENGTH,
        max_attempts: int = DEFAULT_SHORTCODE_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.durable = durable
        self.fast = fast if fast is not None else ShortURLMemoryDAO()
        self.generator = generator
        self.shortcode_length = shortcode_length
        self.max_attempts = max_attempts

    def create(self, url: str) -> str:
        """Create a new mapping for `url` and return its shortcode

        Procedure:
        - Step 1: Reject empty URLs
        - Step 2: Generate a shortcode and reserve it in the fast tier
        - Step 3: Persist the mapping in the durable tier
        - Step 4: Roll back the reservation if the durable write fails

        A shortcode taken in either tier costs one attempt; a fresh code is
        generated until `max_attempts` is exhausted.

        Raises:
            ValidationError: If `url` is empty or not a string.
            DurableWriteError: If the durable tier fails, or every attempt collided.
        """
        if not isinstance(url, str) or not url:
            raise ValidationError('URL cannot be empty')

        for attempt in range(1, self.max_attempts + 1):
            short_url = ShortURLModel(target=url, shortcode=self.generator(self.shortcode_length))

            try:
                self.fast.insert(short_url)
            except ShortURLAlreadyExistsError:
                logger.debug('Shortcode collision in fast tier.', extra={'shortcode': short_url.shortcode, 'attempt': attempt})
                continue

            try:
                self.durable.insert(short_url)
            except ShortURLAlreadyExistsError:
                self.fast.discard(short_url)
                logger.debug('Shortcode collision in durable tier.', extra={'shortcode': short_url.shortcode, 'attempt': attempt})
                continue
            except DataStoreError as e:
                self.fast.discard(short_url)
                logger.error(
                    'Failed to save short URL mapping to durable tier.',
                    extra={'operation': 'create', 'shortcode': short_url.shortcode, 'error': str(e)},
                )
                raise DurableWriteError('Failed to save to database') from e

            logger.info('Created short URL mapping.', extra={'shortcode': short_url.shortcode, 'target': url})
            return short_url.shortcode

        logger.error('Exhausted shortcode attempts.', extra={'operation': 'create', 'attempts': self.max_attempts})
        raise DurableWriteError(f'Unable to generate an unused shortcode after {self.max_attempts} attempts')

    def resolve(self, shortcode: str) -> str:
        """Return the original URL for `shortcode`

        A fast-tier hit never touches the durable tier. A durable hit is
        promoted into the fast tier before returning.

        Raises:
            NotFoundError:
                If neither tier holds the shortcode, or the durable lookup failed.
        """
        try:
            return self.fast.get(shortcode).target
        except ShortURLNotFoundError:
            pass

        try:
            short_url = self.durable.get(shortcode)
        except ShortURLNotFoundError:
            logger.debug('Shortcode not found in either tier.', extra={'shortcode': shortcode})
            raise NotFoundError(f"Short URL with code '{shortcode}' not found.") from None
        except DataStoreError as e:
            logger.warning(
                'Failed to look up short URL mapping in durable tier.',
                extra={'operation': 'resolve', 'shortcode': shortcode, 'error': str(e)},
            )
            raise NotFoundError(f"Short URL with code '{shortcode}' not found.") from e

        try:
            self.fast.insert(short_url)
        except ShortURLAlreadyExistsError:
            # Promoted concurrently by another request
            pass

        return short_url.target

    def mappings(self) -> dict[str, str]:
        """Snapshot of the fast tier (shortcode -> original URL)"""
        return self.fast.snapshot()
