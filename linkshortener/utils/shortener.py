"""Shortcode generation utility

This module provides a helper function for generating short, random,
URL-safe codes drawn from the Base62 alphabet.

The module-level random source is seeded exactly once, when the module is
first imported, from the wall clock in nanoseconds. Separate processes
therefore don't replay the same sequence of codes after a restart.

Functions:
    generate_shortcode(length=6, rng=None):
        Generate a random Base62 string suitable for use as a URL slug.

Example:
    >>> from linkshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q3XbT0'
    >>> len(generate_shortcode(length=8))
    8
"""

import random
import string
import time

from linkshortener.utils.constants import DEFAULT_SHORTCODE_LENGTH


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits

_rng = random.Random(time.time_ns())


def generate_shortcode(length: int = DEFAULT_SHORTCODE_LENGTH, rng: random.Random | None = None) -> str:
    """Generate a random, fixed-length Base62 shortcode.

    Every character is drawn uniformly at random from ALPHABET. The function
    performs no uniqueness check: the caller decides what a collision means.

    Args:
        length (int, optional):
            Exact length of the resulting code. Defaults to 6.

        rng (random.Random, optional):
            Random source to draw from. Defaults to the module-level source
            seeded at import time.

    Returns:
        str: A random alphanumeric code of exactly `length` characters.

    Raises:
        TypeError: If `length` is not an integer.
        ValueError: If `length` is smaller than 1.

    Example:
        >>> code = generate_shortcode(length=6, rng=random.Random(42))
        >>> len(code), code.isalnum()
        (6, True)
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    source = rng if rng is not None else _rng
    return ''.join(source.choice(ALPHABET) for _ in range(length))
