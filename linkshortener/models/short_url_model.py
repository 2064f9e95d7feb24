from dataclasses import dataclass


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Mappings are immutable once created: neither tier exposes an update.

    Attributes:
        target (str):
            The original long URL that the short code redirects to.
        shortcode (str):
            The short identifier representing the shortened URL.

    Example:
        >>> url = ShortURLModel(target='https://example.com/article/123', shortcode='abc123')
        >>> url.target
        'https://example.com/article/123'
        >>> url.shortcode
        'abc123'
    """

    target: str
    shortcode: str
