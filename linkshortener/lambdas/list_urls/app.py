import logging
from typing import Any

from linkshortener.store import MappingStore, default_store, init_store
from linkshortener.utils.helpers import get_short_url, guarantee_500_response
from linkshortener.lambdas.responses import response_200


logger = logging.getLogger(__name__)

# Lambda init phase: an unreachable durable tier fails the container here
init_store()


def handle(event: dict[str, Any], store: MappingStore) -> dict[str, Any]:
    """List the mappings held by this process (`GET /`)

    Only the in-memory tier is listed: mappings created by other processes,
    or before a restart, appear once they have been resolved here.

    HTTP responses:
        200: {"short_urls": [{"shortcode", "target", "short_url"}, ...]}
    """
    mappings = store.mappings()
    logger.debug('Listing short URLs.', extra={'count': len(mappings)})
    return response_200(
        {
            'short_urls': [
                {
                    'shortcode': shortcode,
                    'target': target,
                    'short_url': get_short_url(shortcode, event),
                }
                for shortcode, target in sorted(mappings.items())
            ]
        }
    )


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to list short URLs"""
    return handle(event, default_store())
