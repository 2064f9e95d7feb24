import logging
from typing import Any

from linkshortener.exceptions import NotFoundError
from linkshortener.store import MappingStore, default_store, init_store
from linkshortener.utils.helpers import get_short_url, guarantee_500_response
from linkshortener.lambdas.responses import response_302, response_400, response_404
from linkshortener.lambdas.redirect_url.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)

# Lambda init phase: an unreachable durable tier fails the container here
init_store()


def handle(event: dict[str, Any], store: MappingStore) -> dict[str, Any]:
    """Redirect an API Gateway `GET /{shortcode}` event to its target URL

    This handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the shortcode via the mapping store
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Not found
            message: shortcode unknown (or durable tier unreachable)

    Example:
        >>> event = {'pathParameters': {'shortcode': 'Gh71TC'}}
        >>> response = handle(event, store)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info(
            'Missing "shortcode" in path. Responding with 400.',
            extra={'event': MISSING_SHORTCODE},
        )
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)

    # 2- Resolve shortcode
    try:
        target_url = store.resolve(shortcode)
    except NotFoundError:
        logger.info(
            'Short URL not found. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url {get_short_url(shortcode, event)} doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=target_url)


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to redirect URLs"""
    return handle(event, default_store())
