import json
import binascii
import logging
import urllib.parse
from typing import Any

from linkshortener.exceptions import DurableWriteError, ValidationError
from linkshortener.store import MappingStore, default_store, init_store
from linkshortener.utils.helpers import base_url, get_short_url, header, request_body, guarantee_500_response
from linkshortener.lambdas.responses import response_200, response_303, response_400, response_500
from linkshortener.lambdas.shorten_url.constants import (
    INVALID_JSON_BODY,
    INVALID_REQUEST_BODY,
    EMPTY_URL,
    DURABLE_WRITE_FAILED,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)

# Lambda init phase: an unreachable durable tier fails the container here
init_store()


def is_json_request(event: dict[str, Any]) -> bool:
    content_type = header(event, 'Content-Type') or ''
    return content_type.split(';')[0].strip().lower() == 'application/json'


def handle(event: dict[str, Any], store: MappingStore) -> dict[str, Any]:
    """Shorten the URL carried by an API Gateway `POST /shorten` event

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from request body (HTML form or JSON)
    - Step 2: Create the mapping via the mapping store
    - Step 3: Respond with a redirect (form) or the new short URL (JSON)

    HTTP responses:
        200: Successful URL shortening (JSON requests)
            message, target_url, short_url, shortcode
        303: Successful URL shortening (form requests)
            headers:
                Location: listing page
        400: Bad client request
            message: undecodable body, invalid JSON or empty url
        500: Internal server error
            message: mapping could not be persisted

    Args:
        event (dict):
            API Gateway event payload in Lambda Proxy format.
        store (MappingStore):
            Process-wide mapping store.

    Returns:
        dict: API Gateway-compatible response.

    Example:
        >>> event = {'body': 'url=https%3A%2F%2Fexample.com', 'headers': {}}
        >>> handle(event, store)['statusCode']
        303
    """
    json_request = is_json_request(event)

    # 1- Extract original URL from request body
    try:
        body = request_body(event)
    except (binascii.Error, UnicodeDecodeError):
        logger.info('Undecodable request body. Responding with 400.', extra={'event': INVALID_REQUEST_BODY})
        return response_400(message='invalid request body', error_code=INVALID_REQUEST_BODY)

    if json_request:
        try:
            payload = json.loads(body or '{}')
        except json.JSONDecodeError:
            logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
            return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)
        if not isinstance(payload, dict):
            logger.info('JSON body is not an object. Responding with 400.', extra={'event': INVALID_JSON_BODY})
            return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)
        target_url = payload.get('url') or ''
    else:
        target_url = urllib.parse.parse_qs(body).get('url', [''])[0]

    # 2- Create the mapping
    try:
        shortcode = store.create(target_url)
    except ValidationError:
        logger.info('Empty URL in request. Responding with 400.', extra={'event': EMPTY_URL})
        return response_400(message='URL cannot be empty', error_code=EMPTY_URL)
    except DurableWriteError:
        logger.warning('Failed to persist short URL mapping. Responding with 500.', extra={'event': DURABLE_WRITE_FAILED})
        return response_500(message='Failed to save to database', error_code=DURABLE_WRITE_FAILED)

    # 3- Respond to client
    short_url = get_short_url(shortcode, event)
    logger.info(
        'Shortened URL.',
        extra={'shortcode': shortcode, 'short_url': short_url, 'event': SHORTEN_SUCCESS},
    )
    if not json_request:
        return response_303(location=f'{base_url(event).rstrip("/")}/')

    return response_200(
        {
            'message': f'Successfully shortened {target_url} to {short_url}',
            'target_url': target_url,
            'short_url': short_url,
            'shortcode': shortcode,
        }
    )


@guarantee_500_response
def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle incoming API Gateway requests to shorten URLs"""
    return handle(event, default_store())
