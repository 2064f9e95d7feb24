"""Unit tests for the shorten_url lambda

Test coverage includes:

1. Form submissions (303 back to the listing page)
2. JSON submissions (200 with the new short URL)
3. Base64-encoded bodies
4. Empty URLs, undecodable bodies and malformed JSON (400)
5. Durable write failures (500) leave nothing resolvable behind
6. Store construction failures (500)
"""

import json
import base64
import urllib.parse
from typing import cast
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from linkshortener.types import LambdaEvent, LambdaContext
from linkshortener.lambdas.shorten_url import app
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.dao.exceptions import DataStoreError
from linkshortener.store import MappingStore


TARGET_URL = 'https://example.com/blog/chuck-norris-is-awesome'


def shorten_event(body: str | None, content_type: str | None = None, **extra) -> LambdaEvent:
    headers = {'Content-Type': content_type} if content_type else {}
    return cast(LambdaEvent, {
        'resource': '/shorten',
        'httpMethod': 'POST',
        'path': '/shorten',
        'headers': headers,
        'body': body,
        'requestContext': {'domainName': 'testhost:1000', 'stage': 'test'},
        **extra,
    })


def form_event(url: str) -> LambdaEvent:
    return shorten_event(urllib.parse.urlencode({'url': url}), 'application/x-www-form-urlencoded')


def json_event(payload) -> LambdaEvent:
    return shorten_event(json.dumps(payload), 'application/json')


class TestShortenUrlHandler:

    @pytest.fixture
    def context(self) -> LambdaContext:
        return cast(LambdaContext, {'function_name': 'shorten_url'})

    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch: MonkeyPatch, context: LambdaContext) -> None:
        self.durable = ShortURLMemoryDAO()
        self.store = MappingStore(durable=self.durable)
        monkeypatch.setattr(app, 'default_store', lambda: self.store)

        self.context = context

    # -------------------------------
    # 1. Form submissions
    # -------------------------------

    def test_lambda_handler_with_form_body(self) -> None:
        response = app.lambda_handler(form_event(TARGET_URL), self.context)

        assert response['statusCode'] == 303
        assert response['headers']['Location'] == 'https://testhost:1000/'

        mappings = self.store.mappings()
        assert list(mappings.values()) == [TARGET_URL]
        shortcode = next(iter(mappings))
        assert self.durable.get(shortcode).target == TARGET_URL

    def test_lambda_handler_without_content_type_parses_form(self) -> None:
        response = app.lambda_handler(shorten_event('url=https%3A%2F%2Fexample.com'), self.context)

        assert response['statusCode'] == 303
        assert list(self.store.mappings().values()) == ['https://example.com']

    def test_lambda_handler_with_local_invocation(self) -> None:
        event = form_event(TARGET_URL)
        del event['requestContext']

        response = app.lambda_handler(event, self.context)

        assert response['statusCode'] == 303
        assert response['headers']['Location'] == 'http://localhost:3000/'

    # -------------------------------
    # 2. JSON submissions
    # -------------------------------

    @pytest.mark.parametrize('content_type', ['application/json', 'application/json; charset=utf-8', 'APPLICATION/JSON'])
    def test_lambda_handler_with_json_body(self, content_type) -> None:
        event = shorten_event(json.dumps({'url': TARGET_URL}), content_type)

        response = app.lambda_handler(event, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 200
        assert response['headers']['Content-Type'] == 'application/json'
        shortcode = body['shortcode']
        assert body['target_url'] == TARGET_URL
        assert body['short_url'] == f'https://testhost:1000/{shortcode}'
        assert body['message'] == f'Successfully shortened {TARGET_URL} to https://testhost:1000/{shortcode}'
        assert self.store.resolve(shortcode) == TARGET_URL

    # -------------------------------
    # 3. Base64 bodies
    # -------------------------------

    def test_lambda_handler_with_base64_body(self) -> None:
        encoded = base64.b64encode(json.dumps({'url': TARGET_URL}).encode()).decode()
        event = shorten_event(encoded, 'application/json', isBase64Encoded=True)

        response = app.lambda_handler(event, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 200
        assert body['target_url'] == TARGET_URL

    # -------------------------------
    # 4. Bad requests
    # -------------------------------

    @pytest.mark.parametrize(
        'event',
        [
            form_event(''),
            shorten_event(None),
            shorten_event('other=field'),
            json_event({}),
            json_event({'url': ''}),
            json_event({'url': None}),
        ],
    )
    def test_lambda_handler_with_empty_url(self, event: LambdaEvent) -> None:
        response = app.lambda_handler(event, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['message'] == 'Bad Request (URL cannot be empty)'
        assert body['errorCode'] == 'EMPTY_URL'
        assert self.store.mappings() == {}

    @pytest.mark.parametrize('content_type', ['application/json', 'application/x-www-form-urlencoded'])
    @pytest.mark.parametrize('raw_body', ['!!!not-base64', '/w=='])
    def test_lambda_handler_with_undecodable_base64_body(
        self,
        monkeypatch: MonkeyPatch,
        raw_body: str,
        content_type: str,
    ) -> None:
        monkeypatch.setattr('linkshortener.utils.helpers.running_locally', lambda: False)
        event = shorten_event(raw_body, content_type, isBase64Encoded=True)

        response = app.lambda_handler(event, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['message'] == 'Bad Request (invalid request body)'
        assert body['errorCode'] == 'INVALID_REQUEST_BODY'
        assert self.store.mappings() == {}

    @pytest.mark.parametrize('raw_body', ['{not json', '["https://example.com"]', '"https://example.com"'])
    def test_lambda_handler_with_invalid_json(self, raw_body: str) -> None:
        response = app.lambda_handler(shorten_event(raw_body, 'application/json'), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['message'] == 'Bad Request (invalid JSON body)'
        assert body['errorCode'] == 'INVALID_JSON_BODY'
        assert self.store.mappings() == {}

    # -------------------------------
    # 5. Durable write failures
    # -------------------------------

    def test_lambda_handler_with_durable_failure(self, monkeypatch: MonkeyPatch) -> None:
        durable = MagicMock(spec=ShortURLBaseDAO)
        durable.insert.side_effect = DataStoreError('MongoDB is down')
        store = MappingStore(durable=durable)
        monkeypatch.setattr(app, 'default_store', lambda: store)

        response = app.lambda_handler(form_event(TARGET_URL), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 500
        assert body['message'] == 'Internal Server Error (Failed to save to database)'
        assert body['errorCode'] == 'DURABLE_WRITE_FAILED'
        assert store.mappings() == {}

    # -------------------------------
    # 6. Unexpected failures
    # -------------------------------

    def test_lambda_handler_with_invalid_configuration_file(self, monkeypatch: MonkeyPatch) -> None:
        monkeypatch.setattr('linkshortener.utils.helpers.running_locally', lambda: False)
        monkeypatch.setattr(app, 'default_store', MagicMock(side_effect=FileNotFoundError('Something goes wrong')))

        response = app.lambda_handler(form_event(TARGET_URL), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 500
        assert body['message'] == 'Internal Server Error'
