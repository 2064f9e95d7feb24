# Log events & error codes
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
EMPTY_URL = 'EMPTY_URL'
DURABLE_WRITE_FAILED = 'DURABLE_WRITE_FAILED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
INVALID_REQUEST_BODY = 'INVALID_REQUEST_BODY'
