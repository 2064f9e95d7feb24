"""Application-wide logging initialization

Every record is written to stdout as one JSON object, so CloudWatch Logs
Insights can filter on its fields. Call `initialize_logging()` from each
lambda package's `__init__.py`, before the handler module logs anything.

Fields:
    timestamp, level, logger, message:
        Always present. The timestamp is UTC with millisecond precision.
    exception:
        Formatted traceback, when the record carries exc_info.
    extras:
        Whatever the caller passes through `extra=`. The fields in use:
            shortcode       code being created, resolved or listed
            operation       store operation that hit the durable tier ('create', 'resolve')
            attempt         collision retry number inside create()
            attempts        configured max_attempts, once they are exhausted
            error           durable tier error message
            event           handler outcome code (e.g. 'SHORT_URL_NOT_FOUND')
            backend         active durable backend ('mongodb', 'redis')

Example:
    A durable write failure inside MappingStore.create():

    {
        "timestamp": "2025-12-26T12:00:00.000Z",
        "level": "ERROR",
        "logger": "linkshortener.store.mapping_store",
        "message": "Failed to save short URL mapping to durable tier.",
        "operation": "create",
        "shortcode": "q3XbT0",
        "error": "MongoDB error on urlshortener.urls during insert(): ..."
    }
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkshortener.utils.constants import LOG_LEVEL_ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS and key not in log:
                log[key] = value

        return json.dumps(log, default=str)


# Driver loggers that flood DEBUG with connection-pool and request chatter
QUIET_LOGGERS = ('pymongo', 'botocore', 'boto3', 'urllib3')


def initialize_logging() -> None:
    """Install the JSON formatter on the root logger at LOG_LEVEL (default INFO)

    Database and AWS SDK loggers are held at WARNING regardless of LOG_LEVEL.
    """
    log_level = os.getenv(LOG_LEVEL_ENV, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'loggers': {name: {'level': 'WARNING'} for name in QUIET_LOGGERS},
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
