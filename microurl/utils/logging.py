"""Application-wide logging initialization

Call `initialize_logging()` once at process start-up, before any other
logging is done. Every record is written to stdout as a single JSON line:

{
    "timestamp": "2026-10-18T12:00:00.000Z",
    "level": "INFO",
    "logger": "microurl.services.micro_url_service",
    "message": "Shortened URL.",
    "recordId": 62
}

Fields passed through `extra={...}` are attached as top-level keys.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from microurl.constants import ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}

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

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # extras aren't guaranteed to be JSON-serializable
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Configure the root logger to emit JSON lines on stdout.

    Args:
        level (str | None):
            Log level name. Defaults to the `LOG_LEVEL` environment variable, then 'INFO'.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
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
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
