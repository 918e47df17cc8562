"""JSON logging for the Lambda handlers

Each Lambda package runs `initialize_logging()` from its `__init__.py`, so
the root logger is configured before any handler module logs. Records are
printed to stdout as one JSON object per line. Keys passed through `extra=`
(event codes, shortcodes, counts) become top-level fields:

{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "hexshortener.lambdas.shorten_url.app",
    "message": "Shortened URL. Responding with 200.",
    "event": "SHORTEN_SUCCESS"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from hexshortener.constants import LOG_LEVEL_ENV


class JsonFormatter(logging.Formatter):
    """Render a LogRecord, its exception and its `extra` fields as JSON."""

    STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {'asctime', 'message', 'taskName'}

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
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    """Send root logging to stdout through JsonFormatter at LOG_LEVEL (default INFO)."""
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
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
