"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once from the CLI entry point
before any other logging is done.

Logs go to stderr so they never interleave with the rendered tables.

Logging format:
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "sessionshortener.session",
    "message": "Batch shortened.",
    "appEnv": "local"
}
"""

import json
import logging
import logging.config
from datetime import datetime, UTC


class JsonFormatter(logging.Formatter):
    """JSON formatter tagging every record with the app environment

    Fields passed through `extra=` are attached after the fixed ones.
    """

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

    def __init__(self, app_env: str = 'local'):
        super().__init__()
        self.app_env = app_env

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'appEnv': self.app_env,
        }

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        return json.dumps(log, default=str)


def initialize_logging(level: str = 'INFO', app_env: str = 'local') -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                    'app_env': app_env,
                }
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                }
            },
            'root': {
                'level': level.upper(),
                'handlers': ['stderr'],
            },
        }
    )
