"""Environment-driven logging setup for processes that host serverconf.

``LOG_MODE=develop`` selects readable text with source locations at DEBUG.
Any other mode writes one JSON object per line at the level named by
``LOG_LEVEL`` (debug, info, warn, error; unknown values fall back to info).
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import TextIO

ENV_LOG_MODE = 'LOG_MODE'
ENV_LOG_LEVEL = 'LOG_LEVEL'
MODE_DEVELOP = 'develop'
HANDLER_NAME = 'serverconf.setup'

DEFAULT_LEVEL = logging.INFO
LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
}

_TEXT_FORMAT = '%(asctime)s %(levelname)s %(name)s %(pathname)s:%(lineno)d %(message)s'


class JsonFormatter(logging.Formatter):
    """Formats each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'time': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        if record.exc_info:
            payload['exc'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def parse_level(value: str | None) -> int:
    """Map a LOG_LEVEL string to a logging level; unknown or empty means INFO."""
    return LEVELS.get((value or '').strip().lower(), DEFAULT_LEVEL)


def is_develop_mode(value: str | None) -> bool:
    return (value or '').strip().lower() == MODE_DEVELOP


def setup_logging(
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
    logger_name: str = 'serverconf',
) -> logging.Logger:
    """Attach a stream handler to *logger_name* configured from *environ*.

    Re-running replaces the handler installed by the previous call. Records no longer
    propagate to the root logger.
    """
    env = os.environ if environ is None else environ
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if is_develop_mode(env.get(ENV_LOG_MODE)):
        level = logging.DEBUG
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    else:
        level = parse_level(env.get(ENV_LOG_LEVEL))
        handler.setFormatter(JsonFormatter())
    handler.set_name(HANDLER_NAME)

    logger = logging.getLogger(logger_name)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
            existing.close()
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    logger.debug('logging configured level=%s', logging.getLevelName(level))
    return logger
