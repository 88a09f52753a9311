from typing import Dict, Any

import structlog
import logging
import sys
from uuid import UUID
from datetime import datetime

from jobboard.core.config import settings


def config_structlog():
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.DEBUG:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )


def _loggable(value: Any) -> Any:
    """Render ids, timestamps and schemas as JSON-friendly values."""
    if isinstance(value, (UUID, datetime)):
        return str(value)
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple, set)):
        return [_loggable(item) for item in value]
    return value


class AppLogger:
    def __init__(self, name: str, **default_context):
        self.name = name
        self.logger = structlog.get_logger(name)
        self.default_context = default_context

    def _clean_context(self, **kwargs) -> Dict[str, Any]:
        clean_context = {**self.default_context}
        for key, value in kwargs.items():
            clean_context[key] = _loggable(value)
        return clean_context

    def debug(self, message: str, **kwargs):
        context = self._clean_context(**kwargs)
        self.logger.debug(message, **context)

    def info(self, message: str, **kwargs):
        context = self._clean_context(**kwargs)
        self.logger.info(message, **context)

    def warning(self, message: str, **kwargs):
        context = self._clean_context(**kwargs)
        self.logger.warning(message, **context)

    def error(self, message: str, **kwargs):
        context = self._clean_context(**kwargs)
        self.logger.error(message, **context)

    def exception(self, message: str, **kwargs):
        """Log with the active exception's traceback."""
        context = self._clean_context(**kwargs)
        self.logger.exception(message, **context)

    def bind(self, **context):
        """Return a logger carrying additional default context."""
        new_context = {**self.default_context, **context}
        return AppLogger(self.name, **new_context)
