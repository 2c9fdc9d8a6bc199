# 📄 File: growguide/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what happens in the service in a structured way,
# making it easy to follow one request (and one day entry fanout) through the logs.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting (python-json-logger), contextual
# request/user identifiers carried in context variables, and a text fallback format.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: growguide.main (startup), RequestLoggingMiddleware (request context),
# every module through logging.getLogger(__name__)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Optional
from uuid import uuid4

from pythonjsonlogger import jsonlogger

from growguide.shared.config.settings import Settings, get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'growguide-api'
TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
JSON_FORMAT = '%(asctime)s %(levelname)s %(name)s %(module)s %(funcName)s %(lineno)d %(message)s'

_logging_configured = False


class ContextFilter(logging.Filter):
    """
    Adds request ID, user ID, hostname and service name to every record.
    """

    def __init__(self, name: str = ''):
        super().__init__(name)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.user_id = user_id_var.get('')
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        return True


class JSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for structured logging.

    Renames the standard fields to the keys our log pipeline indexes on and
    drops empty context values.
    """

    def __init__(self):
        super().__init__(
            JSON_FORMAT,
            rename_fields={'asctime': 'timestamp', 'levelname': 'level', 'name': 'logger'},
        )

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['service'] = getattr(record, 'service', SERVICE_NAME)
        log_record['hostname'] = getattr(record, 'hostname', 'unknown')
        for key in ('request_id', 'user_id'):
            value = getattr(record, key, '')
            if value:
                log_record[key] = value
            else:
                log_record.pop(key, None)


def setup_logging(settings: Optional[Settings] = None, enable_console: bool = True) -> logging.Logger:
    """
    Setup application logging configuration.

    Idempotent: the first call wins, later calls return the startup logger.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = settings or get_settings()
    numeric_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    if settings.LOG_FORMAT == 'json':
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    context_filter = ContextFilter()
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.LOG_FILE)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger('asyncio').setLevel(logging.WARNING)
    if not settings.DB_ECHO:
        logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier (generated when omitted)
        user_id: Caller identifier
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')

    try:
        yield {'request_id': request_id, 'user_id': user_id}
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def bind_user(user_id: Optional[str]) -> None:
    """Attach the resolved caller to the current request's log context."""
    user_id_var.set(user_id or '')
