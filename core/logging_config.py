import logging
import sys
import json
from datetime import datetime, timezone

from core.settings import settings


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured JSON logs"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Render context stamped by LogContext
        if hasattr(record, 'page'):
            log_data["page"] = record.page
        if hasattr(record, 'field_id'):
            log_data["field_id"] = record.field_id
        if hasattr(record, 'field_type'):
            log_data["field_type"] = record.field_type

        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info)
            }

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for local development"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        message = super().format(record)

        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            message += " " + " ".join(f"{key}={value}" for key, value in extra_fields.items())
        return message


def setup_logging(log_level: str = None, json_logs: bool = None):
    """Configure logging for the application"""

    if log_level is None:
        log_level = settings.LOG_LEVEL.upper()
    if json_logs is None:
        json_logs = settings.JSON_LOGS

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_logs:
        formatter = StructuredFormatter()
    else:
        formatter = ColoredFormatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Set specific logger levels to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with additional context methods"""
    logger = logging.getLogger(name)

    def log_with_context(level: int, msg: str, **kwargs):
        extra = {}
        if kwargs:
            extra['extra_fields'] = kwargs
        logger.log(level, msg, extra=extra)

    logger.debug_ctx = lambda msg, **kw: log_with_context(logging.DEBUG, msg, **kw)
    logger.info_ctx = lambda msg, **kw: log_with_context(logging.INFO, msg, **kw)
    logger.warning_ctx = lambda msg, **kw: log_with_context(logging.WARNING, msg, **kw)
    logger.error_ctx = lambda msg, **kw: log_with_context(logging.ERROR, msg, **kw)

    return logger


class LogContext:
    """Context manager for adding context to all logs within a block"""

    def __init__(self, **kwargs):
        self.context = kwargs
        self.old_factory = None

    def __enter__(self):
        self.old_factory = logging.getLogRecordFactory()
        context = self.context

        def record_factory(*args, **kwargs):
            record = self.old_factory(*args, **kwargs)
            for key, value in context.items():
                setattr(record, key, value)
            return record

        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        logging.setLogRecordFactory(self.old_factory)
