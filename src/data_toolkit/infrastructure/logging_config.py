"""
Logging Configuration - Logging setup for applications using the toolkit

The toolkit only ever logs through module loggers and never configures
logging on import. Applications (and tests) call setup_logging() explicitly.

License: MIT
"""

import logging
import logging.config
import sys
import json
from typing import Optional
from datetime import datetime

import structlog

from ..config import get_config_manager, get_section, validate_logging_options
from ..exceptions import ConfigurationError

# Attributes every LogRecord carries, left out of the JSON extras
_RESERVED_ATTRS = frozenset(
    [
        "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
        "module", "lineno", "funcName", "created", "msecs", "relativeCreated",
        "thread", "threadName", "processName", "process", "exc_info", "exc_text",
        "stack_info", "taskName", "message",
    ]
)


def setup_logging(
    level: Optional[str] = None,
    format_type: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Setup logging for the toolkit.

    Arguments left as None are taken from the logging section of the
    configuration, which itself reads LOG_LEVEL, LOG_FORMAT and LOG_FILE.
    Only the values actually used are validated, so an explicit level
    overrides a bad LOG_LEVEL.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Format type ('simple', 'detailed', 'json')
        log_file: Optional log file path

    Raises:
        ConfigurationError: If the resulting level or format is not supported
    """
    environment = get_section("environment")
    config = get_config_manager().get_unvalidated_section("logging")

    resolved_level = level or config.level
    resolved_format = format_type or config.format_type
    errors = validate_logging_options(resolved_level, resolved_format)
    if errors:
        raise ConfigurationError(
            "Invalid logging configuration:\n" + "\n".join(f"- {e}" for e in errors)
        )

    log_level = resolved_level.upper()
    log_format = resolved_format.lower()
    log_file_path = log_file or config.log_file

    if environment == "production":
        setup_production_logging(log_level, log_file_path)
    else:
        setup_standard_logging(log_level, log_format, log_file_path)


def setup_production_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Setup production logging with structured JSON format.

    Args:
        level: Logging level
        log_file: Optional log file path
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Records from plain stdlib loggers still go out as JSON lines
    setup_standard_logging(level, "json", log_file)

    logger = logging.getLogger(__name__)
    logger.debug("Production logging configured", extra={"file_logging": log_file is not None})


def setup_standard_logging(
    level: str = "INFO",
    format_type: str = "simple",
    log_file: Optional[str] = None,
) -> None:
    """
    Setup standard Python logging.

    Args:
        level: Logging level
        format_type: Format type
        log_file: Optional log file path
    """
    formatters = {
        "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        "detailed": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s - %(message)s"
        },
        "json": {"()": "data_toolkit.infrastructure.logging_config.JSONFormatter"},
    }

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": format_type,
            "stream": sys.stdout,
        }
    }

    if log_file:
        config = get_config_manager().get_unvalidated_section("logging")
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": format_type,
            "filename": log_file,
            "maxBytes": config.max_file_size,
            "backupCount": config.backup_count,
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers.keys())},
    }

    logging.config.dictConfig(logging_config)


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add any extra fields from the record
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_entry[key] = value

        return json.dumps(log_entry, default=str, ensure_ascii=False)
