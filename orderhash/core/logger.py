import sys
import structlog
import logging
from typing import Optional, TextIO

def configure_logging(log_level: str = "INFO", stream: Optional[TextIO] = None):
    """
    Configures structlog to output JSON logs.
    Logs go to stderr by default so stdout carries only command results.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(sort_keys=True)
        ],
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

def get_logger(name: str, **context):
    """
    Named logger; extra keyword context is bound to every event.
    """
    return structlog.get_logger(name, **context)
