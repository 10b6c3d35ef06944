"""Logging setup.

structlog loggers hand their events to the stdlib root logger, so the console
and file handlers installed here receive every record, including those from
third-party libraries logging through stdlib directly.
"""

import logging
from pathlib import Path

import structlog
from opentelemetry import trace
from rich.logging import RichHandler

from .config import Settings, get_settings

LOG_DIR = Path("logs")


def _add_trace_context(logger, method_name, event_dict):
    """Add OpenTelemetry trace context to log entries."""
    current_span = trace.get_current_span()
    if current_span and current_span.is_recording():
        span_context = current_span.get_span_context()
        if span_context.is_valid:
            event_dict["trace_id"] = f"0x{format(span_context.trace_id, '032x')}"
            event_dict["span_id"] = f"0x{format(span_context.span_id, '016x')}"
    return event_dict


# Applied to structlog events and to plain stdlib records alike
SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    _add_trace_context,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(
    log_level: str | None = None, settings: Settings | None = None
) -> None:
    """Configure logging for the application.

    Console output is human readable in debug mode and JSON otherwise. The log
    file, written in production or when ``log_to_file`` is set, is always JSON.

    Args:
        log_level: Override the log level from settings
        settings: Settings to configure from (defaults to the global instance)
    """
    settings = settings or get_settings()
    log_level = log_level or settings.log_level

    if log_level:
        level = getattr(logging, log_level.upper(), logging.INFO)
    else:
        level = logging.DEBUG if settings.debug else logging.INFO

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    if settings.debug:
        console_renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        console_renderer = structlog.processors.JSONRenderer()

    console_handler = RichHandler(
        rich_tracebacks=True,
        show_path=settings.debug,
        show_time=False,  # Timestamp comes from structlog
    )
    console_handler.setFormatter(_formatter(console_renderer))
    root_logger.addHandler(console_handler)

    if not settings.debug or settings.log_to_file:
        LOG_DIR.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(
            LOG_DIR / f"{settings.app_name}.log", encoding="utf-8"
        )
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    _configure_structlog()

    get_logger(__name__).info("Logging configured", level=logging.getLevelName(level))


def _configure_structlog() -> None:
    # Loggers created at import time pick up this configuration on every call
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog logger instance
    """
    return structlog.get_logger(name)
