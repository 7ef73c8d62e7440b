"""Structured diagnostic sink routed to console and log files."""

import logging
import sys
from pathlib import Path
from typing import Any, Protocol

import structlog
from structlog.typing import EventDict, Processor

from src.config import Settings

LOGGER_NAME = "calculator"


class DiagnosticLogger(Protocol):
    """Write-only logger capability handed to routes and the validator."""

    def info(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...

    def error(self, event: str, **kw: Any) -> Any: ...


class BelowErrorFilter(logging.Filter):
    """Pass records below ERROR so error records stay out of the combined stream."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def add_service_tag(service: str) -> Processor:
    """Build a processor stamping every event with the service name."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return processor


class BestEffortFileHandler(logging.FileHandler):
    """File handler whose open and write failures never reach the caller.

    ``FileHandler.emit`` opens a delayed stream outside its own error
    handling, so a failing open would otherwise raise into the request.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            super().emit(record)
        except Exception:
            self.handleError(record)


def _file_handler(path: Path, formatter: logging.Formatter) -> logging.Handler:
    # delay=True defers opening until the first record is emitted
    handler = BestEffortFileHandler(path, encoding="utf-8", delay=True)
    handler.setFormatter(formatter)
    return handler


def configure_logging(settings: Settings) -> list[logging.Handler]:
    """Configure structlog and the standard library handlers.

    Three destinations are installed on the root logger:

    - console, human readable, every level
    - ``LOG_DIR/ERROR_LOG_FILE``, JSON lines, ERROR and above
    - ``LOG_DIR/COMBINED_LOG_FILE``, JSON lines, everything below ERROR

    JSON records carry ``timestamp``, ``level``, ``message`` and ``service``.
    If the log directory cannot be created the file destinations are skipped
    and the console keeps working.

    Args:
        settings: Application settings.

    Returns:
        The handlers installed on the root logger.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_tag(settings.APP_NAME),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
    )
    json_formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    handlers: list[logging.Handler] = [console_handler]

    log_dir = Path(settings.LOG_DIR)
    file_error: OSError | None = None
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        file_error = exc
    else:
        error_handler = _file_handler(log_dir / settings.ERROR_LOG_FILE, json_formatter)
        error_handler.setLevel(logging.ERROR)
        combined_handler = _file_handler(log_dir / settings.COMBINED_LOG_FILE, json_formatter)
        combined_handler.addFilter(BelowErrorFilter())
        handlers.extend([error_handler, combined_handler])

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    if file_error is not None:
        get_diagnostic_logger().warning(
            "Log files disabled: log directory is not writable",
            log_dir=str(log_dir),
            reason=str(file_error),
        )

    return handlers


def get_diagnostic_logger() -> DiagnosticLogger:
    """Dependency returning the service's diagnostic logger."""
    return structlog.get_logger(LOGGER_NAME)
