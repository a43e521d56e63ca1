"""
Logging configuration for the gateway.

Configures the stdlib root logger (coloured console or JSON output, optional
rotating file) and points structlog at it, so module loggers obtained through
``structlog.get_logger`` and plain ``logging`` share the same handlers.
"""
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

from ..config import Settings, get_settings
from .request_context import request_id_var

_CONFIGURED = False

_RECORD_ATTRS = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs", "message", "msg", "name",
    "pathname", "process", "processName", "relativeCreated", "stack_info", "thread",
    "threadName", "taskName",
}


class ContextFilter(logging.Filter):
    """Inject the current request_id into every LogRecord."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        rid = getattr(record, "request_id", None) or request_id_var.get()
        if rid is not None:
            record.request_id = rid
        if not hasattr(record, "service"):
            record.service = "kube-gateway"
        return True


class ColoredFormatter(logging.Formatter):
    """Colour the level name for console output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON structured log formatter.

    Emits time, level, name and message, then merges any extra attributes
    (structlog key/value pairs arrive here as extras).
    """

    def __init__(self, datefmt: Optional[str] = None) -> None:
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        rid = getattr(record, "request_id", None) or request_id_var.get()
        if rid:
            payload["request_id"] = rid

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key in payload:
                continue
            payload[str(key)] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _configure_structlog(json_output: bool) -> None:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.stdlib.render_to_log_kwargs)
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ])

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(
    settings: Optional[Settings] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    use_color: bool = True,
) -> logging.Logger:
    """Configure the root logger and structlog once per process.

    Args:
        settings: settings to read levels and formats from
        level: overrides ``settings.log_level``
        log_file: overrides ``settings.log_file``
        use_color: colour the console when attached to a TTY

    Returns:
        logging.Logger: the ``kube_gateway`` logger
    """
    global _CONFIGURED
    settings = settings or get_settings()
    logger = logging.getLogger("kube_gateway")

    if _CONFIGURED:
        return logger

    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    for h in list(root.handlers):
        root.removeHandler(h)

    context_filter = ContextFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.addFilter(context_filter)

    if settings.log_json:
        console_formatter = JSONFormatter(datefmt=settings.log_date_format)
    elif use_color and sys.stdout.isatty():
        console_formatter = ColoredFormatter(settings.log_format, datefmt=settings.log_date_format)
    else:
        console_formatter = logging.Formatter(settings.log_format, datefmt=settings.log_date_format)

    console_handler.setFormatter(console_formatter)
    root.addHandler(console_handler)

    file_path = log_file or settings.log_file
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.addFilter(context_filter)
        if settings.log_json:
            file_handler.setFormatter(JSONFormatter(datefmt=settings.log_date_format))
        else:
            file_handler.setFormatter(logging.Formatter(settings.log_format, datefmt=settings.log_date_format))
        root.addHandler(file_handler)

    # Let the server loggers propagate to the root handlers
    for log_name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        l = logging.getLogger(log_name)
        l.handlers = []
        l.propagate = True

    _configure_structlog(settings.log_json)

    _CONFIGURED = True
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
