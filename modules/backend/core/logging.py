"""
Logging.

structlog on top of stdlib logging, configured from
config/settings/logging.yaml. The API server and the uptime-kuma CLI
share this setup; the CLI runs outside the project tree and then gets a
console-only WARNING configuration.

Every record carries timestamp, level, logger, event, func_name and
lineno. Callers outside a request add ``source`` explicitly:

    api         request handling (set by RequestContextMiddleware)
    cli         uptime-kuma HTTP client
    scheduler   monitor start/stop notifications
    internal    startup, shutdown, maintenance scripts

Usage:
    from modules.backend.core.logging import get_logger, log_with_source

    logger = get_logger(__name__)
    logger.info("Monitor created", extra={"monitor_id": 3})
    log_with_source(logger, "scheduler", "info", "Monitor started", monitor_id=3)

The optional file handler writes JSON lines to logs/system.jsonl.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.typing import Processor

from modules.backend.core.config import find_project_root, load_yaml_config
from modules.backend.core.config_schema import LoggingSchema

VALID_SOURCES = frozenset({"web", "cli", "api", "scheduler", "internal", "unknown"})

_FALLBACK_CONFIG = LoggingSchema(
    level="WARNING",
    format="console",
    handlers={
        "console": {"enabled": True},
        "file": {"enabled": False, "path": "logs/system.jsonl", "max_bytes": 0, "backup_count": 0},
    },
)

# Loud libraries only report warnings and up
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx", "httpcore")

_logging_config: LoggingSchema | None = None


def _load_logging_config() -> LoggingSchema:
    """Read logging.yaml once. No project root means the fallback config."""
    global _logging_config
    if _logging_config is None:
        try:
            _logging_config = LoggingSchema(**load_yaml_config("logging.yaml"))
        except (RuntimeError, FileNotFoundError):
            _logging_config = _FALLBACK_CONFIG
    return _logging_config


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(renderer: Processor, pre_chain: list[Processor]) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Arguments left as None take their value from logging.yaml. Calling
    again replaces the previous handlers.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_type: 'json' or 'console'
        enable_console: Log to stderr
        enable_file_logging: Log JSON lines to the configured file
    """
    config = _load_logging_config()
    handlers = config.handlers

    level = level or config.level
    format_type = format_type or config.format
    if enable_console is None:
        enable_console = handlers.console.enabled
    if enable_file_logging is None:
        enable_file_logging = handlers.file.enabled

    processors = _shared_processors()
    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = _formatter(structlog.processors.JSONRenderer(), processors)

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if enable_console:
        # stdout belongs to command output (--json, export)
        console_handler = logging.StreamHandler(sys.stderr)
        if format_type == "console":
            console_handler.setFormatter(
                _formatter(structlog.dev.ConsoleRenderer(colors=True), processors)
            )
        else:
            console_handler.setFormatter(json_formatter)
        root.addHandler(console_handler)

    if enable_file_logging:
        log_path = find_project_root() / handlers.file.path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=handlers.file.max_bytes,
            backupCount=handlers.file.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        root.addHandler(file_handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Return a structlog logger, normally ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log with an explicit ``source`` field.

    For code that runs outside an HTTP request, such as the CLI client or
    scheduler callbacks.

    Raises:
        AttributeError: If level is not a log method name
    """
    getattr(logger, level.lower())(message, source=source, **kwargs)
