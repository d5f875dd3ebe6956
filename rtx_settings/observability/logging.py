"""Structured logging configuration using structlog.

Console output for interactive use, JSON lines when the output is consumed
by another program.
"""

import sys
from typing import Any, Literal, cast

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.types import EventDict, WrappedLogger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]

_LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class LoggingEnv(BaseSettings):
    """RTX_LOG_* environment variables.

    Kept apart from ``RtxEnv`` so a malformed logging variable never affects
    settings resolution.
    """

    model_config = SettingsConfigDict(
        env_prefix="RTX_LOG_",
        case_sensitive=False,
        extra="ignore",
    )

    level: LogLevel = Field(default="WARNING", description="Minimum log level")
    format: LogFormat = Field(default="console", description="Log output format")


def setup_logging(level: str = "WARNING", format: str = "console") -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format - "json" or "console"
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS.get(level.upper(), 30)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def _drop_event(_logger: WrappedLogger, _method_name: str, _event_dict: EventDict) -> EventDict:
    raise structlog.DropEvent


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Until structlog has been configured, by ``setup_logging`` or by the host
    application, the returned logger discards every event.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        A bound structlog logger
    """
    if not structlog.is_configured():
        return cast(
            structlog.stdlib.BoundLogger,
            structlog.wrap_logger(structlog.ReturnLogger(), processors=[_drop_event]),
        )
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
