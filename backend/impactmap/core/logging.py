"""structlog setup for the ImpactMap backend.

Every record, whether emitted through structlog or through a stdlib logger
(uvicorn, FastAPI), passes the same processor chain and is rendered either
as one JSON object per line or, in debug mode, by the colored console
renderer. Each entry carries the service name and, inside a request, the
X-Request-ID correlation id.
"""

import logging
import logging.config
from typing import Any

import structlog
from asgi_correlation_id.context import correlation_id

SERVICE_NAME = "impactmap-backend"

# Stdlib loggers that are too chatty at INFO
QUIET_LOGGERS = ("uvicorn.access", "httpx")


def add_correlation_id(logger, method, event_dict):
    """Attach the current request's correlation id, when inside a request."""
    cid = correlation_id.get(None)
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def add_service_name(logger, method, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def shared_processors() -> list:
    """Processors applied to both structlog and stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,
        add_correlation_id,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def build_logging_config(log_level: str = "INFO", json_logs: bool = True) -> dict[str, Any]:
    """Return the logging.config.dictConfig mapping routing stdlib logs through structlog."""
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
        # JSON has no traceback pretty-printer; render exc_info into a string field
        final_processors = [structlog.processors.format_exc_info, renderer]
    else:
        final_processors = [structlog.dev.ConsoleRenderer()]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    *final_processors,
                ],
                "foreign_pre_chain": shared_processors(),
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["stdout"], "level": log_level.upper()},
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
    }


def configure_structlog(log_level: str = "INFO", json_logs: bool = True) -> None:
    """Install the logging configuration.

    Call this BEFORE any other app imports (structlog caches the processor
    chain on first use).

    Args:
        log_level: Root log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_logs: True for JSON lines, False for the console renderer
    """
    logging.config.dictConfig(build_logging_config(log_level, json_logs))

    structlog.configure(
        processors=shared_processors() + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
