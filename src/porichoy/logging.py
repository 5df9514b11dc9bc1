"""Structured logging for the résumé PDF pipeline.

Every event carries the service name so render logs can be told apart from
the web server's access log when both share a stream.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

import structlog

LOG_SERVICE_NAME = "porichoy-pdf"
LOG_FORMATS = ("json", "console")


def _add_service(_: Any, __: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    event_dict.setdefault("service", LOG_SERVICE_NAME)
    return event_dict


def _output_processors(log_format: str) -> list[Any]:
    if log_format == "json":
        return [
            structlog.processors.dict_tracebacks,
            # Bangla text stays readable in the output.
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    if log_format == "console":
        # ConsoleRenderer formats exc_info itself.
        return [structlog.dev.ConsoleRenderer(colors=False)]
    raise ValueError(f"Unknown log format {log_format!r}; expected one of {', '.join(LOG_FORMATS)}")


def configure_logging(level: str = "INFO", *, log_format: str = "json") -> None:
    """Configure structlog on top of stdlib logging."""
    output = _output_processors(log_format)
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format="%(message)s")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_service,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            *output,
        ],
        # stdlib loggers resolve the stream at write time, so CLI runs never
        # keep a handle on a closed stdout.
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )


__all__ = ["LOG_FORMATS", "configure_logging"]
