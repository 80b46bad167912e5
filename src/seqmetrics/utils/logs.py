from __future__ import annotations

"""structlog wiring over stdlib logging."""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog events through stdlib logging as JSON lines on stderr."""

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level}'")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)
    logging.getLogger().setLevel(numeric_level)

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
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Bound logger backed by the stdlib logger *name*.

    Events honour stdlib levels even when ``configure_logging`` was never
    called, so an unconfigured application drops debug and info events.
    """

    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
