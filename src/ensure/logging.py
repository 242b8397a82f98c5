# src/ensure/logging.py
"""Structured logging for ensure.

Uses structlog for structured logging. The checks in this package log a
``contract_violation`` event at DEBUG right before raising, so a host
application can see violations in its own log stream without catching them.

Architecture:
    get_logger() wraps a stdlib logger under the ``ensure`` namespace with
    this module's own structlog processor chain. Nothing here reads or
    changes structlog's global configuration, and importing ensure never
    configures logging.

    The stdlib logger decides what is emitted. A host that has not
    configured logging gets stdlib's default (WARNING and up), so the DEBUG
    events are dropped. A host that routes the ``ensure`` logger to a handler
    with structlog's ProcessorFormatter gets the full event dict.
    configure_logging() does exactly that for hosts that want it.
"""

import logging
import sys
from typing import IO, Any

import structlog
from structlog.stdlib import ProcessorFormatter

LOGGER_NAMESPACE = "ensure"

# Run on every event before it reaches the stdlib logger, and on foreign
# (plain stdlib) records inside ProcessorFormatter.
_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Remove ProcessorFormatter bookkeeping fields from output.

    ProcessorFormatter always adds _record and _from_structlog, so a
    KeyError here would mean the processor chain is wired wrong.
    """
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: IO[str] | None = None,
) -> None:
    """Send ensure's log events to a stream.

    Only the ``ensure`` stdlib logger is touched: its handlers are replaced,
    its level is set and propagation to the root logger is turned off. The
    root logger and structlog's global configuration stay as the host left
    them.

    Args:
        json_output: If True, output JSON. If False, human-readable.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Destination (default: sys.stdout at call time).
    """
    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.handlers = [handler]
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger backed by the stdlib logger ``name``.

    Args:
        name: Logger name (typically __name__, so it sits under ``ensure``).

    Returns:
        Bound structlog logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger
