# src/assertkit/core/logging.py
"""Logging for assertkit.

assertkit is a library first. Its modules obtain loggers from get_logger(),
which wraps the stdlib logger of the same name in a structlog BoundLogger.
Until a host configures logging, stdlib level filtering decides what is
emitted: debug and info events are dropped, warnings reach stderr through
logging.lastResort. Nothing is ever written to stdout.

configure_logging() is for applications: the assertkit CLI, or a test
suite's conftest that wants to see generator activity. It renders structlog
events and graphql-core's stdlib records through one ProcessorFormatter,
as console lines or JSON, on stderr by default.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter
from structlog.typing import Processor

# Dependencies whose DEBUG output is not about assertkit
QUIET_LOGGERS: tuple[str, ...] = ("graphql", "dynaconf")


def _drop_formatter_keys(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Strip ProcessorFormatter's bookkeeping keys before rendering."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def _pre_chain() -> list[Processor]:
    # Runs for structlog events and for foreign stdlib records alike
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]


def _render_chain(json_output: bool) -> list[Processor]:
    if json_output:
        return [
            _drop_formatter_keys,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    return [_drop_formatter_keys, structlog.dev.ConsoleRenderer(colors=False)]


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "WARNING",
    stream: TextIO | None = None,
) -> None:
    """Route assertkit and third-party logging through one structlog renderer.

    Replaces the root logger's handlers. Safe to call repeatedly; loggers
    returned by get_logger() pick up the new configuration immediately.

    Args:
        json_output: Render one JSON object per line instead of console text
        level: Root log level name (DEBUG, INFO, WARNING, ERROR)
        stream: Destination (default: sys.stderr at call time)
    """
    log_level = logging.getLevelNamesMapping()[level.upper()]
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level, *pre_chain, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(ProcessorFormatter(processors=_render_chain(json_output), foreign_pre_chain=pre_chain))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    # Never louder than WARNING, never louder than root
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """structlog logger backed by the stdlib logger ``name``.

    The processor chain is resolved lazily from the current structlog
    configuration, and the stdlib logger applies its effective level, so an
    unconfigured host only ever sees warnings and errors.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger
