"""structlog setup for toyrobot.

Every log line goes to stderr; stdout carries REPORT lines and results.
Modules log through stdlib ``logging`` and pass structured fields with
``extra={...}``; the formatter below lifts those fields into the event
dict, so ``--log-json`` entries read like::

    {"event": "command failed", "op": "place_robot", "code": "INVALID_POSITION",
     "board": "5x5", "level": "debug", "logger": "toyrobot.services.interpreter", ...}
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

LOGGER_NAME = "toyrobot"


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_processors(log_json: bool) -> list[Processor]:
    meta = structlog.stdlib.ProcessorFormatter.remove_processors_meta
    if log_json:
        return [meta, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [meta, structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: Log ``toyrobot`` records from DEBUG up. Otherwise WARNING+.
        log_json: One JSON object per line instead of the console renderer.

    Safe to call more than once: the root handler is replaced, not added,
    and context bound by a previous session is dropped.
    """
    structlog.contextvars.clear_contextvars()
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=_final_processors(log_json),
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_board(height: int, width: int) -> None:
    """Tag every following log entry with the session's board size."""
    structlog.contextvars.bind_contextvars(board=f"{height}x{width}")
