"""structlog configuration for team-links.

Log events go to stderr so stdout stays free for command output (e.g.
``--links-only``). An optional JSON-lines file receives the same events.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import structlog

LOG_FILENAME = "team_links.jsonl"


def _stream_is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Route structlog through the stdlib root logger.

    *stream* defaults to ``sys.stderr`` as seen at call time. When *log_file*
    is given its parent directory is created and events are appended to it.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    stream = stream if stream is not None else sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    root_logger.addHandler(logging.StreamHandler(stream))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(logging.FileHandler(log_file, encoding="utf-8"))

    if _stream_is_tty(stream):
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=True)
        tail: list[structlog.types.Processor] = [renderer]
    else:
        tail = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            *tail,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.types.FilteringBoundLogger:
    return structlog.get_logger(name)
