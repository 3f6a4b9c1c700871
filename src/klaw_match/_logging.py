"""structlog setup for the match and settlement trace.

klaw-match emits at most two kinds of DEBUG events, both gated by
``MatchConfig.trace``: ``pattern evaluated`` / ``fallback taken`` from the
matcher and ``async result settled`` from AsyncResult. Nothing is configured
on import; applications either configure structlog themselves or call
``configure_logging()`` (directly or through ``klaw_match.init(log_level=...)``)
to route the trace, together with stdlib records, through one root handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ['configure_logging', 'get_logger']


def _pre_chain() -> list[Any]:
    """Processors applied to both trace events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send structlog and stdlib logging through a single stderr handler.

    Args:
        level: Root level name. Trace events need "DEBUG" to be emitted.
        json_output: One JSON object per line, or colored console lines.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer(default=repr)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a lazily bound structlog logger named ``name``."""
    return structlog.get_logger(name)
