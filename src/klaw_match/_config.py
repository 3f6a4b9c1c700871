"""Library configuration: MatchConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_match._logging import configure_logging

__all__ = [
    'MatchConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class MatchConfig:
    """Configuration for klaw-match.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or colored console output (False).
        trace: Emit DEBUG events for every branch evaluation and every
            AsyncResult settlement.
    """

    log_level: str | None = None
    json_logs: bool = True
    trace: bool = False


_DEFAULT = MatchConfig()

# Global configuration (set by init())
_config: MatchConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_MATCH_LOG_LEVEL, None when unset or empty."""
    level = os.environ.get('KLAW_MATCH_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_trace() -> bool:
    """Read KLAW_MATCH_TRACE as a boolean flag."""
    raw = os.environ.get('KLAW_MATCH_TRACE', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw not in _FALSY:
        logging.warning("Unknown KLAW_MATCH_TRACE value '%s', tracing disabled", raw)
    return False


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    trace: bool | None = None,
) -> MatchConfig:
    """Initialize klaw-match with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_MATCH_LOG_LEVEL if None; logging is left untouched if
            neither is set.
        json_logs: JSON (True) or console (False) log rendering.
        trace: Log every branch evaluation and settlement at DEBUG.
            Read from KLAW_MATCH_TRACE if None.

    Returns:
        The MatchConfig that was set.

    Example:
        ```python
        import klaw_match

        klaw_match.init(log_level='DEBUG', trace=True, json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_trace = trace if trace is not None else _detect_trace()

    _config = MatchConfig(
        log_level=resolved_level,
        json_logs=json_logs,
        trace=resolved_trace,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> MatchConfig:
    """Get the current configuration.

    Returns:
        The current MatchConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-match not initialized. Call klaw_match.init() first.'
        raise RuntimeError(msg)
    return _config


def active_config() -> MatchConfig:
    """Get the current configuration, or the defaults before init()."""
    return _config if _config is not None else _DEFAULT


def _reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
