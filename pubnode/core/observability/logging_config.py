"""
Logging configuration — central setup for the pubnode CLI.

Called once at startup by main.py.  Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Levels are resolved in precedence order:
    --debug  >  --verbose  >  --quiet  >  PUBNODE_LOG_LEVEL  >  WARNING

Optional file output via PUBNODE_LOG_FILE / PUBNODE_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "PUBNODE_LOG_LEVEL"
ENV_LOG_FILE = "PUBNODE_LOG_FILE"
ENV_LOG_FILE_LEVEL = "PUBNODE_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

# (threshold, format, datefmt): the first threshold >= level wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
_CONSOLE_FALLBACK = ("%(message)s", None)

_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s", "%Y-%m-%d %H:%M:%S")


# ── Level selection ─────────────────────────────────────────────


def cli_log_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return (env or {}).get(ENV_LOG_LEVEL, "WARNING")


def _parse_level(level: str | None) -> int:
    """Map a level name to its number; anything unknown is WARNING."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) and level else logging.WARNING


# ── Handlers ────────────────────────────────────────────────────


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = next(
        ((f, d) for threshold, f, d in _CONSOLE_FORMATS if level <= threshold),
        _CONSOLE_FALLBACK,
    )
    # stderr, so prompts and JSON output on stdout stay clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(*_FILE_FORMAT))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with pubnode's.

    Args:
        level: Console log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file, always written in full detail.
        log_file_level: Level for the log file. Defaults to ``level``.
    """
    console_level = _parse_level(level)
    handlers = [_console_handler(console_level)]

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    # Each handler filters on its own level
    root.setLevel(min(h.level for h in handlers))

    logging.raiseExceptions = False
