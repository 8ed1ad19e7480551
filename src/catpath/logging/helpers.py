from __future__ import annotations

"""Small logging helpers to standardize catpath logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'catpath' logger.
    - get_logger: Namespaced logger factory ('catpath.*').
    - trace_io utilities gated by CATPATH_TRACE_IO.

The plain formatter prefixes each record with the program name, which is how
catpath reports errors on stderr (``catpath: message``).
"""

import logging
import os
from typing import Optional, TextIO

from catpath.constants import ENV_LOG_LEVEL, ENV_TRACE_IO, PROG_NAME
from catpath.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'catpath.assembly').
        - msg: Formatted message string.
        - version: catpath.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import to reduce the chance of circular imports at import time.
            from catpath import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("CATPATH_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def resolve_level(default: int = logging.WARNING) -> int:
    """Return the effective level from CATPATH_LOG_LEVEL / CATPATH_TRACE_IO."""
    if is_trace_io_enabled():
        return logging.DEBUG
    name = (os.getenv(ENV_LOG_LEVEL) or "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_base_logger(
    *,
    json_logs: bool = False,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
    prog: str = PROG_NAME,
) -> logging.Logger:
    """Configure the base 'catpath' logger and return it.

    Any handler left over from a previous configuration is replaced, so the
    CLI can be invoked repeatedly in one process (tests do this) with a
    different stream or program name each time.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).
        prog: Program name used as the plain-text prefix.

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger(PROG_NAME)
    for old in list(base.handlers):
        base.removeHandler(old)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(f"{prog}: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'catpath'."""
    if not name or name == PROG_NAME:
        return logging.getLogger(PROG_NAME)
    if name.startswith(PROG_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{PROG_NAME}.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv(ENV_TRACE_IO) == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context attached to the record.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
