from __future__ import annotations

"""Logger naming, base configuration and IO tracing for prcampaign.

Every module logs through `get_logger(<area>)`, i.e. a child of the
'prcampaign' logger, so a single handler installed by `setup_base_logger`
controls the whole tool. With ``PRCAMPAIGN_TRACE_IO=1`` the executor emits
one debug record per spawned command; the command and working directory
travel as structured context and show up as ``ctx`` in JSON logs.
"""

import logging
import os
from typing import Any, Dict, Optional, TextIO

BASE_LOGGER_NAME = "prcampaign"
TRACE_IO_ENV = "PRCAMPAIGN_TRACE_IO"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ts, level, module, msg, version and optional ctx."""

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from prcampaign import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("PRCAMPAIGN_VERSION", "unknown")

    def to_payload(self, record: logging.LogRecord) -> Dict[str, Any]:
        from datetime import datetime, timezone

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        return payload

    def format(self, record: logging.LogRecord) -> str:
        import json

        return json.dumps(self.to_payload(record), ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Install the single stream handler of the 'prcampaign' logger.

    Repeated calls only adjust the level; use `reset_base_logger` to switch
    between plain and JSON output.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(level)
    if base.handlers:
        return base

    import sys as _sys

    base.propagate = False
    handler = logging.StreamHandler(stream or _sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    return base


def reset_base_logger() -> None:
    """Drop every handler from the base logger so it can be configured again."""
    base = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(base.handlers):
        base.removeHandler(handler)
        handler.close()


def get_logger(name: str | None = None) -> logging.Logger:
    """Return `prcampaign.<name>`; names already under 'prcampaign' are kept."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv(TRACE_IO_ENV) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx: Any) -> None:
    """Log *message* at debug level with *ctx* attached as record context.

    No-op unless PRCAMPAIGN_TRACE_IO=1.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s %r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
