"""
payforblob.logging
------------------

Structured logging with:
- JSON or concise colored text formats
- Context-local fields via `contextvars` (trace_id, component, signer, ...)
- Safe value coercion (bytes → hex, dataclasses → dict)
- Helpers to bind/unbind context fields and generate trace IDs

Library modules only call `get_logger(__name__)` and log at DEBUG; handlers
are installed by the embedding application:

    from payforblob import logging as plog

    plog.configure(json=False, level="DEBUG")
    log = plog.get_logger(__name__)

    with plog.trace_scope():
        plog.bind(component="submitter")
        msg = new_msg_pay_for_blobs(signer, blob)
"""

from __future__ import annotations

import datetime as _dt
import io
import json
import logging
import os
import sys
import threading
import traceback
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Optional

# ----------------------------
# Context
# ----------------------------

_LOG_CONTEXT: ContextVar[Dict[str, Any]] = ContextVar("_LOG_CONTEXT", default={})

DEFAULT_CONTEXT_KEYS = (
    "trace_id",
    "component",
    "signer",
    "namespace",
)

# LogRecord attributes that are never treated as structured extras.
_RESERVED_ATTRS = frozenset(
    (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    )
)


def context() -> Dict[str, Any]:
    """Return a *copy* of the active logging context."""
    return dict(_LOG_CONTEXT.get())


def bind(**fields: Any) -> None:
    """Merge fields into the active context."""
    cur = dict(_LOG_CONTEXT.get())
    cur.update({k: _coerce_value(v) for k, v in fields.items()})
    _LOG_CONTEXT.set(cur)


def unbind(*keys: str) -> None:
    cur = dict(_LOG_CONTEXT.get())
    for k in keys:
        cur.pop(k, None)
    _LOG_CONTEXT.set(cur)


def clear_context() -> None:
    _LOG_CONTEXT.set({})


@contextmanager
def trace_scope(trace_id: Optional[str] = None):
    """
    Ensure a trace_id is present for the duration of the scope. Restores the
    prior context on exit.
    """
    prev = dict(_LOG_CONTEXT.get())
    try:
        bind(trace_id=trace_id or short_uuid())
        yield
    finally:
        _LOG_CONTEXT.set(prev)


def short_uuid() -> str:
    return uuid.uuid4().hex[:12]


# ----------------------------
# Formatters
# ----------------------------


def _utcnow_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="milliseconds")


_LEVEL_TO_INT = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

_RESET = "\x1b[0m"
_GREY = "\x1b[90m"
_CYAN = "\x1b[36m"

_LEVEL_COLOR = {
    logging.DEBUG: _GREY,
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[1m\x1b[35m",
}


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _LEVEL_TO_INT.get(str(level).upper(), logging.INFO)


def _supports_color(stream: Any) -> bool:
    try:
        return stream.isatty() and os.environ.get("NO_COLOR") is None
    except (AttributeError, ValueError):
        return False


def _coerce_value(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v).hex()
    if is_dataclass(v) and not isinstance(v, type):
        return asdict(v)
    return str(v)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in record.__dict__.items():
        if k.startswith("_") or k in _RESERVED_ATTRS:
            continue
        out[k] = _coerce_value(v)
    return out


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utcnow_iso(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "pid": os.getpid(),
            "tid": threading.get_ident(),
        }
        payload.update({k: _coerce_value(v) for k, v in context().items()})
        for k, v in _extras(record).items():
            payload.setdefault(k, v)

        if record.exc_info:
            payload["err"] = "".join(traceback.format_exception(*record.exc_info)).rstrip()

        return json.dumps(payload, default=str, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    """
    Human-friendly one-liner:
      2026-01-05T12:34:56.789+00:00 | DEBUG | payforblob.blob.commitment | trace_id=abc shares=4 | commitment computed
    """

    def __init__(self, stream: Any = None):
        super().__init__()
        self._color = _supports_color(stream) if stream is not None else False

    def format(self, record: logging.LogRecord) -> str:
        ts = _utcnow_iso()
        lvl = record.levelname
        name = record.name

        ctx = context()
        parts = [f"{k}={ctx[k]}" for k in DEFAULT_CONTEXT_KEYS if ctx.get(k) is not None]
        parts += [f"{k}={v}" for k, v in _extras(record).items() if k not in ctx]
        fields = " ".join(parts)

        if self._color:
            c = _LEVEL_COLOR.get(record.levelno, "")
            lvl_s = f"{c}{lvl:<5}{_RESET}"
            name_s = f"{_CYAN}{name}{_RESET}"
            ts_s = f"{_GREY}{ts}{_RESET}"
        else:
            lvl_s = f"{lvl:<5}"
            name_s = name
            ts_s = ts

        line = f"{ts_s} | {lvl_s} | {name_s}"
        if fields:
            line += f" | {fields}"
        line += f" | {record.getMessage()}"

        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return line


# ----------------------------
# Public setup API
# ----------------------------


def configure(
    *,
    json: bool = False,
    level: str | int = "INFO",
    stream: io.TextIOBase | Any = sys.stderr,
    propagate_existing: bool = False,
) -> None:
    """
    Configure the `payforblob` logger hierarchy.

    Parameters
    ----------
    json : bool
        Emit one JSON object per line instead of the text format.
    level : str | int
        Minimum log level.
    stream : TextIO
        Stream for the console handler (default: stderr).
    propagate_existing : bool
        If True, keep previously installed handlers.
    """
    root = logging.getLogger("payforblob")
    root.setLevel(_coerce_level(level))

    if not propagate_existing:
        for h in list(root.handlers):
            root.removeHandler(h)

    console = logging.StreamHandler(stream)
    console.setLevel(_coerce_level(level))
    console.setFormatter(JSONFormatter() if json else TextFormatter(stream))
    root.addHandler(console)


def configure_from_config(cfg: Any = None) -> None:
    """Configure logging from `payforblob.config` (LogConfig section)."""
    if cfg is None:
        from .config import get_config

        cfg = get_config()
    configure(json=cfg.log.fmt == "json", level=cfg.log.level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "payforblob")


__all__ = [
    "context",
    "bind",
    "unbind",
    "clear_context",
    "trace_scope",
    "short_uuid",
    "JSONFormatter",
    "TextFormatter",
    "configure",
    "configure_from_config",
    "get_logger",
]
