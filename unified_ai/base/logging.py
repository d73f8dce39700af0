"""Structured logging for the package.

Every logger handed out by :func:`get_logger` lives under the shared
``unified_ai`` logger. That logger owns one stderr handler, does not
propagate to the root logger, and takes its initial level from
``UNIFIED_AI_LOG_LEVEL`` (default ``INFO``). Applications can reconfigure it
with :func:`configure_logger` or attach their own handlers.

Events are JSON objects: ``log_event`` writes ``{"event": ..., **context,
**fields}``; ``normalized_log_event`` additionally guarantees the keys in
``REQUIRED_NORMALIZED_KEYS`` so chat events line up across providers.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Mapping, Optional

from .log_support import JsonFormatter, LogContext

ROOT_LOGGER_NAME = "unified_ai"
LOG_LEVEL_ENV = "UNIFIED_AI_LOG_LEVEL"

REQUIRED_NORMALIZED_KEYS = ("phase", "attempt", "error_code", "tokens")

_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Marker attribute on handlers this module created and may replace.
_MANAGED = "_unified_ai_managed"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` or ``"WARN"`` to its number."""
    if not value:
        return default
    name = value.strip().upper()
    if name == "WARN":
        name = "WARNING"
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def _formatter(json_mode: bool) -> logging.Formatter:
    if json_mode:
        return JsonFormatter()
    return logging.Formatter(_PLAIN_FORMAT)


def _managed_handlers(logger: logging.Logger, kind: str) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _MANAGED, None) == kind]


def _base_logger(json_mode: bool = True) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _managed_handlers(logger, "console"):
        return logger
    level = _parse_level(os.getenv(LOG_LEVEL_ENV))
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_formatter(json_mode))
    console.setLevel(level)
    setattr(console, _MANAGED, "console")
    logger.addHandler(console)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return the shared logger, or a child of it for ``name``.

    ``get_logger("claude")`` and ``get_logger("unified_ai.claude")`` return
    the same logger.
    """
    base = _base_logger()
    if name == ROOT_LOGGER_NAME:
        return base
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    child = logging.getLogger(name)
    child.propagate = True
    return child


def _drop_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    try:
        handler.close()
    except OSError:
        pass


def _attach_file(logger: logging.Logger, file_path: str, json_mode: bool) -> None:
    path = os.path.abspath(os.path.expanduser(file_path))
    keep: Optional[logging.Handler] = None
    for handler in _managed_handlers(logger, "file"):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            keep = handler
        else:
            _drop_handler(logger, handler)
    if keep is None:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        keep = RotatingFileHandler(path, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
        setattr(keep, _MANAGED, "file")
        logger.addHandler(keep)
    keep.setFormatter(_formatter(json_mode))
    keep.setLevel(logger.level)


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        Attach a rotating file handler writing to this path (10 MB x 5).
        ``None`` removes a previously attached one.
    json_mode:
        JSON lines when true, plain text otherwise.

    Handlers added by the application are not touched.
    """
    logger = _base_logger(json_mode)
    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for handler in _managed_handlers(logger, "console") + _managed_handlers(logger, "file"):
            handler.setLevel(resolved)
    for handler in _managed_handlers(logger, "console"):
        handler.setFormatter(_formatter(json_mode))

    if file_path is None:
        for handler in _managed_handlers(logger, "file"):
            _drop_handler(logger, handler)
    else:
        _attach_file(logger, file_path, json_mode)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit ``event`` as one JSON object merged with ``ctx`` and ``fields``.

    ``None`` field values are dropped unless ``keep_none`` is set.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    tokens: Mapping[str, Any] | None = None,
    level: int = logging.INFO,
    **extra: Any,
) -> None:
    """Like :func:`log_event`, but the canonical keys are always present.

    Extra fields never overwrite a canonical key.
    """
    fields: Dict[str, Any] = {k: v for k, v in extra.items() if v is not None}
    fields.update(
        phase=phase,
        attempt=attempt,
        error_code=error_code,
        tokens=dict(tokens) if tokens is not None else None,
    )
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "ROOT_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
