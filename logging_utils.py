"""Utilities for structured JSON logging."""
from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from core import settings as core_settings

# Refreshed by ``init_logging`` from the settings in effect at that point
MAX_IN_LOG_BODY = int(core_settings.settings.MAX_IN_LOG_BODY)

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _truncate(value: str) -> str:
    if len(value) <= MAX_IN_LOG_BODY:
        return value
    return value[:MAX_IN_LOG_BODY] + "…(truncated)"


def _sanitize(value: Any) -> Any:
    if isinstance(value, str):
        return _truncate(value)
    if isinstance(value, bytes):
        return _truncate(value.decode("utf-8", errors="replace"))
    if isinstance(value, Mapping):
        return {str(key): _sanitize(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_sanitize(item) for item in value]
    return value


class JsonFormatter(logging.Formatter):
    """Format log records into JSON with structured metadata."""

    def format(self, record: logging.LogRecord) -> str:
        message = _truncate(record.getMessage())
        meta: dict[str, Any] = {}
        extra_meta = getattr(record, "meta", None)
        if isinstance(extra_meta, Mapping):
            meta.update(_sanitize(dict(extra_meta)))
        elif extra_meta is not None:
            meta["extra"] = _sanitize(extra_meta)

        meta.setdefault("logger", record.name)
        meta.setdefault("module", record.module)
        meta.setdefault("pid", os.getpid())

        if record.exc_info:
            meta["exc_info"] = _truncate(self.formatException(record.exc_info))

        data = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "msg": message,
            "meta": meta,
        }
        return json.dumps(data, ensure_ascii=False, default=str)


_CONFIGURED = False
_CONFIG_LOCK = threading.Lock()


def _resolve_level(name: str | None) -> int:
    if not name:
        name = core_settings.settings.LOG_LEVEL
    normalized = str(name).strip().upper() or "INFO"
    return _LEVEL_MAP.get(normalized, logging.INFO)


def init_logging(app_name: str, level: str | None = None, *, json_logs: bool | None = None) -> None:
    """Configure root logging according to runtime configuration."""

    current = core_settings.settings
    effective_level = _resolve_level(level)
    use_json = bool(current.LOG_JSON) if json_logs is None else bool(json_logs)

    global _CONFIGURED, MAX_IN_LOG_BODY
    MAX_IN_LOG_BODY = int(current.MAX_IN_LOG_BODY)
    with _CONFIG_LOCK:
        if not _CONFIGURED:
            handler = logging.StreamHandler()
            if use_json:
                handler.setFormatter(JsonFormatter())
            else:
                handler.setFormatter(
                    logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
                )
            root = logging.getLogger()
            root.handlers.clear()
            root.addHandler(handler)
            root.setLevel(effective_level)
            logging.captureWarnings(True)
            logging.getLogger("pydantic").setLevel(logging.WARNING)
            _CONFIGURED = True
        else:
            logging.getLogger().setLevel(effective_level)

    logger = logging.getLogger(app_name)
    logger.log(
        max(logging.INFO, effective_level),
        "configuration summary",
        extra={"meta": current.configuration_summary()},
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def build_log_extra(context: Optional[Mapping[str, Any]] = None, **fields: Any) -> dict[str, Any]:
    """Wrap structured fields for ``logger.<level>(msg, **build_log_extra(...))``.

    Every key lands under ``meta`` with a ``ctx_`` prefix, so keys such as
    ``name`` or ``module`` never clash with :class:`logging.LogRecord`.
    """

    meta: dict[str, Any] = {}
    for key, value in {**dict(context or {}), **fields}.items():
        if value is None:
            continue
        meta[f"ctx_{key}"] = value
    return {"extra": {"meta": meta}}


__all__ = [
    "JsonFormatter",
    "build_log_extra",
    "get_logger",
    "init_logging",
]
