"""JSON Lines event log for summarization runs."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, MutableMapping, Optional
from uuid import uuid4

__all__ = ["LOGGER_NAME", "JsonLogFormatter", "RunEvents", "configure_json_logger"]

LOGGER_NAME = "annosum"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, trace id, event and fields."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "trace_id": getattr(record, "trace_id", None),
            "event": record.getMessage(),
        }
        payload.update(getattr(record, "fields", {}))
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_json_logger(log_path: Optional[Path], level: int = logging.INFO) -> logging.Logger:
    """Route the ``annosum`` logger to ``log_path`` (or nowhere), replacing earlier handlers."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_path is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(JsonLogFormatter())
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


class RunEvents(logging.LoggerAdapter):
    """Logger adapter stamping every event of one run with the same trace id."""

    def __init__(self, logger: logging.Logger, trace_id: Optional[str] = None) -> None:
        super().__init__(logger, {"trace_id": trace_id or uuid4().hex})

    @property
    def trace_id(self) -> str:
        return self.extra["trace_id"]

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, "fields": kwargs.pop("fields", {})}
        return msg, kwargs

    def emit(self, event: str, *, level: int = logging.INFO, **fields: Any) -> None:
        self.log(level, event, fields=fields)

    def flush(self) -> None:
        for handler in self.logger.handlers:
            handler.flush()
