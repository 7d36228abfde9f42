# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Request and page events for the ``ydf`` logger.

Library code reports what it does through :func:`log_event`, which attaches
the API resource, an event name and, for requests, the query parameters to
the log record. Two sinks read those records:

* the console, through rich, which prints the message only;
* an optional JSONL event log, one object per record, where the query
  parameters are written as an object with the API key masked.

httpx logs every request URL (query string included, so the API key too)
at INFO; its logger is held at WARNING while ydf logging is configured.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ydf"

REDACTED = "***"
SECRET_PARAMS = frozenset({"key"})

# Record attributes set by log_event, in the order they are written
EVENT_FIELDS = ("resource", "event", "status", "details", "error")

_console = Console(stderr=True)


def redact_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Copy of request params with secret values masked."""
    if params is None:
        return None
    return {name: (REDACTED if name in SECRET_PARAMS else value) for name, value in params.items()}


class JsonlFormatter(logging.Formatter):
    """Writes a record as one JSON object.

    Event fields are always present (null when unset); ``params`` appears
    only on records that carry request parameters.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
        }
        for field in EVENT_FIELDS:
            entry[field] = getattr(record, field, None)

        params = redact_params(getattr(record, "params", None))
        if params is not None:
            entry["params"] = params

        message = record.getMessage()
        if message:
            entry["message"] = message
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class JsonlFileHandler(logging.FileHandler):
    """Appends JSONL events to a file, creating its directory."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(str(path), mode="a", encoding="utf-8")
        self.setFormatter(JsonlFormatter())


def setup_logging(*, verbose: bool = False, jsonl_path: Path | None = None) -> logging.Logger:
    """Configure and return the ydf logger.

    Args:
        verbose: Show request and page events (DEBUG) on the console.
        jsonl_path: Also append every event, DEBUG included, to this file.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if jsonl_path is not None else level)

    console = RichHandler(
        console=_console,
        show_time=verbose,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    console.setLevel(level)
    logger.addHandler(console)

    if jsonl_path is not None:
        logger.addHandler(JsonlFileHandler(jsonl_path))

    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def log_event(
    level: int,
    message: str,
    *,
    resource: str | None = None,
    event: str | None = None,
    params: Mapping[str, Any] | None = None,
    status: int | None = None,
    details: Any = None,
    error: str | None = None,
) -> None:
    """Log one ydf event.

    Args:
        resource: Data API resource involved (``playlists``, ``channels``...).
        event: Short event name (``request``, ``page``, ``http_error``...).
        params: Query parameters of a request. Kept as given on the record,
            masked by the JSONL formatter.
        status: HTTP status of a failed response.
        details: Extra event data; dicts are written as JSON objects.
        error: Error message of a failure.
    """
    get_logger().log(
        level,
        message,
        extra={
            "resource": resource,
            "event": event,
            "params": dict(params) if params is not None else None,
            "status": status,
            "details": details,
            "error": error,
        },
    )
