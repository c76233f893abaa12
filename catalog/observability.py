"""
Logging for the catalog service.

setup_logging() configures the root logger once per process, either with a
plain text format or with JSONFormatter for log shippers. log_requests is
the HTTP middleware that writes one line when a request arrives and one when
its response leaves.
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger("catalog.requests")

_EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms", "error_kind")
_HANDLER_MARK = "_catalog_handler"


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger. Calling it again only updates the level."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, _HANDLER_MARK, False) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    setattr(handler, _HANDLER_MARK, True)
    root.addHandler(handler)


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    logger.info(
        "%s %s",
        request.method,
        request.url.path + (f"?{request.url.query}" if request.url.query else ""),
        extra={"method": request.method, "path": request.url.path},
    )
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        "%s %s -> %s (%sms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
