"""Observability — structured log output and per-request access logging.

Invariants:
    - Every JSON line has timestamp (the record's creation time), level, logger, message
    - Request context (method, path, status_code, duration_ms) and domain context
      (email, job_id, error_code) are emitted only when set on the record
    - log_requests() writes exactly one access line per HTTP request, including
      requests that end in an unhandled exception (logged as status 500, then re-raised)
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger(__name__)

EXTRA_FIELDS = (
    "method", "path", "status_code", "duration_ms",
    "email", "job_id", "error_code",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


async def log_requests(request: Request, call_next):
    """HTTP middleware: time the request and log one access line for it."""
    started = time.perf_counter()
    context = {"method": request.method, "path": request.url.path}
    try:
        response = await call_next(request)
    except Exception:
        context.update(
            status_code=500,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        logger.error(f"{context['method']} {context['path']} failed", extra=context)
        raise
    context.update(
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    log = logger.warning if response.status_code >= 500 else logger.info
    log(
        f"{context['method']} {context['path']} -> {response.status_code}",
        extra=context,
    )
    return response


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install one root handler: JSON in production, plain text otherwise."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
