"""Structured logging helpers shared by the resource tooling."""

from __future__ import annotations

import contextvars
import json
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

_RESOURCE_CTX: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "resource", default=None
)
_CONFIGURED_SERVICES: set[str] = set()


class ResourceContextFilter(logging.Filter):
    """Inject the service name and the active resource into log records."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        if getattr(record, "resource", None) is None:
            record.resource = _RESOURCE_CTX.get()
        return True


class JsonLogFormatter(logging.Formatter):
    """Format log records as JSON with a consistent schema."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "service": getattr(record, "service", self._service_name),
            "message": record.getMessage(),
        }
        resource = getattr(record, "resource", None)
        if resource:
            payload["resource"] = resource
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info

        reserved = _reserved_log_keys()
        for key, value in record.__dict__.items():
            if key in reserved or key in payload:
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except TypeError:
                payload[key] = str(value)
        return json.dumps(payload, default=str)


def _reserved_log_keys() -> set[str]:
    return {
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
        "resource",
    }


@contextmanager
def resource_context(resource: object) -> Iterator[str]:
    """Attach ``resource`` (rendered with ``str``) to records logged in the block."""

    identity = str(resource)
    token = _RESOURCE_CTX.set(identity)
    try:
        yield identity
    finally:
        _RESOURCE_CTX.reset(token)


def configure_logging(service_name: str, level: int | str = logging.INFO) -> None:
    """Configure structured logging for the current service."""

    if service_name in _CONFIGURED_SERVICES:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonLogFormatter(service_name))
    handler.addFilter(ResourceContextFilter(service_name))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    _CONFIGURED_SERVICES.add(service_name)


def get_resource() -> Optional[str]:
    """Return the resource bound to the active context, if any."""

    return _RESOURCE_CTX.get()
