"""Utilities shared across the tooling to standardise observability."""

from .logging import (
    JsonLogFormatter,
    ResourceContextFilter,
    configure_logging,
    get_resource,
    resource_context,
)

__all__ = [
    "JsonLogFormatter",
    "ResourceContextFilter",
    "configure_logging",
    "get_resource",
    "resource_context",
]
