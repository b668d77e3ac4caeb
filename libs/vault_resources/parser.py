"""Parse resources written as ``type:name[:key=value,...]`` strings."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .base import ResourceDescriptor, default_descriptor
from .errors import ResourceSyntaxError
from .validator import validate_descriptor

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = ":"
_OPTION_SEPARATOR = ","
_VALUE_SEPARATOR = "="


def parse_options(value: str) -> dict[str, str]:
    """Split ``fmt=json,up=1h`` into an option map.

    Empty entries are skipped and a repeated key keeps its last value.
    """

    options: dict[str, str] = {}
    for entry in value.split(_OPTION_SEPARATOR):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, option_value = entry.partition(_VALUE_SEPARATOR)
        key = key.strip()
        if not sep:
            raise ResourceSyntaxError(value, f"option '{entry}' should be in the form key=value")
        if not key:
            raise ResourceSyntaxError(value, f"option '{entry}' is missing a key")
        options[key] = option_value
    return options


def parse_resource(value: str) -> ResourceDescriptor:
    """Build an unvalidated descriptor from a resource specification string."""

    parts = value.split(_FIELD_SEPARATOR, 2)
    if len(parts) < 2:
        raise ResourceSyntaxError(value, "expected at least a resource type and a name")

    resource_type, name = parts[0].strip(), parts[1].strip()
    if not resource_type:
        raise ResourceSyntaxError(value, "the resource type is empty")
    if not name:
        raise ResourceSyntaxError(value, "the resource name is empty")

    descriptor = default_descriptor()
    descriptor.resource_type = resource_type
    descriptor.name = name
    if len(parts) == 3:
        try:
            descriptor.options = parse_options(parts[2])
        except ResourceSyntaxError as exc:
            raise ResourceSyntaxError(value, exc.reason) from exc
    return descriptor


class ResourceSet:
    """Ordered collection of resources collected from the command line."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._items: list[ResourceDescriptor] = []
        for value in values:
            self.add(value)

    def add(self, value: str) -> ResourceDescriptor:
        descriptor = parse_resource(value)
        self._items.append(descriptor)
        logger.debug(
            "resource added",
            extra={"resource": str(descriptor), "options": sorted(descriptor.options)},
        )
        return descriptor

    def validate(self) -> None:
        """Validate every resource in order, raising on the first failure."""

        for descriptor in self._items:
            validate_descriptor(descriptor)

    def __iter__(self) -> Iterator[ResourceDescriptor]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return ", ".join(str(descriptor) for descriptor in self._items)


__all__ = ["ResourceSet", "parse_options", "parse_resource"]
