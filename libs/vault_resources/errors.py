"""Exceptions raised while parsing and validating Vault resources."""
from __future__ import annotations

from .base import (
    OPTION_FORMAT,
    OPTION_RENEWAL,
    OPTION_REVOKE,
    OPTION_TEMPLATE_PATH,
    OPTION_UPDATE,
)


class ResourceError(ValueError):
    """Base class for every resource error."""


class ResourceSyntaxError(ResourceError):
    """Raised when a resource specification string cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"invalid resource specification '{value}': {reason}")
        self.value = value
        self.reason = reason


class ResourceValidationError(ResourceError):
    """Raised when a descriptor fails validation.

    ``resource`` is the ``type/name`` identity of the offending descriptor.
    """

    def __init__(self, message: str, *, resource: str) -> None:
        super().__init__(message)
        self.resource = resource


class UnsupportedResourceTypeError(ResourceValidationError):
    def __init__(self, resource_type: str, *, resource: str) -> None:
        super().__init__(f"unsupported resource type: {resource_type}", resource=resource)
        self.resource_type = resource_type


class InvalidOptionError(ResourceValidationError):
    """An option value could not be converted to its expected type."""

    def __init__(self, option: str, value: str, message: str, *, resource: str) -> None:
        super().__init__(f"invalid resource options, {message}", resource=resource)
        self.option = option
        self.value = value


class InvalidFormatError(InvalidOptionError):
    def __init__(self, value: str, *, option: str = OPTION_FORMAT, resource: str) -> None:
        super().__init__(option, value, f"unsupported output format: {value}", resource=resource)


class InvalidDurationError(InvalidOptionError):
    def __init__(self, value: str, *, option: str = OPTION_UPDATE, resource: str) -> None:
        super().__init__(
            option,
            value,
            f"the update option: {value} is not valid, should be a duration format",
            resource=resource,
        )


class InvalidBooleanError(InvalidOptionError):
    def __init__(self, value: str, *, option: str, resource: str) -> None:
        label = {OPTION_REVOKE: "revoke", OPTION_RENEWAL: "renewal"}.get(option, option)
        super().__init__(
            option,
            value,
            f"the {label} option: {value} is invalid, should be a boolean",
            resource=resource,
        )


class TemplateNotFoundError(InvalidOptionError):
    def __init__(self, path: str, *, option: str = OPTION_TEMPLATE_PATH, resource: str) -> None:
        super().__init__(option, path, f"the template file: {path} does not exist", resource=resource)
        self.path = path


class MissingRequiredOptionError(ResourceValidationError):
    def __init__(self, resource_type: str, option: str, *, resource: str) -> None:
        super().__init__(
            f"invalid resource: {resource}, {resource_type} resource requires the '{option}' option",
            resource=resource,
        )
        self.resource_type = resource_type
        self.option = option


__all__ = [
    "InvalidBooleanError",
    "InvalidDurationError",
    "InvalidFormatError",
    "InvalidOptionError",
    "MissingRequiredOptionError",
    "ResourceError",
    "ResourceSyntaxError",
    "ResourceValidationError",
    "TemplateNotFoundError",
    "UnsupportedResourceTypeError",
]
