"""Descriptors of the resources retrieved from Vault and their validation."""
from __future__ import annotations

from .base import (
    OPTION_COMMON_NAME,
    OPTION_FILENAME,
    OPTION_FORMAT,
    OPTION_RENEWAL,
    OPTION_REVOKE,
    OPTION_TEMPLATE_PATH,
    OPTION_UPDATE,
    VALID_RESOURCES,
    ResourceDescriptor,
    ResourceFormat,
    default_descriptor,
)
from .errors import (
    InvalidBooleanError,
    InvalidDurationError,
    InvalidFormatError,
    InvalidOptionError,
    MissingRequiredOptionError,
    ResourceError,
    ResourceSyntaxError,
    ResourceValidationError,
    TemplateNotFoundError,
    UnsupportedResourceTypeError,
)
from .options import parse_bool, parse_duration
from .parser import ResourceSet, parse_options, parse_resource
from .validator import validate_descriptor

__all__ = [
    "OPTION_COMMON_NAME",
    "OPTION_FILENAME",
    "OPTION_FORMAT",
    "OPTION_RENEWAL",
    "OPTION_REVOKE",
    "OPTION_TEMPLATE_PATH",
    "OPTION_UPDATE",
    "VALID_RESOURCES",
    "InvalidBooleanError",
    "InvalidDurationError",
    "InvalidFormatError",
    "InvalidOptionError",
    "MissingRequiredOptionError",
    "ResourceDescriptor",
    "ResourceError",
    "ResourceFormat",
    "ResourceSet",
    "ResourceSyntaxError",
    "ResourceValidationError",
    "TemplateNotFoundError",
    "UnsupportedResourceTypeError",
    "default_descriptor",
    "parse_bool",
    "parse_duration",
    "parse_options",
    "parse_resource",
    "validate_descriptor",
]
