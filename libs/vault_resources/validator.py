"""Validation of resource descriptors."""
from __future__ import annotations

from .base import VALID_RESOURCES, ResourceDescriptor
from .errors import MissingRequiredOptionError, UnsupportedResourceTypeError
from .options import OPTION_PARSERS, REQUIRED_OPTIONS


def validate_descriptor(descriptor: ResourceDescriptor) -> None:
    """Validate ``descriptor`` and refresh its typed fields.

    Checks run in order (resource type, option values, required options) and
    the first failure is raised. ``descriptor.options`` is never modified.
    """

    _check_resource_type(descriptor)
    _check_options(descriptor)
    _check_required_options(descriptor)


def _check_resource_type(descriptor: ResourceDescriptor) -> None:
    if descriptor.resource_type not in VALID_RESOURCES:
        raise UnsupportedResourceTypeError(descriptor.resource_type, resource=str(descriptor))


def _check_options(descriptor: ResourceDescriptor) -> None:
    options = descriptor.options
    for option, parse in OPTION_PARSERS.items():
        if option in options:
            parse(descriptor, option, options[option])


def _check_required_options(descriptor: ResourceDescriptor) -> None:
    for option in REQUIRED_OPTIONS.get(descriptor.resource_type, ()):
        if option not in descriptor.options:
            raise MissingRequiredOptionError(
                descriptor.resource_type, option, resource=str(descriptor)
            )


__all__ = ["validate_descriptor"]
