"""Typed parsers for the options recognised on a resource."""
from __future__ import annotations

import os
import re
from datetime import timedelta
from fractions import Fraction
from typing import Callable, Mapping

from .base import (
    OPTION_COMMON_NAME,
    OPTION_FILENAME,
    OPTION_FORMAT,
    OPTION_RENEWAL,
    OPTION_REVOKE,
    OPTION_TEMPLATE_PATH,
    OPTION_UPDATE,
    ResourceDescriptor,
    ResourceFormat,
)
from .errors import (
    InvalidBooleanError,
    InvalidDurationError,
    InvalidFormatError,
    TemplateNotFoundError,
)

_FORMAT_PATTERN = re.compile("|".join(member.value for member in ResourceFormat))

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_NANOSECONDS_PER_UNIT: Mapping[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}
# durations are bounded by a signed 64-bit nanosecond count
_MAX_DURATION_NS = 2**63 - 1
_DURATION_SEGMENT = re.compile(
    r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>ns|us|µs|μs|ms|s|m|h)"
)

OptionParser = Callable[[ResourceDescriptor, str, str], None]


def parse_bool(value: str) -> bool:
    """Parse ``value`` as a boolean, raising ``ValueError`` when it is not one."""

    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as ``1h30m``, ``45s`` or ``-1.5h``.

    Accepted units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and
    ``h``. A bare ``0`` is the only value allowed without a unit. Values
    must fit in a signed 64-bit count of nanoseconds. Precision
    below a microsecond is truncated.
    """

    remaining = value
    negative = False
    if remaining[:1] in ("-", "+"):
        negative = remaining[0] == "-"
        remaining = remaining[1:]
    if remaining == "0":
        return timedelta()
    if not remaining:
        raise ValueError(f"invalid duration: {value!r}")

    total = Fraction(0)
    position = 0
    while position < len(remaining):
        match = _DURATION_SEGMENT.match(remaining, position)
        if match is None or not (match.group("whole") or match.group("frac")):
            raise ValueError(f"invalid duration: {value!r}")
        whole = int(match.group("whole") or "0")
        fraction = match.group("frac") or ""
        amount = Fraction(whole)
        if fraction:
            amount += Fraction(int(fraction), 10 ** len(fraction))
        total += amount * _NANOSECONDS_PER_UNIT[match.group("unit")]
        position = match.end()

    limit = _MAX_DURATION_NS + 1 if negative else _MAX_DURATION_NS
    if total > limit:
        raise ValueError(f"invalid duration: {value!r} is out of range")

    microseconds = int(total / 1_000)
    return timedelta(microseconds=-microseconds if negative else microseconds)


def is_readable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


def _parse_format(descriptor: ResourceDescriptor, option: str, value: str) -> None:
    if _FORMAT_PATTERN.fullmatch(value) is None:
        raise InvalidFormatError(value, option=option, resource=str(descriptor))
    descriptor.format = ResourceFormat(value)


def _parse_update(descriptor: ResourceDescriptor, option: str, value: str) -> None:
    try:
        descriptor.update_interval = parse_duration(value)
    except ValueError as exc:
        raise InvalidDurationError(value, option=option, resource=str(descriptor)) from exc


def _parse_revoke(descriptor: ResourceDescriptor, option: str, value: str) -> None:
    try:
        descriptor.revoked = parse_bool(value)
    except ValueError as exc:
        raise InvalidBooleanError(value, option=option, resource=str(descriptor)) from exc


def _parse_renewal(descriptor: ResourceDescriptor, option: str, value: str) -> None:
    try:
        descriptor.renewable = parse_bool(value)
    except ValueError as exc:
        raise InvalidBooleanError(value, option=option, resource=str(descriptor)) from exc


def _accept(descriptor: ResourceDescriptor, option: str, value: str) -> None:
    # TODO: check fn is a usable path and cn a valid hostname.
    return None


def _check_template(descriptor: ResourceDescriptor, option: str, value: str) -> None:
    if not is_readable_file(value):
        raise TemplateNotFoundError(value, option=option, resource=str(descriptor))


# Checked in this order, so the reported error does not depend on how the
# caller built the option map.
OPTION_PARSERS: Mapping[str, OptionParser] = {
    OPTION_FORMAT: _parse_format,
    OPTION_UPDATE: _parse_update,
    OPTION_REVOKE: _parse_revoke,
    OPTION_RENEWAL: _parse_renewal,
    OPTION_FILENAME: _accept,
    OPTION_COMMON_NAME: _accept,
    OPTION_TEMPLATE_PATH: _check_template,
}

REQUIRED_OPTIONS: Mapping[str, tuple[str, ...]] = {
    "pki": (OPTION_COMMON_NAME,),
    "tpl": (OPTION_TEMPLATE_PATH,),
}


__all__ = [
    "OPTION_PARSERS",
    "REQUIRED_OPTIONS",
    "OptionParser",
    "is_readable_file",
    "parse_bool",
    "parse_duration",
]
