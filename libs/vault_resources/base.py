"""Common types describing a resource to retrieve from Vault."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

# option to set the filename of the resource
OPTION_FILENAME = "fn"
# option to set the output format
OPTION_FORMAT = "fmt"
# common name, used by the pki resource
OPTION_COMMON_NAME = "cn"
# full path to a template
OPTION_TEMPLATE_PATH = "tpl"
# renew the lease of the resource
OPTION_RENEWAL = "rn"
# revoke the old lease when retrieving a new one
OPTION_REVOKE = "rv"
# override the lease duration of the resource
OPTION_UPDATE = "up"

VALID_RESOURCES: frozenset[str] = frozenset(
    {"pki", "aws", "secret", "mysql", "tpl", "postgres", "cassandra"}
)


class ResourceFormat(str, Enum):
    """Output formats a retrieved resource can be written in."""

    YAML = "yaml"
    JSON = "json"
    INI = "ini"
    TXT = "txt"
    CERT = "cert"
    CSV = "csv"


@dataclass(slots=True)
class ResourceDescriptor:
    """A resource requested from Vault.

    ``options`` holds the raw key/value pairs supplied by the operator and is
    the only source of truth. ``format``, ``renewable``, ``revoked`` and
    ``update_interval`` are typed views refreshed by
    :func:`~libs.vault_resources.validator.validate_descriptor`.
    """

    resource_type: str = ""
    name: str = ""
    options: dict[str, str] = field(default_factory=dict)
    format: ResourceFormat = ResourceFormat.YAML
    renewable: bool = False
    revoked: bool = False
    update_interval: timedelta = field(default_factory=timedelta)

    def filename(self) -> str:
        """Return the output filename, honouring the ``fn`` override verbatim."""

        if OPTION_FILENAME in self.options:
            return self.options[OPTION_FILENAME]
        return f"{self.name}.{self.resource_type}"

    def __str__(self) -> str:
        return f"{self.resource_type}/{self.name}"


def default_descriptor() -> ResourceDescriptor:
    return ResourceDescriptor()


__all__ = [
    "OPTION_COMMON_NAME",
    "OPTION_FILENAME",
    "OPTION_FORMAT",
    "OPTION_RENEWAL",
    "OPTION_REVOKE",
    "OPTION_TEMPLATE_PATH",
    "OPTION_UPDATE",
    "VALID_RESOURCES",
    "ResourceDescriptor",
    "ResourceFormat",
    "default_descriptor",
]
