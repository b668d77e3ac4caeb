#!/usr/bin/env python3
"""Parse and validate Vault resource specifications from the command line."""
from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from libs.observability import configure_logging, resource_context
from libs.vault_resources import (
    ResourceDescriptor,
    ResourceError,
    ResourceSet,
    validate_descriptor,
)
from libs.vault_resources.settings import get_settings

logger = logging.getLogger(__name__)


def describe(descriptor: ResourceDescriptor) -> dict[str, Any]:
    return {
        "resource": str(descriptor),
        "filename": descriptor.filename(),
        "format": descriptor.format.value,
        "renewable": descriptor.renewable,
        "revoked": descriptor.revoked,
        "update_seconds": descriptor.update_interval.total_seconds(),
        "options": dict(descriptor.options),
    }


def check_resources(values: list[str]) -> list[dict[str, Any]]:
    resources = ResourceSet(values)
    summaries: list[dict[str, Any]] = []
    for descriptor in resources:
        with resource_context(descriptor):
            validate_descriptor(descriptor)
            logger.info("resource is valid")
        summaries.append(describe(descriptor))
    return summaries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate resources written as type:name[:key=value,...]"
    )
    parser.add_argument("resources", nargs="+", help="Resource specifications to validate")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the log level configured through VAULT_RESOURCES_LOG_LEVEL",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.service_name, args.log_level or settings.log_level)
    try:
        summaries = check_resources(args.resources)
    except ResourceError as exc:
        parser.error(str(exc))
    for summary in summaries:
        print(json.dumps(summary))


if __name__ == "__main__":  # pragma: no cover - CLI entry-point
    main()
