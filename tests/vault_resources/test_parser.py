"""Tests for parsing resource specification strings."""

from __future__ import annotations

import logging

import pytest

from libs.vault_resources import (
    MissingRequiredOptionError,
    ResourceFormat,
    ResourceSet,
    ResourceSyntaxError,
    parse_options,
    parse_resource,
)


def test_parse_resource_with_options() -> None:
    descriptor = parse_resource("secret:db:fmt=json,up=1h")

    assert descriptor.resource_type == "secret"
    assert descriptor.name == "db"
    assert descriptor.options == {"fmt": "json", "up": "1h"}
    # parsing does not validate, so typed fields keep their defaults
    assert descriptor.format is ResourceFormat.YAML


def test_parse_resource_without_options() -> None:
    descriptor = parse_resource("aws:ci-deploy")

    assert (descriptor.resource_type, descriptor.name, descriptor.options) == (
        "aws",
        "ci-deploy",
        {},
    )


def test_parse_resource_keeps_path_names() -> None:
    descriptor = parse_resource("pki:pki/issue/web:cn=web.example.com")

    assert descriptor.name == "pki/issue/web"
    assert descriptor.options == {"cn": "web.example.com"}


def test_option_values_keep_equal_signs() -> None:
    assert parse_options("fn=a=b,cn=x") == {"fn": "a=b", "cn": "x"}


def test_empty_option_entries_are_skipped() -> None:
    assert parse_options(",fmt=ini,,") == {"fmt": "ini"}


def test_repeated_option_keeps_last_value() -> None:
    assert parse_options("fmt=ini,fmt=csv") == {"fmt": "csv"}


def test_empty_option_value_is_allowed() -> None:
    assert parse_options("fn=") == {"fn": ""}


@pytest.mark.parametrize(
    "value",
    ["secret", "", ":db", "secret:", "secret: :fmt=json", "secret:db:fmt", "secret:db:=json"],
)
def test_parse_resource_rejects_malformed(value: str) -> None:
    with pytest.raises(ResourceSyntaxError) as excinfo:
        parse_resource(value)

    assert excinfo.value.value == value


def test_resource_set_collects_in_order() -> None:
    resources = ResourceSet(["secret:a", "mysql:b:rn=true"])
    resources.add("aws:c")

    assert len(resources) == 3
    assert [str(item) for item in resources] == ["secret/a", "mysql/b", "aws/c"]
    assert str(resources) == "secret/a, mysql/b, aws/c"


def test_resource_set_validates_every_resource() -> None:
    resources = ResourceSet(["secret:a:fmt=txt", "mysql:b:rn=true"])

    resources.validate()

    first, second = list(resources)
    assert first.format is ResourceFormat.TXT
    assert second.renewable is True


def test_resource_set_stops_at_first_invalid() -> None:
    resources = ResourceSet(["secret:a", "pki:web", "tpl:config"])

    with pytest.raises(MissingRequiredOptionError) as excinfo:
        resources.validate()

    assert excinfo.value.resource == "pki/web"


def test_resource_set_logs_added_resources(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="libs.vault_resources.parser"):
        ResourceSet().add("secret:db:fmt=json")

    record = caplog.records[-1]
    assert record.getMessage() == "resource added"
    assert record.resource == "secret/db"
    assert record.options == ["fmt"]


def test_parse_options_reports_the_option_text() -> None:
    with pytest.raises(ResourceSyntaxError) as excinfo:
        parse_options("fmt=json,up")

    assert excinfo.value.value == "fmt=json,up"
    assert "key=value" in excinfo.value.reason


def test_parse_resource_reports_the_whole_specification() -> None:
    with pytest.raises(ResourceSyntaxError) as excinfo:
        parse_resource("secret:db:fmt=json,=1h")

    assert excinfo.value.value == "secret:db:fmt=json,=1h"
    assert "missing a key" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ResourceSyntaxError)
