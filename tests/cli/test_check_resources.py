"""Tests for the resource checking command line."""

from __future__ import annotations

import json

import pytest

from libs.vault_resources.settings import get_settings
from scripts.dev import check_resources


@pytest.fixture(autouse=True)
def stub_logging(monkeypatch):
    calls: list[tuple[str, object]] = []
    monkeypatch.setattr(
        check_resources,
        "configure_logging",
        lambda service_name, level: calls.append((service_name, level)),
    )
    get_settings.cache_clear()
    yield calls
    get_settings.cache_clear()


def test_prints_one_summary_per_resource(capsys, template_file) -> None:
    check_resources.main(
        [
            "secret:db-pass:fmt=json,up=2h",
            f"tpl:config:tpl={template_file},fn=/etc/app/config.ini,rv=true",
        ]
    )

    lines = capsys.readouterr().out.strip().splitlines()
    first, second = (json.loads(line) for line in lines)

    assert first == {
        "resource": "secret/db-pass",
        "filename": "db-pass.secret",
        "format": "json",
        "renewable": False,
        "revoked": False,
        "update_seconds": 7200.0,
        "options": {"fmt": "json", "up": "2h"},
    }
    assert second["resource"] == "tpl/config"
    assert second["filename"] == "/etc/app/config.ini"
    assert second["revoked"] is True


def test_invalid_resource_exits_with_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        check_resources.main(["pki:web"])

    assert excinfo.value.code == 2
    assert "pki resource requires the 'cn' option" in capsys.readouterr().err


def test_malformed_resource_exits_with_error(capsys) -> None:
    with pytest.raises(SystemExit):
        check_resources.main(["secret"])

    assert "invalid resource specification" in capsys.readouterr().err


def test_log_level_flag_overrides_settings(stub_logging) -> None:
    check_resources.main(["--log-level", "warning", "aws:ci"])

    assert stub_logging == [("vault-resources", "WARNING")]


def test_out_of_range_update_exits_with_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        check_resources.main(["secret:db:up=99999999999999999999h"])

    assert excinfo.value.code == 2
    assert "should be a duration format" in capsys.readouterr().err
