"""Shared pytest fixtures for the resource tooling."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from libs.vault_resources import ResourceDescriptor  # noqa: E402


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    path = tmp_path / "db.tmpl"
    path.write_text("{{ .password }}\n", encoding="utf-8")
    return path


@pytest.fixture
def make_descriptor():
    def _make(resource_type: str, name: str = "web", **options: str) -> ResourceDescriptor:
        return ResourceDescriptor(resource_type=resource_type, name=name, options=dict(options))

    return _make
