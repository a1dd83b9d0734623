"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest

from beadsconfig.config import BEADS_DIR_ENV, LEGACY_LAYOUT_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own environment out of every test."""
    monkeypatch.delenv(LEGACY_LAYOUT_ENV, raising=False)
    monkeypatch.delenv(BEADS_DIR_ENV, raising=False)


@pytest.fixture()
def beads_dir(tmp_path):
    """An empty .beads directory."""
    d = tmp_path / ".beads"
    d.mkdir()
    return d


@pytest.fixture()
def write_json():
    def _write(path, data):
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
