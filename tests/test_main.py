"""Tests for the bd-config command line."""

from __future__ import annotations

import json

import pytest

from beadsconfig.main import main


class TestShow:
    def test_defaults_when_no_config(self, beads_dir, capsys):
        assert main(["show", str(beads_dir)]) == 0
        out = capsys.readouterr().out
        assert "showing defaults" in out
        assert "sqlite" in out
        assert str(beads_dir / "beads.db") in out
        assert str(beads_dir / "issues.jsonl") in out

    def test_reads_config(self, beads_dir, write_json, capsys):
        write_json(
            beads_dir / "metadata.json",
            {"database": "beads.db", "backend": "dolt", "layout": "v2", "deletions_retention_days": 9},
        )
        assert main(["show", str(beads_dir)]) == 0
        out = capsys.readouterr().out
        assert "dolt" in out
        assert str(beads_dir / "var" / "beads.db") in out
        assert "retention (days): 9" in out

    def test_legacy_layout_env(self, beads_dir, write_json, monkeypatch, capsys):
        write_json(beads_dir / "metadata.json", {"database": "beads.db", "layout": "v2"})
        monkeypatch.setenv("BD_LEGACY_LAYOUT", "1")
        main(["show", str(beads_dir)])
        out = capsys.readouterr().out
        assert str(beads_dir / "var" / "beads.db") not in out
        assert str(beads_dir / "beads.db") in out

    def test_beads_dir_env(self, beads_dir, monkeypatch, capsys):
        monkeypatch.setenv("BEADS_DIR", str(beads_dir))
        assert main(["show"]) == 0
        assert str(beads_dir / "beads.db") in capsys.readouterr().out

    def test_parse_error_exit_code(self, beads_dir, capsys):
        (beads_dir / "metadata.json").write_text("{", encoding="utf-8")
        assert main(["show", str(beads_dir)]) == 1
        assert "error:" in capsys.readouterr().err


class TestInit:
    def test_writes_default_config(self, tmp_path):
        target = tmp_path / "new"
        assert main(["init", str(target)]) == 0
        data = json.loads((target / "metadata.json").read_text(encoding="utf-8"))
        assert data == {"database": "beads.db", "jsonl_export": "issues.jsonl"}

    def test_layout_and_backend(self, beads_dir):
        main(["init", str(beads_dir), "--layout", "v2", "--backend", "dolt"])
        data = json.loads((beads_dir / "metadata.json").read_text(encoding="utf-8"))
        assert data["layout"] == "v2"
        assert data["backend"] == "dolt"

    def test_existing_config_untouched(self, beads_dir, write_json, capsys):
        write_json(beads_dir / "metadata.json", {"database": "mine.db"})
        assert main(["init", str(beads_dir)]) == 0
        data = json.loads((beads_dir / "metadata.json").read_text(encoding="utf-8"))
        assert data == {"database": "mine.db"}
        assert "already exists" in capsys.readouterr().out

    def test_invalid_layout_is_usage_error(self, beads_dir):
        with pytest.raises(SystemExit) as exc_info:
            main(["init", str(beads_dir), "--layout", "v9"])
        assert exc_info.value.code == 2


class TestMigrate:
    def test_migrates_legacy(self, beads_dir, write_json, capsys):
        write_json(beads_dir / "config.json", {"database": "beads.db"})
        assert main(["migrate", str(beads_dir)]) == 0
        assert "Migrated" in capsys.readouterr().out
        assert (beads_dir / "metadata.json").exists()
        assert not (beads_dir / "config.json").exists()

    def test_nothing_to_migrate(self, beads_dir, capsys):
        assert main(["migrate", str(beads_dir)]) == 0
        assert "No config found" in capsys.readouterr().out

    def test_already_migrated(self, beads_dir, write_json, capsys):
        write_json(beads_dir / "metadata.json", {"database": "beads.db"})
        assert main(["migrate", str(beads_dir)]) == 0
        assert "up to date" in capsys.readouterr().out
