"""End-to-end tests for the command-line front-end."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from themebuilder.app import run_app


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


class TestHelp:
    def test_no_arguments_prints_help(self, workdir, capsys):
        assert run_app([]) == 0
        out = capsys.readouterr().out
        assert "init" in out
        assert "Workflow:" in out

    def test_unknown_command_prints_help(self, workdir, capsys):
        assert run_app(["frobnicate"]) == 0
        assert "usage:" in capsys.readouterr().out
        assert list(workdir.iterdir()) == []


class TestInit:
    @pytest.mark.parametrize("kind", ["dark", "light"])
    def test_init_then_merge(self, workdir, capsys, kind):
        assert run_app(["init", "my-theme", "My Theme", "--type", kind]) == 0
        assert run_app(["merge", "my-theme"]) == 0

        theme = _read_json(workdir / "my-theme" / "themes" / "my-theme-color-theme.json")
        assert theme["name"] == "My Theme"
        assert theme["type"] == kind
        assert theme["colors"]
        assert theme["tokenColors"]
        assert "semanticTokenColors" not in theme

        out = capsys.readouterr().out
        assert "Initialized theme: My Theme" in out
        assert "Merged theme:" in out

    def test_existing_directory_exits_1(self, workdir, capsys):
        (workdir / "taken").mkdir()
        assert run_app(["init", "taken", "Taken"]) == 1
        assert "already exists" in capsys.readouterr().err
        assert list((workdir / "taken").iterdir()) == []

    def test_missing_name_exits_1(self, workdir, capsys):
        assert run_app(["init", "only-id"]) == 1
        assert "usage:" in capsys.readouterr().err
        assert not (workdir / "only-id").exists()

    def test_invalid_type_exits_1(self, workdir, capsys):
        assert run_app(["init", "x", "X", "--type", "sepia"]) == 1
        assert not (workdir / "x").exists()


class TestMerge:
    def test_missing_parts_exits_1(self, workdir, capsys):
        (workdir / "bare").mkdir()
        assert run_app(["merge", "bare"]) == 1
        assert "parts directory missing" in capsys.readouterr().err
        assert not (workdir / "bare" / "themes").exists()

    def test_malformed_fragment_exits_2(self, workdir, capsys):
        parts = workdir / "broken" / "parts"
        parts.mkdir(parents=True)
        (parts / "base.json").write_text("{oops", encoding="utf-8")
        assert run_app(["merge", "broken"]) == 2
        assert "Invalid theme data" in capsys.readouterr().err


class TestBump:
    def test_bump_levels(self, workdir, capsys):
        assert run_app(["init", "v", "V"]) == 0
        assert run_app(["bump", "v"]) == 0
        assert run_app(["bump", "v", "minor"]) == 0
        assert run_app(["bump", "v", "major"]) == 0
        assert _read_json(workdir / "v" / "package.json")["version"] == "1.0.0"
        assert "Version updated: 1.0.0" in capsys.readouterr().out

    def test_missing_descriptor_exits_1(self, workdir, capsys):
        assert run_app(["bump", "ghost"]) == 1
        assert 'Theme "ghost" not found.' in capsys.readouterr().err


class TestPackage:
    def _configure_packager(self, workdir: Path, code: str) -> None:
        config = {"packager": [sys.executable, "-c", code]}
        (workdir / "themebuilder.yaml").write_text(json.dumps(config), encoding="utf-8")

    def test_package_reports_vsix(self, workdir, capsys):
        assert run_app(["init", "pkg", "Pkg"]) == 0
        self._configure_packager(workdir, "pass")
        assert run_app(["package", "pkg"]) == 0
        assert f"Packaged: {workdir / 'pkg' / 'pkg-0.0.1.vsix'}" in capsys.readouterr().out

    def test_packager_failure_exits_1(self, workdir, capsys):
        assert run_app(["init", "pkg", "Pkg"]) == 0
        self._configure_packager(workdir, "import sys; sys.exit(1)")
        assert run_app(["package", "pkg"]) == 1
        assert "Failed to package theme" in capsys.readouterr().err

    def test_missing_descriptor_exits_1(self, workdir):
        assert run_app(["package", "ghost"]) == 1


class TestConfig:
    def test_invalid_config_exits_1(self, workdir, capsys):
        (workdir / "themebuilder.yaml").write_text("- not\n- a mapping\n", encoding="utf-8")
        assert run_app(["merge", "any"]) == 1
        assert "mapping" in capsys.readouterr().err

    def test_log_file_receives_debug_records(self, workdir):
        (workdir / "themebuilder.yaml").write_text("log_file: builder.log\n", encoding="utf-8")
        assert run_app(["init", "logged", "Logged"]) == 0
        log_text = (workdir / "builder.log").read_text(encoding="utf-8")
        assert "initialized theme logged" in log_text

    def test_base_dir_from_config(self, workdir):
        (workdir / "themebuilder.yaml").write_text("base_dir: themes-home\n", encoding="utf-8")
        assert run_app(["init", "elsewhere", "Elsewhere"]) == 0
        assert (workdir / "themes-home" / "elsewhere" / "package.json").is_file()


def test_quoted_name_survives_init_and_merge(workdir):
    name = 'Dracula "Pro" \\ Night'
    assert run_app(["init", "q", name]) == 0
    assert run_app(["merge", "q"]) == 0
    theme = _read_json(workdir / "q" / "themes" / "q-color-theme.json")
    assert theme["name"] == name


def test_module_entry_point_exits_with_run_app_code(workdir, monkeypatch, capsys):
    from themebuilder.__main__ import main

    monkeypatch.setattr(sys, "argv", ["themebuilder"])
    with pytest.raises(SystemExit) as info:
        main()
    assert info.value.code == 0
    assert "Workflow:" in capsys.readouterr().out
