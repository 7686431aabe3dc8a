"""Tests for themebuilder.core.versioning."""

import json

import pytest

from themebuilder.core.versioning import Version, bump_version
from themebuilder.errors import ErrorCode, ThemeBuilderError
from themebuilder.themes.models import ThemeValidationError


def _write_descriptor(root, version="1.2.3"):
    theme_dir = root / "demo"
    theme_dir.mkdir(parents=True, exist_ok=True)
    path = theme_dir / "package.json"
    path.write_text(json.dumps({"name": "demo", "version": version}), encoding="utf-8")
    return path


class TestVersion:
    @pytest.mark.parametrize(
        "level, expected",
        [
            ("patch", "1.2.4"),
            ("minor", "1.3.0"),
            ("major", "2.0.0"),
            ("bogus", "1.2.4"),
        ],
    )
    def test_bump(self, level, expected):
        assert str(Version.parse("1.2.3").bump(level)) == expected

    def test_default_level_is_patch(self):
        assert str(Version.parse("0.0.9").bump()) == "0.0.10"

    @pytest.mark.parametrize("raw", ["1.2", "1.2.x", "v1.2.3", "", None, 3])
    def test_malformed_versions_rejected(self, raw):
        with pytest.raises(ThemeValidationError):
            Version.parse(raw)


class TestBumpVersion:
    def test_writes_new_version(self, tmp_path):
        path = _write_descriptor(tmp_path)
        assert bump_version("demo", tmp_path, "minor") == "1.3.0"

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"name": "demo", "version": "1.3.0"}
        assert path.read_text(encoding="utf-8").startswith('{\n  "name"')

    def test_unknown_level_bumps_patch(self, tmp_path, caplog):
        _write_descriptor(tmp_path)
        with caplog.at_level("WARNING", logger="themebuilder.core.versioning"):
            assert bump_version("demo", tmp_path, "huge") == "1.2.4"
        assert "unknown bump level" in caplog.text

    def test_missing_descriptor(self, tmp_path):
        with pytest.raises(ThemeBuilderError) as info:
            bump_version("ghost", tmp_path)
        assert info.value.code is ErrorCode.THEME_NOT_FOUND

    def test_malformed_version_leaves_descriptor_alone(self, tmp_path):
        path = _write_descriptor(tmp_path, version="1.x.3")
        before = path.read_text(encoding="utf-8")
        with pytest.raises(ThemeValidationError):
            bump_version("demo", tmp_path)
        assert path.read_text(encoding="utf-8") == before
