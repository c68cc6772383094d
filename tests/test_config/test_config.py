"""Tests for option merging and project descriptor loading."""

import json
import math

import pytest

from userscriptify.config import (
    DEFAULT_CONFIG,
    ProjectDescriptor,
    UserscriptConfig,
    is_present,
    load_project,
    normalize_options,
    resolve,
)


# ---------------------------------------------------------------------------
# is_present
# ---------------------------------------------------------------------------


class TestIsPresent:
    @pytest.mark.parametrize("value", [None, False, "", 0, 0.0, math.nan])
    def test_absent_values(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["x", "0", " ", 1, -1, 0.5, True, [], {}, ["a"]])
    def test_present_values(self, value):
        assert is_present(value) is True


# ---------------------------------------------------------------------------
# normalize_options
# ---------------------------------------------------------------------------


class TestNormalizeOptions:
    def test_none(self):
        assert normalize_options(None) == {}

    def test_camel_case_style_raw(self):
        assert normalize_options({"styleRaw": "a{}"}) == {"style_raw": "a{}"}

    def test_snake_case_style_raw(self):
        assert normalize_options({"style_raw": "a{}"}) == {"style_raw": "a{}"}

    def test_unknown_keys_dropped(self):
        assert normalize_options({"foo": 1, "indent": 4}) == {"indent": 4}

    def test_version_dropped(self):
        assert normalize_options({"version": "9.9.9"}) == {}

    def test_absent_alias_does_not_hide_present_one(self):
        opts = normalize_options({"styleRaw": "a{}", "style_raw": ""})
        assert opts == {"style_raw": "a{}"}


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_defaults_only(self):
        config = resolve(DEFAULT_CONFIG)
        assert config == UserscriptConfig()
        assert config.meta == "meta.json"
        assert config.replace == "__<INSERTCSS>__"
        assert config.indent == 2
        assert config.style is None
        assert config.style_raw is None
        assert config.version == "1.0.0"

    def test_project_overrides_default(self):
        config = resolve(DEFAULT_CONFIG, {"indent": 4, "meta": "src/meta.json"})
        assert config.indent == 4
        assert config.meta == "src/meta.json"

    def test_call_overrides_project(self):
        config = resolve(DEFAULT_CONFIG, {"indent": 4}, {"indent": 8})
        assert config.indent == 8

    def test_call_overrides_default_without_project(self):
        config = resolve(DEFAULT_CONFIG, None, {"replace": "/*CSS*/"})
        assert config.replace == "/*CSS*/"

    def test_falsy_call_option_keeps_project_value(self):
        config = resolve(DEFAULT_CONFIG, {"indent": 4, "style": "a.css"}, {"indent": 0, "style": ""})
        assert config.indent == 4
        assert config.style == "a.css"

    def test_falsy_project_option_keeps_default(self):
        config = resolve(DEFAULT_CONFIG, {"indent": 0, "replace": None})
        assert config.indent == 2
        assert config.replace == "__<INSERTCSS>__"

    def test_zero_indent_cannot_be_requested(self):
        assert resolve(DEFAULT_CONFIG, None, {"indent": 0}).indent == 2

    def test_version_from_argument(self):
        config = resolve(DEFAULT_CONFIG, version="3.1.4")
        assert config.version == "3.1.4"

    def test_version_not_taken_from_options(self):
        config = resolve(DEFAULT_CONFIG, {"version": "5.0.0"}, {"version": "6.0.0"}, version="1.2.3")
        assert config.version == "1.2.3"

    def test_meta_mapping_passes_through(self):
        record = {"name": "x"}
        config = resolve(DEFAULT_CONFIG, None, {"meta": record})
        assert config.meta is record

    def test_inputs_not_mutated(self):
        project = {"indent": 4}
        call = {"styleRaw": "a{}"}
        resolve(DEFAULT_CONFIG, project, call, version="2.0.0")
        assert project == {"indent": 4}
        assert call == {"styleRaw": "a{}"}
        assert DEFAULT_CONFIG == UserscriptConfig()

    def test_custom_defaults(self):
        defaults = UserscriptConfig(indent=6, version="0.0.1")
        config = resolve(defaults, {"replace": "X"})
        assert config.indent == 6
        assert config.replace == "X"
        assert config.version == "0.0.1"


# ---------------------------------------------------------------------------
# load_project
# ---------------------------------------------------------------------------


class TestLoadProject:
    def test_package_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(
            json.dumps(
                {
                    "name": "demo",
                    "version": "1.4.0",
                    "main": "dist/demo.js",
                    "userscriptify": {"meta": "meta.json", "styleRaw": "a{}"},
                }
            ),
            encoding="utf-8",
        )
        project = load_project(path)
        assert project == ProjectDescriptor(
            version="1.4.0",
            options={"meta": "meta.json", "styleRaw": "a{}"},
            main="dist/demo.js",
        )

    def test_package_json_without_options(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"version": "0.2.0"}', encoding="utf-8")
        project = load_project(path)
        assert project.version == "0.2.0"
        assert project.options == {}
        assert project.main is None

    def test_pyproject_toml(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "demo"\nversion = "2.5.0"\n\n'
            '[tool.userscriptify]\nmain = "build/demo.js"\nindent = 4\n',
            encoding="utf-8",
        )
        project = load_project(path)
        assert project.version == "2.5.0"
        assert project.main == "build/demo.js"
        assert project.options["indent"] == 4

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_project(tmp_path / "package.json")

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_project(path)
