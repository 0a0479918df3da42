"""
Tests for configuration loading — qbit.yml / qbit.toml parsing and validation.
"""

from pathlib import Path

import pytest

from qbit.core.config.loader import (
    PROJECT_ROOT_ENV_VAR,
    ConfigError,
    find_project_file,
    load_project_config,
)
from qbit.core.models.project import InstallSpec, ProjectConfig


class TestFindProjectFile:
    def test_finds_in_current_dir(self, write_config, tmp_path: Path):
        path = write_config("scripts: {}\n")
        assert find_project_file(tmp_path) == path

    def test_walks_up(self, write_config, tmp_path: Path):
        path = write_config("scripts: {}\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_file(nested) == path

    def test_yml_preferred_over_toml(self, write_config, tmp_path: Path):
        write_config("[scripts]\n", name="qbit.toml")
        yml = write_config("scripts: {}\n")
        assert find_project_file(tmp_path) == yml

    def test_yaml_extension(self, write_config, tmp_path: Path):
        path = write_config("scripts: {}\n", name="qbit.yaml")
        assert find_project_file(tmp_path) == path

    def test_none_when_absent(self, tmp_path: Path):
        assert find_project_file(tmp_path) is None

    def test_project_root_env(self, write_config, tmp_path: Path, monkeypatch):
        path = write_config("scripts: {}\n")
        monkeypatch.setenv(PROJECT_ROOT_ENV_VAR, str(tmp_path))
        assert find_project_file() == path


class TestLoadProjectConfig:
    def test_yaml(self, write_config):
        path = write_config("""\
            scripts:
              test: pytest -q
              ci:
                - ruff check .
                - pytest
            install:
              java: "21"
              python:
                version: "3.12"
                identifiers:
                  winget: Python.Python.3.12
                  brew: python@3.12
        """)
        loaded = load_project_config(path)
        assert loaded.path == path
        assert loaded.script("test") == ["pytest -q"]
        assert loaded.script("ci") == ["ruff check .", "pytest"]

        key, java = loaded.install_target("JAVA")
        assert key == "java"
        assert java.version == "21"

        _, python = loaded.install_target("python")
        assert python.version == "3.12"
        assert python.identifier("winget") == "Python.Python.3.12"

    def test_toml(self, write_config):
        path = write_config("""\
            [scripts]
            build = ["make", "make install"]

            [install.node]
            version = "20"
            identifiers = "nodejs"
        """, name="qbit.toml")
        loaded = load_project_config(path)
        assert loaded.script("build") == ["make", "make install"]
        _, node = loaded.install_target("node")
        assert node.global_identifier == "nodejs"

    def test_empty_file(self, write_config):
        loaded = load_project_config(write_config(""))
        assert loaded.data == ProjectConfig()

    def test_discovery_returns_none(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(PROJECT_ROOT_ENV_VAR, str(tmp_path))
        assert load_project_config() is None

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_project_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_project_config(write_config("scripts: [unclosed\n"))

    def test_invalid_toml(self, write_config):
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_project_config(write_config("scripts = = 1\n", name="qbit.toml"))

    def test_non_mapping(self, write_config):
        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_project_config(write_config("- a\n- b\n"))

    def test_schema_error(self, write_config):
        with pytest.raises(ConfigError, match="Invalid project configuration"):
            load_project_config(write_config("install:\n  python:\n    identifiers: [a, b]\n"))


class TestUnquotedVersions:
    """Unquoted decimals lose trailing zeros (3.10 → 3.1), so they are rejected."""

    def test_yaml_shorthand_float(self, write_config):
        with pytest.raises(ConfigError, match='quote the version, e.g. "3.10"'):
            load_project_config(write_config("install:\n  python: 3.10\n"))

    def test_yaml_version_field_float(self, write_config):
        with pytest.raises(ConfigError, match="unquoted number"):
            load_project_config(write_config("install:\n  node:\n    version: 18.20\n"))

    def test_toml_version_float(self, write_config):
        path = write_config("[install.python]\nversion = 3.10\n", name="qbit.toml")
        with pytest.raises(ConfigError, match="quote the version"):
            load_project_config(path)

    def test_boolean_rejected(self, write_config):
        with pytest.raises(ConfigError, match="boolean"):
            load_project_config(write_config("install:\n  python:\n    version: yes\n"))

    def test_integer_still_accepted(self, write_config):
        loaded = load_project_config(write_config("install:\n  java: 21\n"))
        _, java = loaded.install_target("java")
        assert java.version == "21"

    def test_quoted_version_kept_exactly(self, write_config):
        loaded = load_project_config(write_config('install:\n  python: "3.10"\n'))
        _, python = loaded.install_target("python")
        assert python.version == "3.10"


class TestInstallSpec:
    def test_bare_string_is_version(self):
        spec = InstallSpec.model_validate("17")
        assert spec.version == "17"
        assert spec.identifiers == {}

    def test_numeric_shorthand(self):
        assert InstallSpec.model_validate(21).version == "21"

    def test_identifier_lookup_case_insensitive(self):
        spec = InstallSpec(identifiers={"WinGet": " Vendor.App "})
        assert spec.identifier("winget") == "Vendor.App"

    def test_global_identifier_has_no_per_manager_keys(self):
        spec = InstallSpec(identifiers="python3")
        assert spec.global_identifier == "python3"
        assert spec.identifier("apt") is None

    def test_missing_target(self):
        assert ProjectConfig().install_target("python") is None
