"""Tests for configuration constants and .env loading."""

from __future__ import annotations

import os
from pathlib import Path

from resources_path.config import (
    FOLDER_NAME,
    HOME_ENV,
    MANAGED_HOST_SUBPATH,
    OVERRIDE_ENV,
    WORKSPACE_ENV,
    load_env_file,
)


class TestConstants:
    def test_folder_name(self):
        assert FOLDER_NAME == "Resources"

    def test_environment_variable_names(self):
        assert OVERRIDE_ENV == "RESOURCES_DIR"
        assert WORKSPACE_ENV == "GITHUB_WORKSPACE"
        assert HOME_ENV == "HOME"

    def test_managed_host_layout(self):
        assert MANAGED_HOST_SUBPATH == ("site", "wwwroot")


class TestLoadEnvFile:
    def test_loads_explicit_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RESOURCES_DIR", "")
        monkeypatch.delenv("RESOURCES_DIR")
        env_file = tmp_path / ".env"
        env_file.write_text("RESOURCES_DIR=/srv/assets\n")

        loaded = load_env_file(env_file)

        assert loaded == env_file
        assert os.environ["RESOURCES_DIR"] == "/srv/assets"

    def test_existing_variables_win(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RESOURCES_DIR", "/already/set")
        env_file = tmp_path / ".env"
        env_file.write_text("RESOURCES_DIR=/srv/assets\n")

        load_env_file(env_file)

        assert os.environ["RESOURCES_DIR"] == "/already/set"

    def test_finds_file_above_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RESOURCES_PATH_TEST_VAR", "")
        monkeypatch.delenv("RESOURCES_PATH_TEST_VAR")
        (tmp_path / ".env").write_text("RESOURCES_PATH_TEST_VAR=found\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        loaded = load_env_file()

        assert loaded == tmp_path / ".env"
        assert os.environ["RESOURCES_PATH_TEST_VAR"] == "found"

    def test_missing_explicit_file(self, tmp_path: Path):
        assert load_env_file(tmp_path / "nope.env") is None
