"""Tests for settings and logging setup."""

import logging
import sys

import pytest

from radixtable.config import Config
from radixtable.logging import ROOT_LOGGER, set_level, setup_logger

PATH_VARS = ["RADIXTABLE_LOG_DIR", "RADIXTABLE_TABLE_FILE", "RADIXTABLE_HISTORY_FILE", "RADIXTABLE_WORKSPACE_ROOT"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in PATH_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    def test_paths_follow_workspace_root(self, clean_env, tmp_path):
        clean_env.setenv("RADIXTABLE_WORKSPACE_ROOT", str(tmp_path))
        config = Config(_env_file=None)
        assert config.workspace_root == tmp_path
        assert config.log_dir == tmp_path / "logs"
        assert config.table_file == tmp_path / "table.json"
        assert config.history_file == tmp_path / ".history" / "history"

    def test_explicit_path_wins(self, clean_env, tmp_path):
        clean_env.setenv("RADIXTABLE_WORKSPACE_ROOT", str(tmp_path))
        clean_env.setenv("RADIXTABLE_TABLE_FILE", str(tmp_path / "elsewhere.json"))
        config = Config(_env_file=None)
        assert config.table_file == tmp_path / "elsewhere.json"
        assert config.log_dir == tmp_path / "logs"

    def test_default_root_is_working_directory(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        assert Config(_env_file=None).workspace_root == tmp_path / "work"

    def test_ensure_exists(self, clean_env, tmp_path):
        clean_env.setenv("RADIXTABLE_WORKSPACE_ROOT", str(tmp_path / "ws"))
        config = Config(_env_file=None)
        config.ensure_exists()
        assert config.log_dir.is_dir()
        assert config.history_file.parent.is_dir()


class TestLogging:
    def test_console_goes_to_stderr(self, monkeypatch, tmp_path):
        root = logging.getLogger(ROOT_LOGGER)
        monkeypatch.setattr(root, "handlers", [])
        setup_logger(log_dir=tmp_path, console=True)
        streams = [h.stream for h in root.handlers if type(h) is logging.StreamHandler]
        assert streams == [sys.stderr]
        assert not (tmp_path / "radixtable.log").exists()  # opened lazily

    def test_set_level_reaches_module_loggers(self):
        root = logging.getLogger(ROOT_LOGGER)
        original = root.level
        try:
            set_level("debug")
            assert logging.getLogger("radixtable.tables.manager").getEffectiveLevel() == logging.DEBUG
        finally:
            root.setLevel(original)
