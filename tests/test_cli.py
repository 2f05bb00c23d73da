"""Tests for the CLI entry point."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pl.cli import app
from pl.errors import HomeDirectoryError

runner = CliRunner()


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Isolated config dir for CLI tests."""
    config_dir = tmp_path / ".config" / "pl"
    config_dir.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("PL_CONFIG_DIR", str(config_dir))
    return config_dir


class TestCliImport:
    def test_help_command_works(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0, f"--help failed: {result.output}"
        assert "Usage" in result.output


class TestCliMain:
    def test_runs_launcher_with_loaded_config(self, cli_env):
        (cli_env / "config.toml").write_text('editor_command = "hx"\n')

        with patch("pl.ui.interactive.launch") as mock_launch:
            result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        cfg = mock_launch.call_args.args[0]
        assert cfg.editor_command == "hx"

    def test_malformed_config_is_fatal(self, cli_env):
        (cli_env / "config.toml").write_text("project_dirs = [\n")

        with patch("pl.ui.interactive.launch") as mock_launch:
            result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert "invalid config" in result.output
        mock_launch.assert_not_called()

    def test_home_directory_error_is_fatal(self, cli_env):
        with patch(
            "pl.ui.interactive.launch",
            side_effect=HomeDirectoryError("could not determine home directory"),
        ):
            result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "could not determine home directory" in result.output


class TestLogging:
    @pytest.fixture(autouse=True)
    def _reset_logger(self):
        logger = logging.getLogger("pl")
        handlers, level = list(logger.handlers), logger.level
        yield
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)

    def test_log_file_written_when_level_set(self, cli_env, monkeypatch):
        monkeypatch.setenv("PL_LOG_LEVEL", "debug")

        with patch("pl.ui.interactive.launch"):
            result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        logging.getLogger("pl.test").debug("hello from test")
        assert "hello from test" in (cli_env / "pl.log").read_text()

    def test_no_log_file_by_default(self, cli_env):
        with patch("pl.ui.interactive.launch"):
            runner.invoke(app, [])

        assert not (cli_env / "pl.log").exists()
