"""Tests for the editor hand-off."""

import os
import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from pl.launcher import build_editor_command, open_in_editor


@pytest.fixture
def spaced_editor(tmp_path: Path) -> Path:
    """An executable editor script that records the path it was given."""
    editor = tmp_path / "My Editors" / "ed"
    editor.parent.mkdir()
    editor.write_text('#!/bin/sh\nprintf "%s\\n" "$1" > "$(dirname "$0")/opened"\n')
    editor.chmod(0o755)
    return editor


class TestBuildEditorCommand:
    def test_path_is_last_argument(self):
        assert build_editor_command("nvim", Path("/src/app")) == ["nvim", "/src/app"]

    def test_command_with_flags(self):
        cmd = build_editor_command("code --wait", Path("/src/my app"))
        assert cmd == ["code", "--wait", "/src/my app"]

    def test_executable_path_with_spaces_kept_whole(self, spaced_editor: Path):
        cmd = build_editor_command(str(spaced_editor), Path("/src/app"))
        assert cmd == [str(spaced_editor), "/src/app"]


class TestOpenInEditor:
    def test_invokes_editor_with_exact_path(self):
        with patch("pl.launcher.subprocess.run") as mock_run:
            mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0)

            status = open_in_editor("nvim", Path("/src/alpha"))

        mock_run.assert_called_once_with(["nvim", "/src/alpha"], check=False)
        assert status == 0

    def test_missing_editor_swallowed(self):
        with patch("pl.launcher.subprocess.run", side_effect=FileNotFoundError("nope")):
            assert open_in_editor("no-such-editor", Path("/src/alpha")) is None

    def test_nonzero_exit_returned_not_raised(self):
        with patch("pl.launcher.subprocess.run") as mock_run:
            mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=3)
            assert open_in_editor("false", Path("/src/alpha")) == 3

    def test_unparseable_command_swallowed(self):
        with patch("pl.launcher.subprocess.run") as mock_run:
            assert open_in_editor('vim "unterminated', Path("/src/alpha")) is None
        mock_run.assert_not_called()

    def test_blank_command_swallowed(self):
        with patch("pl.launcher.subprocess.run") as mock_run:
            assert open_in_editor("   ", Path("/src/alpha")) is None
        mock_run.assert_not_called()

    @pytest.mark.skipif(shutil.which("true") is None, reason="needs the true binary")
    def test_real_process(self, tmp_path: Path):
        # "true" ignores its arguments and exits 0
        assert open_in_editor("true", tmp_path) == 0

    @pytest.mark.skipif(os.name != "posix", reason="needs a shell script editor")
    def test_editor_in_directory_with_spaces(self, spaced_editor: Path, tmp_path: Path):
        project = tmp_path / "alpha"
        project.mkdir()

        assert open_in_editor(str(spaced_editor), project) == 0
        assert (spaced_editor.parent / "opened").read_text().strip() == str(project)
