"""Hand the selected project to the configured editor."""

import logging
import shlex
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger("pl.launcher")


def build_editor_command(editor_command: str, project_path: Path) -> list[str]:
    """Build the argv that opens ``project_path``, which is always last.

    A command that names an executable as a whole (e.g. a path with spaces)
    is used as-is; anything else is split shell-style so flags work.
    """
    stripped = editor_command.strip()
    if stripped and (shutil.which(stripped) or Path(stripped).is_file()):
        return [stripped, str(project_path)]
    return shlex.split(editor_command) + [str(project_path)]


def open_in_editor(editor_command: str, project_path: Path) -> int | None:
    """Run the editor on ``project_path`` and wait for it to exit.

    Returns the editor's exit status, or None if it could not be started.
    Failures are logged, never raised.
    """
    try:
        cmd = build_editor_command(editor_command, project_path)
    except ValueError as e:
        logger.warning("Cannot parse editor command %r: %s", editor_command, e)
        return None
    if len(cmd) < 2:
        logger.warning("Editor command is empty")
        return None

    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        logger.warning("Failed to launch %s: %s", cmd[0], e)
        return None

    if result.returncode != 0:
        logger.info("%s exited with status %d", cmd[0], result.returncode)
    return result.returncode
