"""README preview for the selected project."""

import logging
from pathlib import Path

logger = logging.getLogger("pl.preview")

README_NAME = "README.md"
NO_README = "No README"


def read_readme(project_path: Path | None) -> str | None:
    """Return the README.md text under ``project_path``, or None if there is none to show."""
    if project_path is None:
        return None
    readme = project_path / README_NAME
    try:
        return readme.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("No README preview for %s: %s", project_path, e)
        return None
